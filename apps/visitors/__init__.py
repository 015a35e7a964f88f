"""Recent visitor counter: visit recording, windowed counts and retention purge."""
