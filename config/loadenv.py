import os
from pathlib import Path

from dotenv import load_dotenv


DEFAULT_ENV_DIR = Path(__file__).resolve().parent.parent / "envs"


def loadenv(env_dir: Path | None = None) -> list[Path]:
    """Load ``*.env`` files without overriding variables already set.

    The directory defaults to ``envs/`` at the repository root and can be
    moved with ``VISITORS_ENV_DIR``. Returns the files that were read.
    """

    if env_dir is None:
        env_dir = Path(os.environ.get("VISITORS_ENV_DIR") or DEFAULT_ENV_DIR)
    if not env_dir.exists():
        return []
    loaded = sorted(env_dir.glob("*.env"))
    for env_file in loaded:
        load_dotenv(env_file, override=False)
    return loaded
