"""Middleware recording a visit for every page load."""

from __future__ import annotations

import logging

from django.conf import settings

from .services import get_recorder


logger = logging.getLogger(__name__)

LOOPBACK_PLACEHOLDER = "::1"


def get_client_identifier(request) -> str:
    """Return the forwarded address, the remote address or the loopback placeholder.

    The first header that is present wins and its value is returned verbatim,
    so proxies that send a list of hops are stored as sent.
    """

    for key in ("HTTP_X_FORWARDED_FOR", "REMOTE_ADDR"):
        value = request.META.get(key)
        if value is not None:
            return value
    return LOOPBACK_PLACEHOLDER


class VisitRecorderMiddleware:
    """Persist each page load for the recent visitor counter."""

    _EXCLUDED_PATHS = ("/favicon", "/robots.txt")

    def __init__(self, get_response, recorder=None):
        self.get_response = get_response
        self.recorder = recorder or get_recorder()
        static_url = getattr(settings, "STATIC_URL", "") or ""
        media_url = getattr(settings, "MEDIA_URL", "") or ""
        self._skipped_prefixes = tuple(
            "/" + prefix.strip("/")
            for prefix in (static_url, media_url)
            if prefix.strip("/")
        )

    def __call__(self, request):
        if self._should_track(request):
            identifier = get_client_identifier(request)
            self.recorder.record(identifier)
            logger.debug("Recorded visit to %s from %s", request.path, identifier)
        return self.get_response(request)

    def _should_track(self, request) -> bool:
        path = request.path
        if any(path.startswith(prefix) for prefix in self._skipped_prefixes):
            return False
        return not path.startswith(self._EXCLUDED_PATHS)
