"""Upload rewrites and the remote-image allow list used for thumbnails."""

from __future__ import annotations

import re
from functools import lru_cache
from urllib.parse import urlsplit

from storefront.config import MediaSettings, RemoteImagePattern
from storefront.domain.models import SearchResultItem

UPLOADS_PROXY_PREFIX = "/api/uploads/"


@lru_cache(maxsize=64)
def _compile_pathname(pattern: str) -> re.Pattern[str]:
    # "**" spans any number of segments, "*" stays inside one segment.
    parts = re.split(r"(\*\*|\*)", pattern)
    regex = []
    for part in parts:
        if part == "**":
            regex.append(".*")
        elif part == "*":
            regex.append("[^/]*")
        else:
            regex.append(re.escape(part))
    return re.compile("^" + "".join(regex) + "$")


def _default_port(scheme: str) -> str:
    return {"http": "80", "https": "443"}.get(scheme, "")


class MediaResolver:
    def __init__(self, settings: MediaSettings | None = None) -> None:
        self._settings = settings or MediaSettings()

    @property
    def upload_origin(self) -> str:
        return str(self._settings.upload_origin).rstrip("/")

    def resolve_image_url(self, url: str) -> str:
        """Apply the ``/api/uploads/*`` rewrite; other URLs come back unchanged."""

        if url.startswith(UPLOADS_PROXY_PREFIX):
            return f"{self.upload_origin}/uploads/{url[len(UPLOADS_PROXY_PREFIX):]}"
        return url

    def is_allowed_image(self, url: str) -> bool:
        parts = urlsplit(url)
        if parts.scheme not in ("http", "https") or not parts.hostname:
            # Relative paths are served by the storefront itself.
            return not parts.scheme and not parts.netloc and url.startswith("/")
        return any(self._matches(pattern, parts) for pattern in self._settings.remote_patterns)

    def thumbnail_url(self, item: SearchResultItem) -> str | None:
        if not item.image_url:
            return None
        resolved = self.resolve_image_url(item.image_url)
        if not self.is_allowed_image(resolved):
            return None
        return resolved

    @staticmethod
    def _matches(pattern: RemoteImagePattern, parts) -> bool:
        if parts.scheme != pattern.protocol:
            return False
        if (parts.hostname or "").lower() != pattern.hostname.lower():
            return False
        port = str(parts.port) if parts.port is not None else ""
        if pattern.port:
            if port != pattern.port:
                return False
        elif port and port != _default_port(parts.scheme):
            return False
        return bool(_compile_pathname(pattern.pathname).match(parts.path or "/"))


__all__ = ["MediaResolver", "UPLOADS_PROXY_PREFIX"]
