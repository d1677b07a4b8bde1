"""Public URL normalization.

Every URL the site emits goes through the same pass, so alias URLs look
exactly like the URLs produced by the canonical URL algorithm: same
escaping, same extension and trailing-slash policy, same virtual path.
"""

from __future__ import annotations

import re
from urllib.parse import quote, urlsplit, urlunsplit

from ..core.config import RoutingConfig

# Characters left untouched when escaping a path. "%" is only safe as
# the start of an existing %XX escape.
_PATH_SAFE = "/%:@!$&'()*+,;=-._~"
_LONE_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")


class UriNormalizer:
    """Apply the site's public URL convention to absolute or relative URIs.

    Example:
        normalizer = UriNormalizer(RoutingConfig(add_trailing_slash=True))
        normalizer.normalize("/about")                 # "/about/"
        normalizer.normalize("http://example.com")     # "http://example.com/"
    """

    def __init__(self, config: RoutingConfig | None = None) -> None:
        """Initialize with routing configuration.

        Args:
            config: URL conventions. Defaults to RoutingConfig().
        """
        self._config = config or RoutingConfig()

    @property
    def config(self) -> RoutingConfig:
        """Routing configuration in use."""
        return self._config

    def normalize(self, uri: str) -> str:
        """Normalize a URI for public use.

        Args:
            uri: Absolute URI ("https://host/path") or site-relative path
                ("/path").

        Returns:
            Normalized URI. Relative input stays relative and is prefixed
            with the application path.
        """
        parts = urlsplit(uri)
        if parts.scheme and parts.netloc:
            path = self._apply_path_policy(_escape_path(parts.path) or "/")
            return urlunsplit(
                (parts.scheme, parts.netloc, path, parts.query, parts.fragment)
            )

        path, suffix = _split_relative(uri)
        path = self._apply_path_policy(_escape_path(path))
        return self._to_absolute_path(path) + suffix

    def _apply_path_policy(self, path: str) -> str:
        if path == "/":
            return path
        if not self._config.use_directory_urls:
            return path.rstrip("/") + self._config.legacy_extension
        if self._config.add_trailing_slash and not path.endswith("/"):
            return path + "/"
        return path

    def _to_absolute_path(self, path: str) -> str:
        """Prefix a site-relative path with the application path."""
        app_path = self._config.application_path.rstrip("/")
        if not path.startswith("/"):
            path = "/" + path
        return app_path + path


def _escape_path(path: str) -> str:
    return quote(_LONE_PERCENT.sub("%25", path), safe=_PATH_SAFE)


def _split_relative(uri: str) -> tuple[str, str]:
    """Split a relative URI into its path and its "?query#fragment" tail.

    A leading "//" belongs to the path, never to an authority.
    """
    for i, ch in enumerate(uri):
        if ch in "?#":
            return uri[:i], uri[i:]
    return uri, ""
