"""Path helpers for building alias URLs."""

from __future__ import annotations

from urllib.parse import urlsplit, urlunsplit


def combine_paths(path1: str, path2: str) -> str:
    """Join a base URI or path with a path that starts with "/".

    Trailing slashes of ``path1`` are dropped at the join point, and the
    result loses its trailing slashes. A result that would be empty is "/".

    Example:
        combine_paths("http://example.com/base/", "/foo")  # "http://example.com/base/foo"
        combine_paths("", "/")                             # "/"
    """
    path = (path1.rstrip("/") + path2).rstrip("/")
    return path or "/"


def left_part_path(uri: str) -> str:
    """Return scheme, authority and path of an absolute URI.

    Query and fragment are removed; an empty path becomes "/".

    Args:
        uri: Absolute URI, e.g. "https://example.com/en?x=1#top".

    Returns:
        The URI up to and including its path, e.g. "https://example.com/en".
    """
    parts = urlsplit(uri)
    return urlunsplit((parts.scheme, parts.netloc, parts.path or "/", "", ""))
