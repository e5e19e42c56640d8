"""Normalization of URL path fragments into document path keys."""

import re

_MD_EXTENSION = re.compile(r"\.md", re.IGNORECASE)


def sanitize_path(path: str | None) -> str:
    """Turn a raw URL path fragment into a relative path key.

    Every ``.md`` occurrence is removed (case-insensitive, not only as a
    suffix), then leading and trailing slashes are stripped. Removal repeats
    until nothing is left to remove, so sanitizing twice is a no-op.

    Args:
        path: Raw path from the URL, may be None

    Returns:
        Path key relative to the document root, "" for the root itself
    """
    if not path:
        return ""

    previous = None
    while previous != path:
        previous = path
        path = _MD_EXTENSION.sub("", path)

    return path.strip("/")
