"""URI codec — convert between ``scheme://`` strings and local paths."""

from __future__ import annotations

import os
import re
from pathlib import Path
from urllib.parse import quote, unquote, urlparse
from urllib.request import url2pathname

from .exceptions import InvalidReferenceError

FILE_SCHEME = "file"

_SCHEME_PREFIX_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")


def has_uri_scheme(value: str) -> bool:
    """Return True if *value* starts with a ``scheme://`` prefix."""
    return _SCHEME_PREFIX_RE.match(value) is not None


def parse_uri(uri: str) -> str:
    """Parse *uri* and return its filesystem path component.

    ``file`` URIs are decoded into a platform-native path; a non-local
    authority becomes a UNC-style ``//host/path``.  For any other scheme
    the percent-decoded path component is returned as-is.

    Raises:
        InvalidReferenceError: If *uri* has no ``scheme://`` prefix or
            cannot be parsed.
    """
    if not has_uri_scheme(uri):
        raise InvalidReferenceError(f"Not a URI: {uri!r}")

    try:
        parsed = urlparse(uri)
    except ValueError as e:
        raise InvalidReferenceError(f"Malformed URI {uri!r}: {e}") from e

    raw_path = parsed.path or "/"
    if parsed.scheme.lower() != FILE_SCHEME:
        return unquote(raw_path)

    if parsed.netloc and parsed.netloc.lower() != "localhost":
        raw_path = f"//{parsed.netloc}{raw_path}"
    if os.name == "nt":
        return url2pathname(raw_path)
    return unquote(raw_path)


def encode_uri(path: str) -> str:
    """Encode a local *path* as a ``file://`` URI.

    Relative paths are made absolute against the current working
    directory first, so this is total for any path string.  Absolute
    POSIX paths keep their segments as written, ``.`` and ``..`` included.
    """
    if not os.path.isabs(path):
        path = os.path.abspath(path)
    if os.name == "nt":
        return Path(path).as_uri()
    return f"{FILE_SCHEME}://{quote(path)}"
