"""Reference — the two forms a document location can take."""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import InvalidReferenceError
from .uris import has_uri_scheme, parse_uri


@dataclass(frozen=True, slots=True)
class UriRef:
    """A reference given in ``scheme://`` form.

    Attributes:
        uri: The original URI string.
        path: Filesystem path decoded from the URI.
    """

    uri: str
    path: str


@dataclass(frozen=True, slots=True)
class LocalPathRef:
    """A reference given as a local path (absolute or relative)."""

    path: str


Reference = UriRef | LocalPathRef


def parse_reference(value: str | Reference) -> Reference:
    """Classify *value* as a URI or local path reference.

    Already-parsed references pass through unchanged.
    """
    if isinstance(value, UriRef | LocalPathRef):
        return value
    if not isinstance(value, str):
        raise InvalidReferenceError(f"Reference must be a string, got {type(value).__name__}")
    if "\x00" in value:
        raise InvalidReferenceError("Reference contains null bytes")
    if has_uri_scheme(value):
        return UriRef(uri=value, path=parse_uri(value))
    return LocalPathRef(path=value)
