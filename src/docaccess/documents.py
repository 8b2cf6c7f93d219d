"""OpenDocuments — the live set of documents open in an editing session."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .exceptions import PathNotFoundError
from .ref import LocalPathRef, UriRef, parse_reference
from .uris import FILE_SCHEME, encode_uri

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .ref import Reference

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OpenDocument:
    """Snapshot of an open editor buffer.

    Attributes:
        uri: Canonical URI of the document.
        text: Current, possibly unsaved, text.
        version: Monotonic version reported by the editor.
        language_id: Editor language identifier, e.g. ``"markdown"``.
    """

    uri: str
    text: str
    version: int = 0
    language_id: str = ""


def document_key(ref: str | Reference) -> str:
    """Canonical URI used to key a document.

    Local paths and ``file://`` URIs are re-encoded so that the same file
    maps to one key whatever form it was given in.  Other schemes are
    kept verbatim.
    """
    ref = parse_reference(ref)
    if isinstance(ref, UriRef):
        if ref.uri.lower().startswith(f"{FILE_SCHEME}://"):
            return encode_uri(ref.path)
        return ref.uri
    return encode_uri(ref.path)


class OpenDocuments:
    """In-memory document set, keyed by canonical URI.

    Editors open, change, and close documents here; content lookups
    consult it before falling back to disk.
    """

    def __init__(self) -> None:
        self._docs: dict[str, OpenDocument] = {}

    def open(
        self,
        uri: str | Reference,
        text: str,
        version: int = 0,
        language_id: str = "",
    ) -> OpenDocument:
        """Add or replace a document."""
        key = document_key(uri)
        doc = OpenDocument(uri=key, text=text, version=version, language_id=language_id)
        self._docs[key] = doc
        logger.debug("Opened %s (version %d)", key, version)
        return doc

    def update(self, uri: str | Reference, text: str, version: int) -> OpenDocument:
        """Replace the text of an open document.

        Raises:
            PathNotFoundError: If the document is not open.
            ValueError: If *version* is older than the current one.
        """
        key = document_key(uri)
        current = self._docs.get(key)
        if current is None:
            raise PathNotFoundError(f"Document not open: {key}")
        if version < current.version:
            raise ValueError(
                f"Stale update for {key}: version {version} < {current.version}"
            )
        doc = OpenDocument(uri=key, text=text, version=version, language_id=current.language_id)
        self._docs[key] = doc
        return doc

    def close(self, uri: str | Reference) -> bool:
        """Remove a document.  Return True if it was open."""
        key = document_key(uri)
        if self._docs.pop(key, None) is None:
            return False
        logger.debug("Closed %s", key)
        return True

    def get(self, uri: str | Reference) -> OpenDocument | None:
        return self._docs.get(document_key(uri))

    def get_text(self, uri: str | Reference) -> str | None:
        """Live text for *uri*, or None if it is not open."""
        doc = self.get(uri)
        return doc.text if doc is not None else None

    def __contains__(self, uri: object) -> bool:
        if not isinstance(uri, str | UriRef | LocalPathRef):
            return False
        return self.get(uri) is not None

    def __len__(self) -> int:
        return len(self._docs)

    def __iter__(self) -> Iterator[str]:
        return iter(self._docs)
