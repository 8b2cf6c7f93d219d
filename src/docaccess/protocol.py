"""FileAccessor protocol — the surface exposed to document-processing tools."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .ref import Reference


@runtime_checkable
class FileAccessor(Protocol):
    """Reads documents and resolves references between them.

    Content operations are async because they may touch disk; path
    operations are synchronous and pure apart from directory listing.
    """

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    async def check_exists(self, ref: str | Reference) -> bool: ...

    async def get_contents(self, ref: str | Reference) -> str: ...

    # ------------------------------------------------------------------
    # Discovery
    # ------------------------------------------------------------------

    def list_files(self, root: str) -> list[str]: ...

    def list_files_relative_from(
        self, sub_folder: str, from_ref: str | Reference
    ) -> list[str]: ...

    def list_files_relative_from_as_uri(
        self, sub_folder: str, from_ref: str | Reference
    ) -> list[str]: ...

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve_relative(self, from_ref: str | Reference, target: str) -> str: ...

    def resolve_relative_as_uri(self, from_ref: str | Reference, target: str) -> str: ...

    def to_workspace_relative(self, uri: str | Reference) -> str: ...
