"""LocalFileAccessor — open documents first, then the local disk."""

from __future__ import annotations

import asyncio
import logging
import os
from typing import TYPE_CHECKING

from .config import AccessorConfig
from .documents import OpenDocuments
from .exceptions import PathNotFoundError, ReadError
from .resolver import PathResolver

if TYPE_CHECKING:
    from .ref import Reference

logger = logging.getLogger(__name__)


class LocalFileAccessor:
    """FileAccessor backed by an :class:`OpenDocuments` set and the host disk.

    Implements the FileAccessor protocol.  Path resolution is delegated to
    a :class:`PathResolver` built from *config*.
    """

    def __init__(
        self,
        config: AccessorConfig | None = None,
        documents: OpenDocuments | None = None,
    ) -> None:
        self.config = config if config is not None else AccessorConfig()
        self.documents = documents if documents is not None else OpenDocuments()
        self.resolver = PathResolver(
            process_root=self.config.process_root,
            workspace_root=self.config.workspace_root,
        )

    # =========================================================================
    # Content
    # =========================================================================

    async def check_exists(self, ref: str | Reference) -> bool:
        """Check if the path behind *ref* exists on disk."""
        path = self.resolver.normalize(ref)
        return await asyncio.to_thread(os.path.exists, path)

    async def get_contents(self, ref: str | Reference) -> str:
        """Return the text of *ref*.

        An open document's live text wins over the file on disk, since it
        may not be saved yet.

        Raises:
            InvalidReferenceError: If *ref* is malformed.
            PathNotFoundError: If the file does not exist.
            ReadError: If the file exists but cannot be read or decoded.
        """
        text = self.documents.get_text(ref)
        if text is not None:
            return text

        path = self.resolver.normalize(ref)
        if not await asyncio.to_thread(os.path.exists, path):
            raise PathNotFoundError(f"File does not exist: {path}")

        logger.debug("Reading %s from disk", path)
        try:
            return await asyncio.to_thread(self._read_text, path)
        except FileNotFoundError as e:
            raise PathNotFoundError(f"File does not exist: {path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError(f"Cannot read file {path}: {e}") from e

    def _read_text(self, path: str) -> str:
        with open(path, encoding=self.config.encoding) as f:
            return f.read()

    # =========================================================================
    # Discovery & Resolution (delegated to PathResolver)
    # =========================================================================

    def list_files(self, root: str) -> list[str]:
        return self.resolver.list_files(root)

    def list_files_relative_from(self, sub_folder: str, from_ref: str | Reference) -> list[str]:
        return self.resolver.list_files_relative_from(sub_folder, from_ref)

    def list_files_relative_from_as_uri(
        self, sub_folder: str, from_ref: str | Reference
    ) -> list[str]:
        return self.resolver.list_files_relative_from_as_uri(sub_folder, from_ref)

    def resolve_relative(self, from_ref: str | Reference, target: str) -> str:
        return self.resolver.resolve_relative(from_ref, target)

    def resolve_relative_as_uri(self, from_ref: str | Reference, target: str) -> str:
        return self.resolver.resolve_relative_as_uri(from_ref, target)

    def to_workspace_relative(self, uri: str | Reference) -> str:
        return self.resolver.to_workspace_relative(uri)
