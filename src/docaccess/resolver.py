"""PathResolver — normalize references, resolve relative paths, list files."""

from __future__ import annotations

import os

from .exceptions import MissingWorkspaceRootError
from .ref import Reference, UriRef, parse_reference
from .uris import encode_uri, parse_uri
from .walk import WalkResult, walk


class PathResolver:
    """Resolves document references against a fixed process root.

    ``process_root`` is captured once by the caller (normally the working
    directory at startup) and never changes.  ``workspace_root`` is an
    optional URI or path used only by :meth:`to_workspace_relative`.

    All methods are synchronous.  Only the ``list_files*`` family touches
    the filesystem.
    """

    def __init__(self, process_root: str, workspace_root: str | None = None) -> None:
        self.process_root = os.path.abspath(process_root)
        self.workspace_root = workspace_root

    # =========================================================================
    # Normalization
    # =========================================================================

    def normalize(self, ref: str | Reference) -> str:
        """Turn any reference form into an absolute, platform-native path.

        Pure: performs no filesystem access.
        """
        ref = parse_reference(ref)
        if isinstance(ref, UriRef):
            return ref.path

        path = ref.path
        if not path.startswith(self.process_root):
            path = os.path.abspath(path)
        # Round-trip through the URI codec for consistent separators
        return parse_uri(encode_uri(path))

    # =========================================================================
    # Relative Resolution
    # =========================================================================

    def resolve_relative(self, from_ref: str | Reference, target: str) -> str:
        """Join *target* onto the directory containing *from_ref*.

        An absolute *target* replaces the directory entirely.
        """
        base_dir = os.path.dirname(self.normalize(from_ref))
        return os.path.normpath(os.path.join(base_dir, target))

    def resolve_relative_as_uri(self, from_ref: str | Reference, target: str) -> str:
        """Same as :meth:`resolve_relative`, encoded as a ``file://`` URI."""
        return encode_uri(self.resolve_relative(from_ref, target))

    # =========================================================================
    # Directory Enumeration
    # =========================================================================

    def walk(self, root: str) -> WalkResult:
        """Walk *root*, returning found files and skipped subtrees."""
        return walk(root)

    def list_files(self, root: str) -> list[str]:
        """List every file under *root*.  Returns ``[]`` if unreadable."""
        return walk(root).files

    def list_files_relative_from(self, sub_folder: str, from_ref: str | Reference) -> list[str]:
        """List files under *sub_folder*, resolved relative to *from_ref*."""
        return self.list_files(self.resolve_relative(from_ref, sub_folder))

    def list_files_relative_from_as_uri(
        self, sub_folder: str, from_ref: str | Reference
    ) -> list[str]:
        """Same as :meth:`list_files_relative_from`, each path as a URI."""
        return [encode_uri(f) for f in self.list_files_relative_from(sub_folder, from_ref)]

    # =========================================================================
    # Workspace-Relative Paths
    # =========================================================================

    def to_workspace_relative(self, uri: str | Reference) -> str:
        """Express *uri* relative to the workspace root.

        This is a literal string strip, not path algebra: the first
        occurrence of the root's path is removed, then one leading
        separator.  A sibling sharing a name prefix (``/ws-other`` under
        ``/ws``) is stripped too.  Only call this for workspace-nested
        references.

        Raises:
            MissingWorkspaceRootError: If no workspace root is configured.
        """
        if self.workspace_root is None:
            raise MissingWorkspaceRootError(
                "No workspace root configured; cannot compute a workspace-relative path"
            )
        root_path = self.normalize(self.workspace_root)
        local = self.normalize(uri).replace(root_path, "", 1)
        if local[:1] in ("/", "\\"):
            local = local[1:]
        return local
