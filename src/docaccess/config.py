"""AccessorConfig — process and workspace roots."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

ENV_WORKSPACE_ROOT = "DOCACCESS_WORKSPACE_ROOT"
ENV_ENCODING = "DOCACCESS_ENCODING"

DEFAULT_ENCODING = "utf-8"


@dataclass
class AccessorConfig:
    """Configuration for a :class:`~docaccess.accessor.LocalFileAccessor`."""

    process_root: str = field(default_factory=os.getcwd)
    """Absolute path captured once at startup.  Never mutated afterwards."""

    workspace_root: str | None = None
    """URI or path of the workspace's top folder, if known."""

    encoding: str = DEFAULT_ENCODING
    """Text encoding used when reading files from disk."""

    def __post_init__(self) -> None:
        self.process_root = os.path.abspath(self.process_root)
        if self.workspace_root == "":
            self.workspace_root = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AccessorConfig:
        """Build a config from ``DOCACCESS_*`` environment variables."""
        env = os.environ if environ is None else environ
        return cls(
            workspace_root=env.get(ENV_WORKSPACE_ROOT) or None,
            encoding=env.get(ENV_ENCODING) or DEFAULT_ENCODING,
        )
