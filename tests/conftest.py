"""Shared fixtures for docaccess tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from docaccess.accessor import LocalFileAccessor
from docaccess.config import AccessorConfig
from docaccess.resolver import PathResolver

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def resolver(tmp_path: Path) -> PathResolver:
    """PathResolver whose process root is a temporary directory."""
    return PathResolver(process_root=str(tmp_path))


@pytest.fixture
def accessor(tmp_path: Path) -> LocalFileAccessor:
    """LocalFileAccessor with its process and workspace roots at tmp_path."""
    config = AccessorConfig(process_root=str(tmp_path), workspace_root=tmp_path.as_uri())
    return LocalFileAccessor(config)


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """Small project tree: a.txt, sub/b.txt, sub/deep/c.md, empty/."""
    root = tmp_path / "proj"
    (root / "sub" / "deep").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "a.txt").write_text("a")
    (root / "sub" / "b.txt").write_text("b")
    (root / "sub" / "deep" / "c.md").write_text("c")
    return root


@pytest.fixture
def locked_dir(tree: Path):
    """Adds an unreadable proj/locked/ (with a file inside) to ``tree``."""
    locked = tree / "locked"
    locked.mkdir()
    (locked / "secret.txt").write_text("x")
    locked.chmod(0)
    yield locked
    locked.chmod(0o755)
