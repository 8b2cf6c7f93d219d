"""Tests for walk.py — best-effort recursive listing."""

from __future__ import annotations

import errno
import logging
import os
import sys

import pytest

from docaccess.walk import SkippedDir, walk

needs_unreadable_dirs = pytest.mark.skipif(
    sys.platform == "win32" or (hasattr(os, "geteuid") and os.geteuid() == 0),
    reason="chmod 0 does not block reads on Windows or for root",
)


class TestWalk:
    def test_finds_all_files(self, tree):
        result = walk(str(tree))
        assert sorted(result.files) == sorted(
            [
                str(tree / "a.txt"),
                str(tree / "sub" / "b.txt"),
                str(tree / "sub" / "deep" / "c.md"),
            ]
        )
        assert result.skipped == []

    def test_each_file_once(self, tree):
        files = walk(str(tree)).files
        assert len(files) == len(set(files)) == 3

    def test_empty_dir(self, tmp_path):
        result = walk(str(tmp_path))
        assert result.files == []
        assert result.skipped == []

    def test_root_is_normalized(self, tree):
        messy = os.path.join(str(tree), "sub", "..", ".", "sub")
        assert sorted(walk(messy).files) == sorted(
            [str(tree / "sub" / "b.txt"), str(tree / "sub" / "deep" / "c.md")]
        )


    @pytest.mark.skipif(sys.platform == "win32", reason="MAX_PATH limits deep trees")
    def test_deeply_nested_tree(self, tmp_path, monkeypatch):
        depth = 1100
        monkeypatch.chdir(tmp_path)
        for _ in range(depth):
            os.mkdir("a")
            os.chdir("a")
        with open("f.txt", "w") as f:
            f.write("deep")

        try:
            result = walk(str(tmp_path))
            expected = os.path.join(str(tmp_path), *["a"] * depth, "f.txt")
            assert result.files == [expected]
            assert result.skipped == []
        finally:
            # rmtree recurses per level, so unwind by hand
            os.remove("f.txt")
            for _ in range(depth):
                os.chdir("..")
                os.rmdir("a")

    def test_depth_first_order(self, tmp_path, monkeypatch):
        (tmp_path / "d").mkdir()
        (tmp_path / "d" / "inner.txt").write_text("i")
        (tmp_path / "first.txt").write_text("1")
        (tmp_path / "last.txt").write_text("2")
        order = ["first.txt", "d", "last.txt"]
        real_scandir = os.scandir

        class OrderedScan:
            def __init__(self, path):
                self._it = real_scandir(path)
                self._entries = list(self._it)
                if os.fspath(path) == str(tmp_path):
                    self._entries.sort(key=lambda e: order.index(e.name))

            def __enter__(self):
                return iter(self._entries)

            def __exit__(self, *exc):
                self._it.close()

        monkeypatch.setattr(os, "scandir", OrderedScan)
        assert walk(str(tmp_path)).files == [
            str(tmp_path / "first.txt"),
            str(tmp_path / "d" / "inner.txt"),
            str(tmp_path / "last.txt"),
        ]


class TestWalkFailures:
    def test_missing_root(self, tmp_path):
        missing = tmp_path / "nope"
        result = walk(str(missing))
        assert result.files == []
        assert len(result.skipped) == 1
        assert result.skipped[0].path == str(missing)

    def test_root_is_a_file(self, tree):
        result = walk(str(tree / "a.txt"))
        assert result.files == []
        assert [s.path for s in result.skipped] == [str(tree / "a.txt")]

    def test_failure_is_logged(self, tmp_path, caplog):
        missing = tmp_path / "nope"
        with caplog.at_level(logging.WARNING, logger="docaccess.walk"):
            walk(str(missing))
        assert str(missing) in caplog.text

    def test_denied_subtree_keeps_siblings(self, tree, monkeypatch):
        denied = str(tree / "sub")
        real_scandir = os.scandir

        def scandir(path):
            if os.fspath(path) == denied:
                raise PermissionError(errno.EACCES, "Permission denied", os.fspath(path))
            return real_scandir(path)

        monkeypatch.setattr(os, "scandir", scandir)
        result = walk(str(tree))
        assert result.files == [str(tree / "a.txt")]
        assert result.skipped == [SkippedDir(path=denied, reason="Permission denied")]

    def test_denied_nested_subtree(self, tree, monkeypatch):
        denied = str(tree / "sub" / "deep")
        real_scandir = os.scandir

        def scandir(path):
            if os.fspath(path) == denied:
                raise PermissionError(errno.EACCES, "Permission denied", os.fspath(path))
            return real_scandir(path)

        monkeypatch.setattr(os, "scandir", scandir)
        result = walk(str(tree))
        assert sorted(result.files) == sorted([str(tree / "a.txt"), str(tree / "sub" / "b.txt")])
        assert [s.path for s in result.skipped] == [denied]

    @needs_unreadable_dirs
    def test_unreadable_subtree_keeps_siblings(self, tree, locked_dir):
        result = walk(str(tree))
        assert sorted(result.files) == sorted(
            [
                str(tree / "a.txt"),
                str(tree / "sub" / "b.txt"),
                str(tree / "sub" / "deep" / "c.md"),
            ]
        )
        assert len(result.skipped) == 1
        skipped = result.skipped[0]
        assert isinstance(skipped, SkippedDir)
        assert skipped.path == str(locked_dir)
        assert skipped.reason

    @needs_unreadable_dirs
    def test_unreadable_root(self, locked_dir):
        result = walk(str(locked_dir))
        assert result.files == []
        assert result.skipped[0].path == str(locked_dir)
