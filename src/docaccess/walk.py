"""Best-effort recursive directory walk."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SkippedDir:
    """A subtree the walk could not read."""

    path: str
    reason: str


@dataclass
class WalkResult:
    """Files found by :func:`walk` plus every subtree that was skipped."""

    files: list[str] = field(default_factory=list)
    skipped: list[SkippedDir] = field(default_factory=list)


def walk(root: str) -> WalkResult:
    """Collect every non-directory entry under *root*, depth-first.

    Unreadable directories (missing, not a directory, permission denied)
    contribute nothing and are recorded in ``skipped``.  Their siblings
    are still visited.  Never raises ``OSError``.

    Order is ``os.scandir`` order, not sorted.
    """
    result = WalkResult()
    entries = _scan(os.path.normpath(root), result)
    if entries is None:
        return result

    # One iterator per open directory level; nesting depth is unbounded
    stack = [iter(entries)]
    while stack:
        for path, is_dir in stack[-1]:
            if not is_dir:
                result.files.append(path)
                continue
            children = _scan(path, result)
            if children is not None:
                stack.append(iter(children))
                break
        else:
            stack.pop()
    return result


def _scan(directory: str, result: WalkResult) -> list[tuple[str, bool]] | None:
    """Read one directory as ``(full_path, is_dir)`` pairs, or None if unreadable."""
    try:
        with os.scandir(directory) as it:
            # is_dir() follows symlinks and returns False on stat errors
            return [(os.path.join(directory, entry.name), entry.is_dir()) for entry in it]
    except OSError as e:
        reason = e.strerror or type(e).__name__
        logger.warning("Cannot find the files in folder %s: %s", directory, reason)
        result.skipped.append(SkippedDir(path=directory, reason=reason))
        return None
