# Directory walker feeding the matcher.
#
# Paths handed to the GlobSet are root-relative and "/"-joined regardless of
# the host separator, since the pattern language only knows "/".  With
# prune=True a directory whose relative path is excluded is not descended
# into, the same way a gitignore'd directory hides everything below it.

from __future__ import annotations

import logging
import os

from result import Err, Ok

from ohmyglob.models.walk import WalkError, WalkErrorCode, WalkResult, WalkSnapshot, WalkStats
from ohmyglob.services.fs import DEFAULT_FS, FileSystem
from ohmyglob.services.globset import GlobSet

logger = logging.getLogger(__name__)


def _relative(root: str, dirpath: str, name: str) -> str:
    rel_dir = os.path.relpath(dirpath, root)
    if rel_dir == os.curdir:
        return name
    return f"{rel_dir.replace(os.sep, '/')}/{name}"


def walk_paths(
    root: str,
    globset: GlobSet,
    fs: FileSystem = DEFAULT_FS,
    prune: bool = True,
    include_dirs: bool = False,
) -> WalkResult:
    """Walk *root* and collect the relative paths selected by *globset*.

    Entries are visited in sorted order so the output is stable.
    """
    resolved = fs.expanduser(root)
    if not fs.exists(resolved):
        return Err(WalkError(WalkErrorCode.NOT_FOUND, resolved, f"Path does not exist: {resolved}"))
    if not fs.is_dir(resolved):
        return Err(WalkError(WalkErrorCode.NOT_DIRECTORY, resolved, f"Not a directory: {resolved}"))

    stats = WalkStats()
    paths: list[str] = []

    for dirpath, dirnames, filenames in fs.walk(resolved):
        dirnames.sort()
        kept: list[str] = []
        for name in dirnames:
            rel = _relative(resolved, dirpath, name)
            stats.directories += 1
            if prune and globset.is_excluded(rel):
                stats.pruned += 1
                logger.debug("pruned %s", rel)
                continue
            kept.append(name)
            if include_dirs and globset.matches(rel):
                paths.append(rel)
        # In-place so the walker skips pruned directories.
        dirnames[:] = kept

        for name in sorted(filenames):
            rel = _relative(resolved, dirpath, name)
            stats.files += 1
            if globset.matches(rel):
                paths.append(rel)

    stats.matched = len(paths)
    return Ok(WalkSnapshot(root=resolved, paths=paths, stats=stats))
