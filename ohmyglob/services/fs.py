from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Protocol, TypeAlias

# (dirpath, dirnames, filenames) — dirnames may be pruned in place.
WalkEntry: TypeAlias = tuple[str, list[str], list[str]]


class FileSystem(Protocol):
    def expanduser(self, path: str) -> str: ...

    def exists(self, path: str) -> bool: ...

    def is_dir(self, path: str) -> bool: ...

    def read_text(self, path: str) -> str: ...

    def walk(self, root: str) -> Iterator[WalkEntry]: ...


class OsFileSystem:
    def expanduser(self, path: str) -> str:
        return os.path.expanduser(path)

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    def read_text(self, path: str) -> str:
        with open(path, encoding="utf-8") as f:
            return f.read()

    def walk(self, root: str) -> Iterator[WalkEntry]:
        # Top-down so callers can prune dirnames before descent.
        yield from os.walk(root, topdown=True)


DEFAULT_FS: FileSystem = OsFileSystem()
