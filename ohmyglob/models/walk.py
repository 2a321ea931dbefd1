from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from result import Result


@dataclass(slots=True)
class WalkStats:
    files: int = 0
    directories: int = 0
    pruned: int = 0
    matched: int = 0


@dataclass(slots=True, frozen=True)
class WalkSnapshot:
    root: str
    paths: list[str] = field(default_factory=list)
    stats: WalkStats = field(default_factory=WalkStats)


class WalkErrorCode(str, Enum):
    NOT_FOUND = "not_found"
    NOT_DIRECTORY = "not_directory"


@dataclass(slots=True, frozen=True)
class WalkError:
    code: WalkErrorCode
    path: str
    message: str


WalkResult = Result[WalkSnapshot, WalkError]
