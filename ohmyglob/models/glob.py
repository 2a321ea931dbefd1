from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, TypeAlias

from ohmyglob.models.enums import GlobShape
from ohmyglob.models.segments import Literal, Segment


def _reduced(*texts: str) -> tuple[Segment, ...]:
    return tuple(Literal(text, False) for text in texts)


@dataclass(slots=True, frozen=True)
class GeneralPlan:
    shape: ClassVar[GlobShape] = GlobShape.GENERAL

    segments: tuple[Segment, ...]


@dataclass(slots=True, frozen=True)
class RecursiveSuffixPlan:
    """``prefix/**/*suffix``.  ``prefix`` is empty or ends with ``/``."""

    shape: ClassVar[GlobShape] = GlobShape.RECURSIVE_SUFFIX

    suffix: str
    prefix: str = ""

    @property
    def segments(self) -> tuple[Segment, ...]:
        if self.prefix:
            return _reduced(self.suffix, self.prefix)
        return _reduced(self.suffix)


@dataclass(slots=True, frozen=True)
class RecursiveFixedFilePlan:
    """``prefix/**/filename``.  ``prefix`` is empty or ends with ``/``."""

    shape: ClassVar[GlobShape] = GlobShape.RECURSIVE_FIXED_FILE

    filename: str
    prefix: str = ""

    @property
    def segments(self) -> tuple[Segment, ...]:
        if self.prefix:
            return _reduced(self.filename, self.prefix)
        return _reduced(self.filename)


@dataclass(slots=True, frozen=True)
class FixedPathSuffixPlan:
    """``path/to/dir/*suffix``.  ``prefix`` always ends with ``/``."""

    shape: ClassVar[GlobShape] = GlobShape.FIXED_PATH_SUFFIX

    prefix: str
    suffix: str

    @property
    def segments(self) -> tuple[Segment, ...]:
        return _reduced(self.prefix, self.suffix)


MatchPlan: TypeAlias = GeneralPlan | RecursiveSuffixPlan | RecursiveFixedFilePlan | FixedPathSuffixPlan


@dataclass(slots=True, frozen=True)
class CompiledGlob:
    # kept for diagnostics only; matching never looks at it
    original: str
    plan: MatchPlan

    @property
    def shape(self) -> GlobShape:
        return self.plan.shape

    @property
    def segments(self) -> tuple[Segment, ...]:
        return self.plan.segments

    def match(self, path: str) -> bool:
        # Import here to avoid circular import at module level.
        from ohmyglob.services.matcher import match

        return match(self, path)

    def __str__(self) -> str:
        return self.original
