from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from ohmyglob.models.enums import GlobShape
from ohmyglob.models.glob import CompiledGlob
from ohmyglob.services.compiler import compile_glob
from ohmyglob.services.matcher import match


def match_any(globs: Iterable[CompiledGlob], path: str) -> bool:
    for g in globs:
        if match(g, path):
            return True
    return False


@dataclass(slots=True, frozen=True)
class GlobSet:
    """Include/exclude pattern pair, compiled once and shared read-only.

    A path is selected when it matches any include (or no includes are
    configured) and no exclude.
    """

    include: tuple[CompiledGlob, ...] = ()
    exclude: tuple[CompiledGlob, ...] = ()

    def is_included(self, path: str) -> bool:
        return not self.include or match_any(self.include, path)

    def is_excluded(self, path: str) -> bool:
        return match_any(self.exclude, path)

    def matches(self, path: str) -> bool:
        return self.is_included(path) and not self.is_excluded(path)


def compile_globset(include: Iterable[str] = (), exclude: Iterable[str] = ()) -> GlobSet:
    return GlobSet(
        include=tuple(compile_glob(p) for p in include),
        exclude=tuple(compile_glob(p) for p in exclude),
    )


def filter_paths(globset: GlobSet, paths: Iterable[str]) -> Iterator[str]:
    """Lazily yield the *paths* selected by *globset*, preserving order."""
    for path in paths:
        if globset.matches(path):
            yield path


def shape_counts(globs: Iterable[CompiledGlob]) -> dict[GlobShape, int]:
    """Count how many patterns took each matching strategy."""
    counts = Counter(g.shape for g in globs)
    return {shape: counts.get(shape, 0) for shape in GlobShape}
