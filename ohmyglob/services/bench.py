from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ohmyglob.models.enums import GlobShape
from ohmyglob.services.compiler import compile_glob, compile_segments
from ohmyglob.services.matcher import general_match, match

Clock = Callable[[], int]


@dataclass(slots=True, frozen=True)
class BenchCase:
    name: str
    pattern: str
    path: str


@dataclass(slots=True, frozen=True)
class BenchResult:
    case: BenchCase
    shape: GlobShape
    matched: bool
    iterations: int
    compile_ns: float
    match_ns: float
    # general_match on the unreduced segments, for comparison with the fast path
    general_ns: float

    @property
    def speedup(self) -> float:
        return self.general_ns / self.match_ns if self.match_ns else 0.0


_YAML = "dev/lib/the_cmd/commands/commands.yaml"
_RB = "dev/lib/the_cmd/commands/build_from_scratch.rb"

DEFAULT_CASES: tuple[BenchCase, ...] = (
    BenchCase("literal paths", _YAML, _YAML),
    BenchCase("subdir from root", "**/*.yaml", _YAML),
    BenchCase("negative subdir from root", "**/*.yaml", _RB),
    BenchCase("recursive fixed file", "**/__package.rb", "dev/lib/the_cmd/commands/__package.rb"),
    BenchCase("negative recursive fixed file", "**/__package.rb", _RB),
)


def _per_op(clock: Clock, iterations: int, fn: Callable[[], object]) -> float:
    start = clock()
    for _ in range(iterations):
        fn()
    return (clock() - start) / iterations


def run_bench(
    cases: Iterable[BenchCase] = DEFAULT_CASES,
    iterations: int = 100_000,
    clock: Clock = time.perf_counter_ns,
) -> list[BenchResult]:
    """Time compile and match for each case; timings are nanoseconds per op."""
    iterations = max(1, iterations)
    results: list[BenchResult] = []
    for case in cases:
        compiled = compile_glob(case.pattern)
        segments = compile_segments(case.pattern)
        path = case.path
        results.append(
            BenchResult(
                case=case,
                shape=compiled.shape,
                matched=match(compiled, path),
                iterations=iterations,
                compile_ns=_per_op(clock, iterations, lambda: compile_glob(case.pattern)),
                match_ns=_per_op(clock, iterations, lambda: match(compiled, path)),
                general_ns=_per_op(clock, iterations, lambda: general_match(segments, path)),
            )
        )
    return results
