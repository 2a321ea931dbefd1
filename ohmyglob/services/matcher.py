# Matching engine.
#
# match() dispatches on the plan built by services/compiler.py:
#
#   GeneralPlan                -> general_match (segment backtracking)
#   RecursiveSuffixPlan        -> _match_recursive_suffix
#   RecursiveFixedFilePlan     -> _match_recursive_fixed_file
#   FixedPathSuffixPlan        -> _match_fixed_path_suffix
#
# The fast paths are only sound because classify() already proved the
# pattern has no other wildcard that could interact with the prefix/suffix
# test.  They must agree with general_match on the unreduced segments for
# every path; tests/services/test_equivalence.py fuzzes exactly that.
#
# Both backtracking matchers follow Russ Cox's single-slot wildcard
# algorithm (https://research.swtch.com/glob): each wildcard kind keeps one
# resumption point that only moves forward, so the worst case stays linear
# in the path length instead of exploding like regex backtracking.
#
# Path segmentation: the empty path has no segments; any other path is
# path.split("/"), so "a/" is ["a", ""].  The string cursor therefore ends
# at len(path) + 1, one past the virtual separator after the last segment.

from __future__ import annotations

from collections.abc import Sequence
from typing import assert_never

from ohmyglob.models.glob import (
    CompiledGlob,
    FixedPathSuffixPlan,
    GeneralPlan,
    RecursiveFixedFilePlan,
    RecursiveSuffixPlan,
)
from ohmyglob.models.segments import DoubleWildcard, Literal, Segment, SingleWildcard


def segment_match(pattern: str, name: str) -> bool:
    """Match one path segment *name* against *pattern*, where ``*`` matches
    zero or more characters.  No other wildcard syntax is recognised."""
    px = 0
    nx = 0
    next_px = 0
    next_nx = 0
    plen = len(pattern)
    nlen = len(name)
    while px < plen or nx < nlen:
        if px < plen:
            c = pattern[px]
            if c == "*":
                # Try to match at nx; if that doesn't work out, restart at nx+1.
                next_px = px
                next_nx = nx + 1
                px += 1
                continue
            if nx < nlen and name[nx] == c:
                px += 1
                nx += 1
                continue
        # Mismatch. Maybe restart.
        if 0 < next_nx <= nlen:
            px = next_px
            nx = next_nx
            continue
        return False
    return True


def general_match(segments: Sequence[Segment], path: str) -> bool:
    """Match *path* against an unreduced segment sequence.

    ``px`` indexes *segments*; ``nx`` always points at the start of a path
    segment or at the end cursor.  A ``**`` records (px, start of the
    following path segment) so a later mismatch lets it absorb one more
    segment and retry.
    """
    px = 0
    nx = 0
    next_px = 0
    next_nx = 0  # 0 means "no resumption point"
    nseg = len(segments)
    end = len(path) + 1 if path else 0

    while px < nseg or nx < end:
        # stop: end of the current path segment; incr_nx: start of the next.
        stop = 0
        incr_nx = 0
        if nx < end:
            stop = path.find("/", nx)
            if stop < 0:
                stop = len(path)
            incr_nx = stop + 1

        if px < nseg:
            seg = segments[px]
            if isinstance(seg, Literal):
                if nx < end:
                    chunk = path[nx:stop]
                    if segment_match(seg.text, chunk) if seg.has_star else seg.text == chunk:
                        px += 1
                        nx = incr_nx
                        continue
            elif isinstance(seg, DoubleWildcard):
                next_px = px
                next_nx = incr_nx
                px += 1
                continue
            elif isinstance(seg, SingleWildcard):
                if nx < end:
                    px += 1
                    nx = incr_nx
                    continue
            else:
                assert_never(seg)

        if 0 < next_nx <= end:
            px = next_px
            nx = next_nx
            continue
        return False
    return True


def _match_recursive_suffix(plan: RecursiveSuffixPlan, path: str) -> bool:
    return path.endswith(plan.suffix) and path.startswith(plan.prefix)


def _match_recursive_fixed_file(plan: RecursiveFixedFilePlan, path: str) -> bool:
    # Either "filename" itself or ".../filename"; never "xfilename".
    filename = plan.filename
    if not path.endswith(filename) or not path.startswith(plan.prefix):
        return False
    if len(path) == len(filename):
        # The empty path has no segment to hold an empty filename.
        return bool(path)
    return path[len(path) - len(filename) - 1] == "/"


def _match_fixed_path_suffix(plan: FixedPathSuffixPlan, path: str) -> bool:
    # Suffix first: it is the better fast reject.
    if not path.endswith(plan.suffix) or not path.startswith(plan.prefix):
        return False
    # The "*" part may not span directories.
    return path.find("/", len(plan.prefix)) == -1


def match(compiled: CompiledGlob, path: str) -> bool:
    """Return whether *path* is matched by *compiled*.  Never fails."""
    plan = compiled.plan
    if isinstance(plan, GeneralPlan):
        return general_match(plan.segments, path)
    if isinstance(plan, RecursiveSuffixPlan):
        return _match_recursive_suffix(plan, path)
    if isinstance(plan, RecursiveFixedFilePlan):
        return _match_recursive_fixed_file(plan, path)
    if isinstance(plan, FixedPathSuffixPlan):
        return _match_fixed_path_suffix(plan, path)
    assert_never(plan)
