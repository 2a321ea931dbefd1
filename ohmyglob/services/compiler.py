# Pattern compiler.
#
# Two-phase architecture:
#
#   PHASE 1 — COMPILE  (compile_glob, called once per pattern)
#
#   1. Segmentation — compile_segments splits the pattern on "/" and tags
#      every fragment: "**" -> DoubleWildcard, "*" -> SingleWildcard,
#      anything else -> Literal (has_star set when it embeds a "*").
#
#   2. Classification — classify proves whether the segment list is one of
#      three closed-form shapes and reduces it to the strings the fast
#      matcher needs (first match wins):
#
#        Shape                 Example               Fast operation
#        --------------------  --------------------  -------------------------
#        RECURSIVE_SUFFIX      a/b/**/*.conf         startswith + endswith
#        RECURSIVE_FIXED_FILE  a/b/**/Makefile       startswith + endswith + "/"
#        FIXED_PATH_SUFFIX     a/b/*.conf            startswith + endswith + no "/"
#        GENERAL               (anything else)       segment backtracking
#
#      Every fast shape requires the prefix before the wildcard to be
#      star-free literals, so the reduction can join it into one
#      "a/b/" string.  The suffix literal must be "*text" with exactly one
#      leading star; "**/a*b.conf" is GENERAL.
#
#   PHASE 2 — MATCH  (services/matcher.py)

from __future__ import annotations

import logging
from collections.abc import Sequence

from ohmyglob.models.glob import (
    CompiledGlob,
    FixedPathSuffixPlan,
    GeneralPlan,
    MatchPlan,
    RecursiveFixedFilePlan,
    RecursiveSuffixPlan,
)
from ohmyglob.models.segments import DoubleWildcard, Literal, Segment, SingleWildcard

logger = logging.getLogger(__name__)


def compile_segments(pattern: str) -> tuple[Segment, ...]:
    """Split *pattern* on ``/`` into typed segments.

    The empty pattern yields no segments and so matches only the empty path.
    """
    if not pattern:
        return ()

    segments: list[Segment] = []
    for fragment in pattern.split("/"):
        if fragment == "**":
            segments.append(DoubleWildcard())
        elif fragment == "*":
            segments.append(SingleWildcard())
        else:
            segments.append(Literal.of(fragment))
    return tuple(segments)


def _all_plain_literals(segments: Sequence[Segment]) -> bool:
    return all(isinstance(s, Literal) and not s.has_star for s in segments)


def _directory_prefix(segments: Sequence[Segment]) -> str:
    # Callers have already checked _all_plain_literals.
    return "".join(f"{s.text}/" for s in segments if isinstance(s, Literal))


def _recursive_prefix(segments: Sequence[Segment]) -> Sequence[Segment] | None:
    """Return the literal prefix of ``prefix/**/<last>``, or None."""
    if not isinstance(segments[-2], DoubleWildcard):
        return None
    prefix = segments[:-2]
    if not _all_plain_literals(prefix):
        return None
    return prefix


def classify(segments: tuple[Segment, ...]) -> MatchPlan:
    """Pick the cheapest matching strategy that is equivalent to *segments*."""
    if len(segments) < 2:
        return GeneralPlan(segments)

    last = segments[-1]
    if not isinstance(last, Literal):
        return GeneralPlan(segments)

    prefix = _recursive_prefix(segments)
    if prefix is not None:
        if last.is_wildcard_suffix:
            return RecursiveSuffixPlan(suffix=last.text[1:], prefix=_directory_prefix(prefix))
        if not last.has_star:
            return RecursiveFixedFilePlan(filename=last.text, prefix=_directory_prefix(prefix))

    if last.is_wildcard_suffix and _all_plain_literals(segments[:-1]):
        return FixedPathSuffixPlan(prefix=_directory_prefix(segments[:-1]), suffix=last.text[1:])

    return GeneralPlan(segments)


def compile_glob(pattern: str) -> CompiledGlob:
    """Compile *pattern* into an immutable, reusable matcher.  Never fails."""
    compiled = CompiledGlob(original=pattern, plan=classify(compile_segments(pattern)))
    logger.debug("compiled %r as %s", pattern, compiled.shape.value)
    return compiled
