from __future__ import annotations

from ohmyglob.models.enums import GlobShape
from ohmyglob.models.glob import CompiledGlob
from ohmyglob.models.segments import DoubleWildcard, Literal, Segment, SingleWildcard
from ohmyglob.services.compiler import classify, compile_glob, compile_segments
from ohmyglob.services.globset import GlobSet, compile_globset, filter_paths, match_any
from ohmyglob.services.matcher import general_match, match, segment_match

__version__ = "0.1.0"

__all__ = [
    "CompiledGlob",
    "DoubleWildcard",
    "GlobSet",
    "GlobShape",
    "Literal",
    "Segment",
    "SingleWildcard",
    "classify",
    "compile_glob",
    "compile_globset",
    "compile_segments",
    "filter_paths",
    "general_match",
    "match",
    "match_any",
    "segment_match",
]
