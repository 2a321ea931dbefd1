from __future__ import annotations

from enum import Enum


class GlobShape(str, Enum):
    GENERAL = "general"
    # **/*.suffix
    RECURSIVE_SUFFIX = "recursive_suffix"
    # **/filename
    RECURSIVE_FIXED_FILE = "recursive_fixed_file"
    # path/to/dir/*.suffix
    FIXED_PATH_SUFFIX = "fixed_path_suffix"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()

    @property
    def is_fast_path(self) -> bool:
        return self is not GlobShape.GENERAL
