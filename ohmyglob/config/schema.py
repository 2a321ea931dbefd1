from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# (json_key, attr_name, minimum) — shared by from_dict and CLI override clamping.
_INT_FIELDS: tuple[tuple[str, str, int], ...] = (("benchIterations", "bench_iterations", 1),)

# (json_key, attr_name)
_BOOL_FIELDS: tuple[tuple[str, str], ...] = (
    ("pruneExcludedDirs", "prune_excluded_dirs"),
    ("includeDirs", "include_dirs"),
)


def clamp_field(value: int, field_name: str) -> int:
    """Clamp *value* to the minimum defined for *field_name* in _INT_FIELDS."""
    for _, attr, minimum in _INT_FIELDS:
        if attr == field_name:
            return max(minimum, value)
    return value


def _get_int(data: dict[str, Any], json_key: str, default: int, minimum: int) -> int:
    return max(minimum, int(data.get(json_key, default)))


def _get_patterns(data: dict[str, Any], json_key: str, default: list[str]) -> list[str]:
    raw = data.get(json_key)
    if raw is None:
        return list(default)
    if isinstance(raw, str):
        return [raw]
    return [str(p) for p in raw]


@dataclass(slots=True)
class AppConfig:
    include: list[str] = field(default_factory=list)
    exclude: list[str] = field(default_factory=list)
    prune_excluded_dirs: bool = True
    include_dirs: bool = False
    bench_iterations: int = 100_000

    def to_dict(self) -> dict[str, Any]:
        return {
            "include": list(self.include),
            "exclude": list(self.exclude),
            "pruneExcludedDirs": self.prune_excluded_dirs,
            "includeDirs": self.include_dirs,
            "benchIterations": self.bench_iterations,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], defaults: AppConfig) -> AppConfig:
        bool_kwargs: dict[str, bool] = {}
        for json_key, attr in _BOOL_FIELDS:
            bool_kwargs[attr] = bool(data.get(json_key, getattr(defaults, attr)))

        int_kwargs: dict[str, int] = {}
        for json_key, attr, minimum in _INT_FIELDS:
            int_kwargs[attr] = _get_int(data, json_key, getattr(defaults, attr), minimum)

        return cls(
            include=_get_patterns(data, "include", defaults.include),
            exclude=_get_patterns(data, "exclude", defaults.exclude),
            **bool_kwargs,
            **int_kwargs,
        )
