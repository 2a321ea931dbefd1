from __future__ import annotations

from ohmyglob.config.schema import AppConfig

DEFAULT_EXCLUDE: tuple[str, ...] = (
    "**/.git/**",
    "**/__pycache__/**",
)


def default_config() -> AppConfig:
    return AppConfig(exclude=list(DEFAULT_EXCLUDE))
