from __future__ import annotations

from ohmyglob.config.defaults import DEFAULT_EXCLUDE, default_config
from ohmyglob.config.schema import AppConfig, clamp_field


class TestToDict:
    def test_keys_present(self) -> None:
        d = AppConfig().to_dict()
        assert set(d.keys()) == {"include", "exclude", "pruneExcludedDirs", "includeDirs", "benchIterations"}

    def test_values(self) -> None:
        cfg = AppConfig(include=["**/*.py"], prune_excluded_dirs=False, bench_iterations=7)
        d = cfg.to_dict()
        assert d["include"] == ["**/*.py"]
        assert d["pruneExcludedDirs"] is False
        assert d["benchIterations"] == 7


class TestFromDict:
    def test_empty_dict_uses_defaults(self) -> None:
        cfg = AppConfig.from_dict({}, default_config())
        assert cfg.exclude == list(DEFAULT_EXCLUDE)
        assert cfg.include == []
        assert cfg.prune_excluded_dirs is True
        assert cfg.bench_iterations == 100_000

    def test_overrides(self) -> None:
        cfg = AppConfig.from_dict(
            {"include": ["src/**"], "exclude": [], "includeDirs": True, "benchIterations": 10},
            default_config(),
        )
        assert cfg.include == ["src/**"]
        assert cfg.exclude == []
        assert cfg.include_dirs is True
        assert cfg.bench_iterations == 10

    def test_single_string_pattern(self) -> None:
        cfg = AppConfig.from_dict({"include": "**/*.md"}, default_config())
        assert cfg.include == ["**/*.md"]

    def test_int_clamped_to_minimum(self) -> None:
        cfg = AppConfig.from_dict({"benchIterations": -5}, default_config())
        assert cfg.bench_iterations == 1

    def test_defaults_not_aliased(self) -> None:
        defaults = default_config()
        cfg = AppConfig.from_dict({}, defaults)
        cfg.exclude.append("x")
        assert "x" not in defaults.exclude

    def test_round_trip(self) -> None:
        cfg = AppConfig(include=["a/*.c"], exclude=["b/**"], include_dirs=True, bench_iterations=3)
        assert AppConfig.from_dict(cfg.to_dict(), default_config()) == cfg


class TestClampField:
    def test_known_field(self) -> None:
        assert clamp_field(0, "bench_iterations") == 1
        assert clamp_field(50, "bench_iterations") == 50

    def test_unknown_field_passthrough(self) -> None:
        assert clamp_field(-3, "nope") == -3
