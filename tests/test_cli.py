"""Tests for the ohmyglob CLI."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from ohmyglob.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def base_args(tmp_path):
    """Point --config at a missing file so the user's config is ignored."""
    return ["--config", str(tmp_path / "missing.json")]


class TestMatch:
    def test_reports_each_path(self, runner, base_args) -> None:
        result = runner.invoke(main, [*base_args, "match", "**/bar", "foo/bar", "foo/baz"])
        assert result.exit_code == 0, result.output
        assert "foo/bar" in result.output
        assert "foo/baz" in result.output

    def test_exit_code_when_nothing_matches(self, runner, base_args) -> None:
        result = runner.invoke(main, [*base_args, "match", "foo/*/bar", "foo/a/b/bar"])
        assert result.exit_code == 1

    def test_requires_a_path(self, runner, base_args) -> None:
        result = runner.invoke(main, [*base_args, "match", "**/bar"])
        assert result.exit_code == 2


class TestExplain:
    def test_shapes(self, runner, base_args) -> None:
        result = runner.invoke(main, [*base_args, "explain", "**/Makefile", "a/*/b"])
        assert result.exit_code == 0, result.output
        assert "Recursive Fixed File" in result.output
        assert "General" in result.output


class TestFilter:
    def test_stdin(self, runner, base_args) -> None:
        result = runner.invoke(
            main,
            [*base_args, "filter", "-i", "**/*.py", "-e", "build/**"],
            input="a.py\nb.txt\nsub/c.py\nbuild/d.py\n",
        )
        assert result.exit_code == 0, result.output
        assert result.stdout.splitlines() == ["a.py", "sub/c.py"]

    def test_walk_root(self, runner, base_args, tmp_path) -> None:
        root = tmp_path / "tree"
        (root / "src").mkdir(parents=True)
        (root / "src" / "app.py").write_text("", encoding="utf-8")
        (root / "src" / "notes.txt").write_text("", encoding="utf-8")
        (root / ".git").mkdir()
        (root / ".git" / "hook.py").write_text("", encoding="utf-8")
        result = runner.invoke(main, [*base_args, "filter", str(root), "-i", "**/*.py"])
        assert result.exit_code == 0, result.output
        assert result.stdout.splitlines() == ["src/app.py"]

    def test_walk_with_dirs(self, runner, base_args, tmp_path) -> None:
        (tmp_path / "tree" / "src").mkdir(parents=True)
        result = runner.invoke(main, [*base_args, "filter", str(tmp_path / "tree"), "--dirs"])
        assert result.exit_code == 0, result.output
        assert result.stdout.splitlines() == ["src"]

    def test_missing_root(self, runner, base_args, tmp_path) -> None:
        result = runner.invoke(main, [*base_args, "filter", str(tmp_path / "nope")])
        assert result.exit_code == 1
        assert "does not exist" in result.output

    def test_config_patterns_apply(self, runner, tmp_path) -> None:
        cfg = tmp_path / "config.json"
        cfg.write_text(json.dumps({"include": ["**/*.md"], "exclude": []}), encoding="utf-8")
        result = runner.invoke(main, ["--config", str(cfg), "filter"], input="a.md\nb.py\n")
        assert result.exit_code == 0, result.output
        assert result.stdout.splitlines() == ["a.md"]


class TestBench:
    def test_custom_case(self, runner, base_args) -> None:
        result = runner.invoke(main, [*base_args, "bench", "-n", "1", "--case", "**/*.c", "a/b.c"])
        assert result.exit_code == 0, result.output
        assert "Benchmarks" in result.output


class TestConfig:
    def test_prints_sample(self, runner, base_args) -> None:
        result = runner.invoke(main, [*base_args, "config"])
        assert result.exit_code == 0, result.output
        assert "exclude" in json.loads(result.stdout)

    def test_bad_config_falls_back_to_defaults(self, runner, tmp_path) -> None:
        cfg = tmp_path / "config.json"
        cfg.write_text("not-json", encoding="utf-8")
        result = runner.invoke(main, ["--config", str(cfg), "filter"], input=".git/x\nkeep\n")
        assert result.exit_code == 0, result.output
        assert result.stdout.splitlines() == ["keep"]


class TestVerbose:
    def test_debug_logging_on_stderr(self, runner, base_args) -> None:
        result = runner.invoke(main, ["-v", *base_args, "explain", "**/x"])
        assert result.exit_code == 0, result.output
        assert "compiled" in result.stderr
        assert "compiled" not in result.stdout
