"""Command-line entry point: match, explain, filter and benchmark globs."""

from __future__ import annotations

import logging
import sys

import click
from result import Err, Ok
from rich.console import Console
from rich.logging import RichHandler

from ohmyglob.config.defaults import default_config
from ohmyglob.config.loader import load_config, sample_config_json
from ohmyglob.config.schema import AppConfig, clamp_field
from ohmyglob.services.bench import DEFAULT_CASES, BenchCase, run_bench
from ohmyglob.services.compiler import compile_glob
from ohmyglob.services.globset import compile_globset, filter_paths
from ohmyglob.services.matcher import match
from ohmyglob.services.report import render_bench, render_explain, render_matches
from ohmyglob.services.walk import walk_paths

logger = logging.getLogger("ohmyglob")


def _setup_logging(verbose: bool) -> None:
    # Only the package logger; the root logger belongs to the host application.
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _config(ctx: click.Context) -> AppConfig:
    return ctx.obj["config"]


def _console(ctx: click.Context) -> Console:
    return ctx.obj["console"]


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    envvar="OHMYGLOB_CONFIG",
    help="Config file (default: ~/.config/ohmyglob/config.json).",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging on stderr.")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """Compile shell-style globs once and match paths against them."""
    _setup_logging(verbose)
    ctx.ensure_object(dict)
    result = load_config(config_path)
    if isinstance(result, Ok):
        config = result.unwrap()
    else:
        logger.warning("%s Using defaults.", result.unwrap_err())
        config = default_config()
    ctx.obj["config"] = config
    ctx.obj["console"] = Console()


@main.command("match")
@click.argument("pattern")
@click.argument("paths", nargs=-1, required=True)
@click.pass_context
def match_cmd(ctx: click.Context, pattern: str, paths: tuple[str, ...]) -> None:
    """Test each PATH against PATTERN.  Exits 1 when nothing matched."""
    compiled = compile_glob(pattern)
    results = [(p, match(compiled, p)) for p in paths]
    render_matches(_console(ctx), compiled, results)
    if not any(ok for _, ok in results):
        ctx.exit(1)


@main.command()
@click.argument("patterns", nargs=-1, required=True)
@click.pass_context
def explain(ctx: click.Context, patterns: tuple[str, ...]) -> None:
    """Show which matching strategy each pattern compiles to."""
    render_explain(_console(ctx), [compile_glob(p) for p in patterns])


@main.command("filter")
@click.argument("root", required=False, type=click.Path(file_okay=False))
@click.option("-i", "--include", "includes", multiple=True, help="Pattern to include (repeatable).")
@click.option("-e", "--exclude", "excludes", multiple=True, help="Pattern to exclude (repeatable).")
@click.option("--dirs/--no-dirs", "include_dirs", default=None, help="Also print matching directories.")
@click.pass_context
def filter_cmd(
    ctx: click.Context,
    root: str | None,
    includes: tuple[str, ...],
    excludes: tuple[str, ...],
    include_dirs: bool | None,
) -> None:
    """Print the paths selected by the include/exclude patterns.

    With ROOT the directory tree is walked; otherwise paths are read from
    standard input, one per line.
    """
    config = _config(ctx)
    globset = compile_globset(
        include=[*config.include, *includes],
        exclude=[*config.exclude, *excludes],
    )

    if root is None:
        lines = (line.rstrip("\r\n") for line in sys.stdin)
        for path in filter_paths(globset, lines):
            click.echo(path)
        return

    result = walk_paths(
        root,
        globset,
        prune=config.prune_excluded_dirs,
        include_dirs=config.include_dirs if include_dirs is None else include_dirs,
    )
    if isinstance(result, Err):
        raise click.ClickException(result.unwrap_err().message)
    snapshot = result.unwrap()
    for path in snapshot.paths:
        click.echo(path)
    stats = snapshot.stats
    logger.debug(
        "walked %d files, %d directories (%d pruned), %d matched",
        stats.files,
        stats.directories,
        stats.pruned,
        stats.matched,
    )


@main.command()
@click.option("-n", "--iterations", type=int, default=None, help="Iterations per measurement.")
@click.option(
    "--case",
    "cases",
    type=(str, str),
    multiple=True,
    metavar="PATTERN PATH",
    help="Benchmark PATTERN against PATH instead of the built-in cases.",
)
@click.pass_context
def bench(ctx: click.Context, iterations: int | None, cases: tuple[tuple[str, str], ...]) -> None:
    """Time compile and match, fast path against the general matcher."""
    config = _config(ctx)
    n = clamp_field(iterations, "bench_iterations") if iterations is not None else config.bench_iterations
    selected = [BenchCase(f"{pattern} ~ {path}", pattern, path) for pattern, path in cases] or list(DEFAULT_CASES)
    render_bench(_console(ctx), run_bench(selected, n))


@main.command("config")
def config_cmd() -> None:
    """Print a sample configuration file."""
    click.echo(sample_config_json())
