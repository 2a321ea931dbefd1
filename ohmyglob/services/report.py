from __future__ import annotations

from typing import assert_never

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ohmyglob.models.glob import CompiledGlob
from ohmyglob.models.segments import DoubleWildcard, Literal, Segment, SingleWildcard
from ohmyglob.services.bench import BenchResult


def describe_segment(seg: Segment) -> str:
    if isinstance(seg, DoubleWildcard):
        return "** (any number of segments)"
    if isinstance(seg, SingleWildcard):
        return "* (one segment)"
    if isinstance(seg, Literal):
        kind = "literal with *" if seg.has_star else "literal"
        return f"{kind} {seg.text!r}"
    assert_never(seg)


def _explain_panel(compiled: CompiledGlob) -> Panel:
    lines = [f"Shape: [bold]{compiled.shape.label}[/bold]"]
    if compiled.shape.is_fast_path:
        lines.append("Strategy: string prefix/suffix test")
    else:
        lines.append("Strategy: segment backtracking")
    for idx, seg in enumerate(compiled.segments):
        lines.append(f"  [{idx}] {escape(describe_segment(seg))}")
    return Panel("\n".join(lines), title=escape(compiled.original or "(empty)"), border_style="blue")


def render_explain(console: Console, globs: list[CompiledGlob]) -> None:
    for g in globs:
        console.print(_explain_panel(g))


def render_matches(console: Console, compiled: CompiledGlob, results: list[tuple[str, bool]]) -> None:
    table = Table(title=f"Matches for {escape(compiled.original)}", header_style="bold cyan")
    table.add_column("Path")
    table.add_column("Matched", justify="center")
    for path, ok in results:
        table.add_row(escape(path), "[green]yes[/green]" if ok else "[red]no[/red]")
    console.print(table)


def _ns(value: float) -> str:
    return f"{value:,.1f}"


def render_bench(console: Console, results: list[BenchResult]) -> None:
    table = Table(title="Benchmarks (ns/op)", header_style="bold magenta")
    table.add_column("Case")
    table.add_column("Shape")
    table.add_column("Matched", justify="center")
    table.add_column("Compile", justify="right")
    table.add_column("Match", justify="right")
    table.add_column("General", justify="right")
    table.add_column("Speedup", justify="right")
    for r in results:
        table.add_row(
            r.case.name,
            r.shape.label,
            "yes" if r.matched else "no",
            _ns(r.compile_ns),
            _ns(r.match_ns),
            _ns(r.general_ns),
            f"{r.speedup:.1f}x",
        )
    console.print(table)
