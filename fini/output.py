"""Console rendering for the ``fini`` command."""

from __future__ import annotations

import difflib
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator, TextIO

import typer

from fini.env_utils import no_color_requested
from fini.pipeline import NormalizeConfig, NormalizeResult
from fini.problems import FullWidthSpace


class OutputMode(Enum):
    NORMAL = "normal"
    QUIET = "quiet"
    DIFF = "diff"


@dataclass(frozen=True)
class Config:
    """Run-wide settings: check vs fix, output mode, normalization options."""

    check_only: bool
    output_mode: OutputMode
    normalize: NormalizeConfig


@dataclass(frozen=True)
class OutputContext:
    mode: OutputMode
    use_colors: bool = False
    verbose: bool = False
    show_progress: bool = False

    def paint(self, text: str, color: str, bold: bool = False) -> str:
        return typer.style(text, fg=color, bold=bold) if self.use_colors else text


@dataclass
class RunResult:
    files_fixed: int = 0
    files_with_problems: int = 0
    warnings: int = 0

    def has_problems(self) -> bool:
        return self.files_with_problems > 0


def should_use_colors(force: bool, disable: bool, stream: TextIO | None = None) -> bool:
    """``--no-color`` beats ``--color`` beats ``NO_COLOR`` beats TTY detection."""
    if disable:
        return False
    if force:
        return True
    if no_color_requested():
        return False
    return (stream or sys.stdout).isatty()


def _trailing_whitespace_lines(original: str) -> Iterator[int]:
    lines = original.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    return (i for i, line in enumerate(lines, start=1) if line != line.rstrip(" \t"))


def check_messages(result: NormalizeResult) -> list[str]:
    """Return the bullet messages describing why ``result`` needs attention."""
    messages: list[str] = []
    if result.has_changes():
        missing_eof = not result.original.endswith(("\n", "\r"))
        if result.original and missing_eof and result.content.endswith("\n"):
            messages.append("missing EOF newline")
        messages.extend(f"trailing whitespace at line {n}" for n in _trailing_whitespace_lines(result.original))
    messages.extend(p.describe() for p in result.problems)
    return messages


def print_check_result(path: Path, result: NormalizeResult, ctx: OutputContext) -> None:
    if ctx.mode is OutputMode.QUIET:
        typer.echo(str(path))
        return
    if ctx.mode is OutputMode.DIFF and result.has_changes():
        print_diff(str(path), result.original, result.content)
    typer.echo(f"{ctx.paint('Error:', 'red', bold=True)} {path}")
    for message in check_messages(result):
        typer.echo(f"  - {message}")


def print_fix_result(path: Path, result: NormalizeResult, ctx: OutputContext) -> None:
    if ctx.mode is OutputMode.QUIET:
        typer.echo(str(path))
        return
    if ctx.mode is OutputMode.DIFF:
        print_diff(str(path), result.original, result.content)
        return
    for problem in result.problems:
        if isinstance(problem.kind, FullWidthSpace):
            typer.echo(f"{ctx.paint('Warning:', 'yellow', bold=True)} {path}:{problem.line} full-width space")
        elif problem.is_detection_only():
            typer.echo(f"{ctx.paint('Warning:', 'yellow', bold=True)} {path}: {problem.describe()}")
    if result.has_changes():
        typer.echo(f"{ctx.paint('Fixed:', 'green', bold=True)} {path}")


def print_checked(path: Path, ctx: OutputContext) -> None:
    if ctx.mode is OutputMode.QUIET:
        return
    typer.echo(f"{ctx.paint('Checked:', 'blue')} {path}")


def print_skipped(path: Path, reason: str, ctx: OutputContext) -> None:
    if ctx.mode is OutputMode.QUIET:
        return
    typer.echo(f"{ctx.paint(f'Skipping {reason}:', 'blue')} {path}")


def format_diff(label: str, original: str, content: str) -> str:
    """Return a unified diff (3 lines of context) between ``original`` and ``content``."""
    diff = difflib.unified_diff(
        original.splitlines(keepends=True),
        content.splitlines(keepends=True),
        fromfile=label,
        tofile=label,
        n=3,
    )
    return "".join(line if line.endswith("\n") else line + "\n" for line in diff)


def print_diff(label: str, original: str, content: str, err: bool = False) -> None:
    typer.echo(format_diff(label, original, content), nl=False, err=err)


def print_summary(result: RunResult, config: Config, ctx: OutputContext) -> None:
    if ctx.mode is OutputMode.QUIET:
        return
    if config.check_only:
        if result.files_with_problems:
            typer.echo()
            typer.echo(ctx.paint(f"{result.files_with_problems} files with problems", "red", bold=True))
        return
    parts = [
        part
        for part in (
            ctx.paint(f"{result.files_fixed} files fixed", "green") if result.files_fixed else "",
            ctx.paint(f"{result.warnings} warnings", "yellow") if result.warnings else "",
        )
        if part
    ]
    if parts:
        typer.echo()
        typer.echo(", ".join(parts))
