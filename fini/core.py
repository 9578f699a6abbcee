"""File-level driver: read, filter, normalize, report and (in fix mode) write back."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

import typer

from fini import output
from fini.pipeline import NormalizeResult, normalize
from fini.output import Config, OutputContext, OutputMode, RunResult
from fini.problems import FullWidthSpace
from fini.walker import walk_paths

logger = logging.getLogger(__name__)

BINARY_CHECK_SIZE = 8192


def is_binary(content: bytes) -> bool:
    """Return True if a NUL byte appears in the first 8192 bytes."""
    return b"\0" in content[:BINARY_CHECK_SIZE]


def decode_text(content: bytes) -> Optional[str]:
    """Return ``content`` decoded as UTF-8, or None if it is not valid UTF-8."""
    try:
        return content.decode("utf-8")
    except UnicodeDecodeError:
        return None


def _skip_reason(content: bytes) -> Optional[str]:
    if not content:
        return "empty"
    if is_binary(content):
        return "binary"
    return None


def _warning_count(result: NormalizeResult) -> int:
    return sum(
        1
        for p in result.problems
        if isinstance(p.kind, FullWidthSpace) or p.is_detection_only()
    )


def process_file(path: Path, config: Config, result: RunResult, ctx: OutputContext) -> None:
    """Normalize one file, updating ``result``; raises ``OSError`` on read/write failure."""
    raw = path.read_bytes()
    reason = _skip_reason(raw)
    text = None if reason else decode_text(raw)
    if text is None:
        reason = reason or "non-UTF-8"
        logger.debug("skipping %s (%s)", path, reason)
        if ctx.verbose:
            output.print_skipped(path, reason, ctx)
        return

    normalized = normalize(text, config.normalize)
    if not normalized.has_issues():
        if ctx.verbose:
            output.print_checked(path, ctx)
        return

    result.warnings += _warning_count(normalized)
    if config.check_only:
        result.files_with_problems += 1
        output.print_check_result(path, normalized, ctx)
        return

    if normalized.has_changes():
        # newline="" keeps the LF endings exactly as normalized
        with path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(normalized.content)
        result.files_fixed += 1
    output.print_fix_result(path, normalized, ctx)


def _process_all(files: Iterable[Path], config: Config, result: RunResult, ctx: OutputContext) -> None:
    for path in files:
        try:
            process_file(path, config, result, ctx)
        except OSError as exc:
            logger.warning("failed to process %s: %s", path, exc)
            if ctx.mode is not OutputMode.QUIET:
                print(f"Error processing {path}: {exc}", file=sys.stderr)


def run(paths: Iterable[str], config: Config, ctx: OutputContext) -> RunResult:
    """Process every file under ``paths`` and print the summary."""
    files = walk_paths(paths)
    result = RunResult()
    if ctx.show_progress:
        with typer.progressbar(files, label="Normalizing", file=sys.stderr) as bar:
            _process_all(bar, config, result, ctx)
    else:
        _process_all(files, config, result, ctx)
    output.print_summary(result, config, ctx)
    return result
