from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

import typer

from fini.config import (
    CliNormalizeOptions,
    ConfigError,
    NormalizeSection,
    env_overrides,
    find_config_file,
    generate_init_file,
    load_config,
    merge_normalize_config,
)
from fini.core import run
from fini.editorconfig import check_editorconfig_conflicts, find_editorconfig, parse_editorconfig
from fini.env_utils import log_level
from fini.pipeline import NormalizeConfig, normalize
from fini.output import Config, OutputContext, OutputMode, print_diff, should_use_colors

app = typer.Typer(add_completion=False, no_args_is_help=True)


def _configure_logging() -> None:
    logging.basicConfig(
        level=log_level(),
        format="[%(levelname)s] %(name)s:%(funcName)s - %(message)s",
    )


def _warn(message: str) -> None:
    print(f"Warning: {message}", file=sys.stderr)


def _exit_with_error(message: str) -> NoReturn:
    """Print ``message`` to stderr and exit with status 1."""
    print(f"Error: {message}", file=sys.stderr)
    raise typer.Exit(1)


def _load_file_section(explicit: Optional[Path], quiet: bool) -> NormalizeSection | None:
    """Load ``--config`` or the discovered ``fini.yaml``; warn and fall back on failure."""
    path = explicit or find_config_file(Path.cwd())
    if path is None:
        return None
    try:
        loaded = load_config(path)
    except ConfigError as exc:
        _warn(f"Failed to load {path}: {exc}")
        return None
    if not quiet:
        print(f"Using config: {path}", file=sys.stderr)
    return loaded.normalize


def _resolve(cli_opts: CliNormalizeOptions, file_section: NormalizeSection | None) -> NormalizeConfig:
    try:
        return merge_normalize_config(cli_opts, file_section, env_overrides())
    except ConfigError as exc:
        _warn(f"ignoring FINI__* environment overrides: {exc}")
        return merge_normalize_config(cli_opts, file_section)


def _editorconfig_warnings() -> None:
    path = find_editorconfig(Path.cwd())
    if path is None:
        return
    try:
        settings = parse_editorconfig(path)
    except OSError:
        return
    for message in check_editorconfig_conflicts(settings):
        _warn(message)


def _run_init() -> None:
    try:
        path = generate_init_file()
    except OSError as exc:
        _exit_with_error(str(exc))
    print(f"Created {path}")


def _run_stdin(cli_opts: CliNormalizeOptions, check: bool, diff: bool) -> None:
    try:
        text = typer.get_binary_stream("stdin").read().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        _exit_with_error(f"reading stdin: {exc}")
    result = normalize(text, merge_normalize_config(cli_opts))
    if check:
        if result.has_issues():
            if diff:
                # stderr so stdout stays clean
                print_diff("stdin", text, result.content, err=True)
            raise typer.Exit(1)
        return
    typer.echo(result.content, nl=False)


def _cli_options(
    max_blank_lines: Optional[int],
    keep_zero_width: bool,
    keep_leading_blanks: bool,
    fix_code_blocks: bool,
    no_detect_todos: bool,
    no_detect_fixmes: bool,
    no_detect_debug: bool,
    strict_debug: bool,
    no_detect_secrets: bool,
    max_line_length: Optional[int],
) -> CliNormalizeOptions:
    # boolean flags default to False; only a given flag counts as "set"
    return CliNormalizeOptions(
        max_blank_lines=max_blank_lines,
        keep_zero_width=keep_zero_width or None,
        keep_leading_blanks=keep_leading_blanks or None,
        fix_code_blocks=fix_code_blocks or None,
        no_detect_todos=no_detect_todos or None,
        no_detect_fixmes=no_detect_fixmes or None,
        no_detect_debug=no_detect_debug or None,
        strict_debug=strict_debug or None,
        no_detect_secrets=no_detect_secrets or None,
        max_line_length=max_line_length,
    )


def _output_mode(quiet: bool, diff: bool) -> OutputMode:
    if quiet:
        return OutputMode.QUIET
    return OutputMode.DIFF if diff else OutputMode.NORMAL


@app.command(help="A lightweight file normalization CLI tool.")
def main(
    paths: Optional[List[Path]] = typer.Argument(None, help="Target files or directories"),
    stdin: bool = typer.Option(False, "--stdin", help="Read input from stdin (output to stdout)"),
    check: bool = typer.Option(False, "--check", "-c", help="Check only, exit 1 if problems found"),
    diff: bool = typer.Option(False, "--diff", "-d", help="Show changes in diff format"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Output only modified file names"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show all processed files"),
    color: bool = typer.Option(False, "--color", help="Force colored output"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
    no_progress: bool = typer.Option(False, "--no-progress", help="Hide progress bar"),
    max_blank_lines: Optional[int] = typer.Option(
        None, "--max-blank-lines", min=0, metavar="N", help="Limit consecutive blank lines (0 = remove all)"
    ),
    keep_zero_width: bool = typer.Option(False, "--keep-zero-width", help="Keep zero-width characters"),
    keep_leading_blanks: bool = typer.Option(False, "--keep-leading-blanks", help="Keep leading blank lines"),
    fix_code_blocks: bool = typer.Option(False, "--fix-code-blocks", help="Remove ``` code fence lines"),
    no_detect_todos: bool = typer.Option(False, "--no-detect-todos", help="Skip TODO detection"),
    no_detect_fixmes: bool = typer.Option(False, "--no-detect-fixmes", help="Skip FIXME detection"),
    no_detect_debug: bool = typer.Option(False, "--no-detect-debug", help="Skip debug code detection"),
    strict_debug: bool = typer.Option(
        False, "--strict-debug", help="Also flag console.error / eprintln! as debug code"
    ),
    no_detect_secrets: bool = typer.Option(False, "--no-detect-secrets", help="Skip secret detection"),
    max_line_length: Optional[int] = typer.Option(
        None, "--max-line-length", min=1, metavar="N", help="Warn about lines longer than N characters"
    ),
    init: bool = typer.Option(False, "--init", help="Generate a template fini.yaml"),
    config: Optional[Path] = typer.Option(None, "--config", help="Config file path (skips discovery)"),
) -> None:
    _configure_logging()
    if init:
        _run_init()
        return

    cli_opts = _cli_options(
        max_blank_lines,
        keep_zero_width,
        keep_leading_blanks,
        fix_code_blocks,
        no_detect_todos,
        no_detect_fixmes,
        no_detect_debug,
        strict_debug,
        no_detect_secrets,
        max_line_length,
    )
    if stdin:
        _run_stdin(cli_opts, check, diff)
        return
    if not paths:
        raise typer.BadParameter("at least one path is required", param_hint="PATHS")

    normalize_config = _resolve(cli_opts, _load_file_section(config, quiet))
    if not quiet:
        _editorconfig_warnings()

    mode = _output_mode(quiet, diff)
    ctx = OutputContext(
        mode=mode,
        use_colors=should_use_colors(color, no_color),
        verbose=verbose and not quiet,
        show_progress=not quiet and not no_progress and sys.stdout.isatty(),
    )
    run_config = Config(check_only=check, output_mode=mode, normalize=normalize_config)
    result = run([str(p) for p in paths], run_config, ctx)
    if check and result.has_problems():
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
