"""Config discovery, loading and merging for ``fini``.

Priority, highest first: CLI flags > ``FINI__*`` environment > ``fini.yaml``
> :class:`~fini.pipeline.NormalizeConfig` defaults.
"""

from __future__ import annotations

import os
import pathlib
import warnings
from dataclasses import asdict, dataclass
from functools import reduce
from importlib import import_module
from typing import Any, Dict, Iterable, Mapping, Optional, cast

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from fini.pipeline import NormalizeConfig

yaml = cast(Any, import_module("yaml"))

CONFIG_FILENAME = "fini.yaml"
ENV_PREFIX = "FINI__"


class ConfigError(Exception):
    """Raised when a config file cannot be read, parsed or validated."""


class NormalizeSection(BaseModel):
    """``normalize:`` mapping in ``fini.yaml``; unset keys fall through."""

    model_config = ConfigDict(extra="ignore")

    max_blank_lines: Optional[int] = Field(default=None, ge=0)
    remove_zero_width: Optional[bool] = None
    remove_leading_blanks: Optional[bool] = None
    fix_code_blocks: Optional[bool] = None
    detect_todos: Optional[bool] = None
    detect_fixmes: Optional[bool] = None
    detect_debug: Optional[bool] = None
    strict_debug: Optional[bool] = None
    detect_secrets: Optional[bool] = None
    max_line_length: Optional[int] = Field(default=None, ge=1)

    def explicit(self) -> Dict[str, Any]:
        """Return only the options that were actually set."""
        return self.model_dump(exclude_none=True)


class FiniFile(BaseModel):
    """Root of ``fini.yaml``."""

    normalize: NormalizeSection = Field(default_factory=NormalizeSection)


def find_file_upward(
    start_dir: str | os.PathLike, filename: str, stop_at_git_root: bool
) -> pathlib.Path | None:
    """Return the nearest ``filename`` at or above ``start_dir``.

    With ``stop_at_git_root`` the search ends at the first directory that
    contains ``.git``.
    """
    start = pathlib.Path(start_dir).resolve()
    for current in (start, *start.parents):
        candidate = current / filename
        if candidate.is_file():
            return candidate
        if stop_at_git_root and (current / ".git").exists():
            return None
    return None


def find_config_file(start_dir: str | os.PathLike) -> pathlib.Path | None:
    return find_file_upward(start_dir, CONFIG_FILENAME, stop_at_git_root=True)


def _read_yaml(path: str | os.PathLike) -> Dict[str, Any]:
    """Return a dict from YAML; ``{}`` for an empty file."""
    p = pathlib.Path(path)
    try:
        raw = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"failed to read config file: {exc}") from exc
    try:
        data = yaml.safe_load(raw) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"failed to parse config file: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{p.name} must contain a top-level mapping")
    return data


def _warn_unknown_options(section: Mapping[str, Any]) -> None:
    """Emit a warning when ``section`` holds keys fini does not know."""

    unknown = [key for key in section if key not in NormalizeSection.model_fields]
    if unknown:
        warnings.warn(
            f"Unknown normalize options: {', '.join(sorted(map(str, unknown)))}",
            stacklevel=3,
        )


def _validate(section: Mapping[str, Any]) -> NormalizeSection:
    try:
        return NormalizeSection.model_validate(dict(section))
    except ValidationError as exc:
        raise ConfigError(f"invalid normalize options: {exc}") from exc


def load_config(path: str | os.PathLike) -> FiniFile:
    """Load and validate ``fini.yaml`` at ``path``."""
    data = _read_yaml(path)
    section = data.get("normalize") or {}
    if not isinstance(section, dict):
        raise ConfigError("'normalize' must be a mapping")
    _warn_unknown_options(section)
    return FiniFile(normalize=_validate(section))


def env_overrides() -> Dict[str, Any]:
    """
    Map FINI__KEY=value -> {key: value} (key lower-cased).
    Values are YAML-coerced (so 'true', '42' etc. become bool/int).
    """
    out: Dict[str, Any] = {}
    for k, v in os.environ.items():
        if not k.startswith(ENV_PREFIX):
            continue
        key = k[len(ENV_PREFIX):].lower()
        try:
            val = yaml.safe_load(v)
        except yaml.YAMLError:
            val = v
        out[key] = val
    return out


@dataclass(frozen=True)
class CliNormalizeOptions:
    """Options given on the command line; ``None`` means "not specified"."""

    max_blank_lines: Optional[int] = None
    keep_zero_width: Optional[bool] = None
    keep_leading_blanks: Optional[bool] = None
    fix_code_blocks: Optional[bool] = None
    no_detect_todos: Optional[bool] = None
    no_detect_fixmes: Optional[bool] = None
    no_detect_debug: Optional[bool] = None
    strict_debug: Optional[bool] = None
    no_detect_secrets: Optional[bool] = None
    max_line_length: Optional[int] = None

    def overrides(self) -> Dict[str, Any]:
        """Translate negative flags into ``NormalizeConfig`` field values."""
        inverted = {
            "keep_zero_width": "remove_zero_width",
            "keep_leading_blanks": "remove_leading_blanks",
            "no_detect_todos": "detect_todos",
            "no_detect_fixmes": "detect_fixmes",
            "no_detect_debug": "detect_debug",
            "no_detect_secrets": "detect_secrets",
        }
        return {
            inverted.get(k, k): (not v if k in inverted else v)
            for k, v in asdict(self).items()
            if v is not None
        }


def merge_normalize_config(
    cli: CliNormalizeOptions | None = None,
    file_section: NormalizeSection | None = None,
    env: Mapping[str, Any] | None = None,
) -> NormalizeConfig:
    """Merge defaults, file, env and CLI options; later sources win."""
    env_section = _validate({k: v for k, v in (env or {}).items() if k in NormalizeSection.model_fields})
    sources: Iterable[Dict[str, Any]] = (
        asdict(NormalizeConfig()),
        file_section.explicit() if file_section else {},
        env_section.explicit(),
        cli.overrides() if cli else {},
    )
    merged = reduce(lambda acc, src: {**acc, **src}, sources, {})
    return NormalizeConfig(**merged)


FINI_YAML_TEMPLATE = """\
# fini.yaml - configuration for the fini file normalizer
#
# fini always:
# - ensures files end with a single newline
# - converts CRLF/CR line endings to LF
# - removes trailing whitespace from lines
# - converts full-width spaces to regular spaces
#
# The settings below control optional features. Uncomment and modify as
# needed. Command-line flags and FINI__<OPTION> environment variables take
# precedence over this file.

normalize:
  # Maximum consecutive blank lines allowed.
  # Set to 0 to remove all blank lines, or leave unset for no limit.
  # max_blank_lines: 2

  # Remove zero-width characters (ZWSP, ZWJ, ZWNJ, direction marks, BOM).
  # A byte-order mark at the very start of a file is kept.
  # remove_zero_width: true

  # Remove blank lines at the start of files.
  # remove_leading_blanks: true

  # Remove markdown code fence lines (``` and ```lang).
  # fix_code_blocks: false

  # Flag TODO / FIXME comments (reported, never changed).
  # detect_todos: true
  # detect_fixmes: true

  # Flag leftover debug statements (console.log, print, dbg!, ...).
  # strict_debug also flags console.error and eprintln!.
  # detect_debug: true
  # strict_debug: false

  # Flag likely hard-coded secrets (API keys, tokens, private keys).
  # detect_secrets: true

  # Flag lines longer than this many characters.
  # max_line_length: 120
"""


def generate_init_file(directory: str | os.PathLike | None = None) -> pathlib.Path:
    """Write the template config into ``directory`` (default: cwd).

    Raises ``FileExistsError`` if a config file is already there.
    """
    path = pathlib.Path(directory or ".") / CONFIG_FILENAME
    if path.exists():
        raise FileExistsError(f"{CONFIG_FILENAME} already exists")
    path.write_text(FINI_YAML_TEMPLATE, encoding="utf-8")
    return path
