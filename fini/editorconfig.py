"""Read ``.editorconfig`` to warn about settings fini always overrides."""

from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass, replace
from functools import reduce
from typing import List, Optional

from fini.config import find_file_upward

EDITORCONFIG_FILENAME = ".editorconfig"


@dataclass(frozen=True)
class EditorConfigSettings:
    """Relevant keys from the ``[*]`` section."""

    trim_trailing_whitespace: Optional[bool] = None
    insert_final_newline: Optional[bool] = None
    end_of_line: Optional[str] = None


def find_editorconfig(start_dir: str | os.PathLike) -> pathlib.Path | None:
    return find_file_upward(start_dir, EDITORCONFIG_FILENAME, stop_at_git_root=False)


def _global_section_pairs(text: str) -> List[tuple[str, str]]:
    """Return lower-cased ``(key, value)`` pairs from the ``[*]`` section only."""
    pairs: List[tuple[str, str]] = []
    in_global = False
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith(("#", ";")):
            continue
        if line.startswith("[") and line.endswith("]"):
            in_global = line == "[*]"
            continue
        if in_global and "=" in line:
            key, value = line.split("=", 1)
            pairs.append((key.strip().lower(), value.strip().lower()))
    return pairs


def _apply(settings: EditorConfigSettings, pair: tuple[str, str]) -> EditorConfigSettings:
    key, value = pair
    if key in ("trim_trailing_whitespace", "insert_final_newline"):
        return replace(settings, **{key: value == "true"})
    if key == "end_of_line":
        return replace(settings, end_of_line=value)
    return settings


def parse_editorconfig(path: str | os.PathLike) -> EditorConfigSettings:
    """Parse ``path``; raises ``OSError`` if it cannot be read."""
    text = pathlib.Path(path).read_text(encoding="utf-8")
    return reduce(_apply, _global_section_pairs(text), EditorConfigSettings())


def check_editorconfig_conflicts(settings: EditorConfigSettings) -> List[str]:
    """Return one warning per setting that contradicts fini's fixed behaviour."""
    warnings: List[str] = []
    if settings.trim_trailing_whitespace is False:
        warnings.append("editorconfig has trim_trailing_whitespace=false, but fini always trims")
    if settings.insert_final_newline is False:
        warnings.append("editorconfig has insert_final_newline=false, but fini always inserts")
    if settings.end_of_line is not None and settings.end_of_line != "lf":
        warnings.append(f"editorconfig has end_of_line={settings.end_of_line}, but fini normalizes to LF")
    return warnings
