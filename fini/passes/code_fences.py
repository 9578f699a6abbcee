from __future__ import annotations

from typing import List, Tuple

from fini.framework import Artifact, register
from fini.line_utils import join_lines, split_lines
from fini.patterns import FENCE_MARKER
from fini.problems import CodeBlockRemnant, Problem


def _is_tag_char(ch: str) -> bool:
    return ch.isalnum() or ch.isspace() or ch in "-+"


def is_fence_line(line: str) -> bool:
    """Return True for a bare ```` ``` ```` marker with an optional language tag.

    A fourth backtick right after the marker disqualifies the line.
    """
    stripped = line.strip()
    if not stripped.startswith(FENCE_MARKER):
        return False
    tag = stripped[len(FENCE_MARKER):]
    return not tag.startswith("`") and all(_is_tag_char(ch) for ch in tag)


def remove_code_fences(text: str) -> Tuple[str, List[Problem]]:
    """Delete fence lines, reporting each at its line number in ``text``."""
    lines, terminated = split_lines(text)
    problems = [
        Problem(number, CodeBlockRemnant())
        for number, line in enumerate(lines, start=1)
        if is_fence_line(line)
    ]
    if not problems:
        return text, []
    kept = [line for line in lines if not is_fence_line(line)]
    return join_lines(kept, terminated), problems


class _CodeFencesPass:
    name = "code_fences"

    def enabled(self, config) -> bool:
        return config.fix_code_blocks

    def __call__(self, a: Artifact, config) -> Artifact:
        text, problems = remove_code_fences(a.text)
        return a.evolve(text, problems)


code_fences = register(_CodeFencesPass())
