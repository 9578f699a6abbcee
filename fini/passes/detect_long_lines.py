from __future__ import annotations

from typing import List

from fini.framework import Artifact, register
from fini.line_utils import numbered_lines
from fini.problems import LongLine, Problem


def detect_long_lines(text: str, limit: int) -> List[Problem]:
    """Flag lines longer than ``limit`` characters (code points, not bytes)."""
    return [
        Problem(number, LongLine(length=len(line), limit=limit))
        for number, line in numbered_lines(text)
        if len(line) > limit
    ]


class _DetectLongLinesPass:
    name = "detect_long_lines"

    def enabled(self, config) -> bool:
        return config.max_line_length is not None

    def __call__(self, a: Artifact, config) -> Artifact:
        return a.evolve(a.text, detect_long_lines(a.text, config.max_line_length))


detect_long_lines_pass = register(_DetectLongLinesPass())
