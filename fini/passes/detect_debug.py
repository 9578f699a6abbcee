from __future__ import annotations

from typing import List, Optional

from fini.framework import Artifact, register
from fini.line_utils import numbered_lines
from fini.patterns import DEBUG_MATCHERS, STRICT_DEBUG_MATCHERS
from fini.problems import DebugCode, Problem


def _first_debug_pattern(line: str, strict: bool) -> Optional[str]:
    matchers = STRICT_DEBUG_MATCHERS if strict else DEBUG_MATCHERS
    return next((name for name, regex in matchers if regex.search(line)), None)


def detect_debug(text: str, strict: bool = False) -> List[Problem]:
    """Flag leftover print/trace/debugger statements, first pattern per line."""
    hits = ((number, _first_debug_pattern(line, strict)) for number, line in numbered_lines(text))
    return [Problem(number, DebugCode(pattern=pattern)) for number, pattern in hits if pattern]


class _DetectDebugPass:
    name = "detect_debug"

    def enabled(self, config) -> bool:
        return config.detect_debug

    def __call__(self, a: Artifact, config) -> Artifact:
        return a.evolve(a.text, detect_debug(a.text, strict=config.strict_debug))


detect_debug_pass = register(_DetectDebugPass())
