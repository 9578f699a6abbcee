"""pipeline

Public API (stable):
- NormalizeConfig
- NormalizeResult
- normalize
- TRANSFORM_STEPS
- DETECT_STEPS

Notes:
- ``normalize`` is pure: no I/O, no shared state, never raises for any
  string input.
- Transform steps run in a fixed order; each feeds its text to the next and
  appends its problems. Detect steps run afterwards over the final text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Type

import fini.passes  # noqa: F401  (registers passes)
from fini.framework import Artifact, run_pipeline
from fini.problems import Problem, ProblemKind

logger = logging.getLogger(__name__)

TRANSFORM_STEPS: Tuple[str, ...] = (
    "line_endings",
    "zero_width",
    "leading_blanks",
    "blank_runs",
    "code_fences",
    "fullwidth_space",
    "trailing_whitespace",
    "eof_newline",
)

DETECT_STEPS: Tuple[str, ...] = (
    "detect_todos",
    "detect_fixmes",
    "detect_debug",
    "detect_secrets",
    "detect_long_lines",
)

# Enough for any text: a second round only ever removes blank lines exposed
# by fence removal or full-width-space trimming.
SETTLE_LIMIT = 4


@dataclass(frozen=True)
class NormalizeConfig:
    """Fully-resolved options for one ``normalize`` call."""

    max_blank_lines: Optional[int] = None
    remove_zero_width: bool = True
    remove_leading_blanks: bool = True
    fix_code_blocks: bool = False
    detect_todos: bool = True
    detect_fixmes: bool = True
    detect_debug: bool = True
    strict_debug: bool = False
    detect_secrets: bool = True
    max_line_length: Optional[int] = None


@dataclass(frozen=True)
class NormalizeResult:
    original: str
    content: str
    problems: Tuple[Problem, ...] = ()

    def has_changes(self) -> bool:
        return self.original != self.content

    def structural_problems(self) -> Tuple[Problem, ...]:
        return tuple(p for p in self.problems if not p.is_detection_only())

    def detection_problems(self) -> Tuple[Problem, ...]:
        return tuple(p for p in self.problems if p.is_detection_only())

    def has_detection_problems(self) -> bool:
        return any(p.is_detection_only() for p in self.problems)

    def has_issues(self) -> bool:
        """True when the file would be rewritten or carries any flagged problem."""
        return self.has_changes() or bool(self.problems)

    def count(self, kind: Type[ProblemKind]) -> int:
        return sum(1 for p in self.problems if isinstance(p.kind, kind))


def _settle(a: Artifact, config: NormalizeConfig, *, limit: int = SETTLE_LIMIT) -> Artifact:
    """Run the transform steps until the text reaches a fixpoint or ``limit`` rounds pass."""
    for _ in range(limit):
        updated = run_pipeline(TRANSFORM_STEPS, a, config)
        if updated.text == a.text:
            return updated
        a = updated
    logger.warning("text did not settle after %d rounds", limit)
    return a


def normalize(text: str, config: Optional[NormalizeConfig] = None) -> NormalizeResult:
    """Normalize ``text`` and collect structural and detection-only problems."""
    cfg = config or NormalizeConfig()
    transformed = _settle(Artifact(text=text), cfg)
    detected = run_pipeline(DETECT_STEPS, transformed, cfg)
    return NormalizeResult(original=text, content=detected.text, problems=detected.problems)


__all__ = [
    "DETECT_STEPS",
    "NormalizeConfig",
    "NormalizeResult",
    "TRANSFORM_STEPS",
    "normalize",
]
