from __future__ import annotations

from typing import List, Tuple

from fini.framework import Artifact, register
from fini.patterns import BYTE_ORDER_MARK, ZERO_WIDTH_CHARS
from fini.problems import Problem, ZeroWidthCharacter


def strip_zero_width(text: str) -> Tuple[str, List[Problem]]:
    """Remove invisible formatting characters.

    A byte-order mark at absolute index 0 is kept and not reported; every
    other removed character yields a ``ZeroWidthCharacter`` problem.
    """
    kept: List[str] = []
    problems: List[Problem] = []
    line = 1
    for index, ch in enumerate(text):
        if ch == "\n":
            line += 1
        if ch not in ZERO_WIDTH_CHARS or (index == 0 and ch == BYTE_ORDER_MARK):
            kept.append(ch)
            continue
        problems.append(Problem(line, ZeroWidthCharacter()))
    return "".join(kept), problems


class _ZeroWidthPass:
    name = "zero_width"

    def enabled(self, config) -> bool:
        return config.remove_zero_width

    def __call__(self, a: Artifact, config) -> Artifact:
        text, problems = strip_zero_width(a.text)
        return a.evolve(text, problems)


zero_width = register(_ZeroWidthPass())
