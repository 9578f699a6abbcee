from __future__ import annotations

from typing import List, Tuple

from fini.framework import Artifact, register
from fini.line_utils import numbered_lines
from fini.patterns import FULLWIDTH_SPACE
from fini.problems import FullWidthSpace, Problem


def fix_fullwidth_spaces(text: str) -> Tuple[str, List[Problem]]:
    """Replace U+3000 with an ASCII space; one problem per occurrence."""
    problems = [
        Problem(number, FullWidthSpace())
        for number, line in numbered_lines(text)
        for _ in range(line.count(FULLWIDTH_SPACE))
    ]
    return text.replace(FULLWIDTH_SPACE, " "), problems


class _FullWidthSpacePass:
    name = "fullwidth_space"

    def enabled(self, config) -> bool:
        return True

    def __call__(self, a: Artifact, config) -> Artifact:
        text, problems = fix_fullwidth_spaces(a.text)
        return a.evolve(text, problems)


fullwidth_space = register(_FullWidthSpacePass())
