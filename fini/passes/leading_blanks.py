from __future__ import annotations

from itertools import takewhile
from typing import List, Tuple

from fini.framework import Artifact, register
from fini.line_utils import is_blank, split_lines
from fini.problems import LeadingBlankLines, Problem


def remove_leading_blanks(text: str) -> Tuple[str, List[Problem]]:
    """Drop blank lines before the first non-blank line.

    An all-blank ``text`` becomes ``""``. At most one problem is reported,
    always at line 1.
    """
    lines, _ = split_lines(text)
    count = sum(1 for _ in takewhile(is_blank, lines))
    if count == 0:
        return text, []
    remainder = "\n".join(text.split("\n")[count:])
    return remainder, [Problem(1, LeadingBlankLines(count=count))]


class _LeadingBlanksPass:
    name = "leading_blanks"

    def enabled(self, config) -> bool:
        return config.remove_leading_blanks

    def __call__(self, a: Artifact, config) -> Artifact:
        text, problems = remove_leading_blanks(a.text)
        return a.evolve(text, problems)


leading_blanks = register(_LeadingBlanksPass())
