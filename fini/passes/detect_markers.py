from __future__ import annotations

from typing import Callable, List, Pattern

from fini.framework import Artifact, register
from fini.line_utils import numbered_lines
from fini.patterns import FIXME_RE, TODO_RE
from fini.problems import FixmeComment, Problem, ProblemKind, TodoComment


def _detect(text: str, marker: Pattern[str], kind: Callable[[], ProblemKind]) -> List[Problem]:
    return [Problem(number, kind()) for number, line in numbered_lines(text) if marker.search(line)]


def detect_todos(text: str) -> List[Problem]:
    """Flag lines carrying a ``TODO`` marker followed by ``:``, ``(``, whitespace or EOL."""
    return _detect(text, TODO_RE, TodoComment)


def detect_fixmes(text: str) -> List[Problem]:
    """Flag lines carrying a ``FIXME`` marker; same boundary rule as TODO."""
    return _detect(text, FIXME_RE, FixmeComment)


class _DetectTodosPass:
    name = "detect_todos"

    def enabled(self, config) -> bool:
        return config.detect_todos

    def __call__(self, a: Artifact, config) -> Artifact:
        return a.evolve(a.text, detect_todos(a.text))


class _DetectFixmesPass:
    name = "detect_fixmes"

    def enabled(self, config) -> bool:
        return config.detect_fixmes

    def __call__(self, a: Artifact, config) -> Artifact:
        return a.evolve(a.text, detect_fixmes(a.text))


detect_todos_pass = register(_DetectTodosPass())
detect_fixmes_pass = register(_DetectFixmesPass())
