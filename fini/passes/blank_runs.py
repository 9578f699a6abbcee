from __future__ import annotations

from typing import List, Tuple

from fini.framework import Artifact, register
from fini.line_utils import is_blank, join_lines, split_lines
from fini.problems import ExcessiveBlankLines, Problem


def _excess_problem(run_start: int, run_len: int, limit: int) -> List[Problem]:
    if run_len <= limit:
        return []
    # reported at the first blank line beyond the limit, not the run start
    return [Problem(run_start + limit, ExcessiveBlankLines(found=run_len, limit=limit))]


def limit_blank_runs(text: str, limit: int) -> Tuple[str, List[Problem]]:
    """Collapse every run of more than ``limit`` blank lines to ``limit`` lines."""
    lines, terminated = split_lines(text)
    kept: List[str] = []
    problems: List[Problem] = []
    run_start, run_len = 0, 0
    for number, line in enumerate(lines, start=1):
        if is_blank(line):
            run_start = run_start if run_len else number
            run_len += 1
            if run_len <= limit:
                kept.append(line)
            continue
        problems.extend(_excess_problem(run_start, run_len, limit))
        run_len = 0
        kept.append(line)
    problems.extend(_excess_problem(run_start, run_len, limit))
    if not problems:
        return text, []
    return join_lines(kept, terminated), problems


class _BlankRunsPass:
    name = "blank_runs"

    def enabled(self, config) -> bool:
        return config.max_blank_lines is not None

    def __call__(self, a: Artifact, config) -> Artifact:
        text, problems = limit_blank_runs(a.text, config.max_blank_lines)
        return a.evolve(text, problems)


blank_runs = register(_BlankRunsPass())
