from __future__ import annotations

from typing import Iterator, List, Tuple

_BLANK_CHARS = " \t\x0b\x0c"


def is_blank(line: str) -> bool:
    """Return True when ``line`` is empty after stripping ASCII whitespace."""
    return not line.strip(_BLANK_CHARS)


def split_lines(text: str) -> Tuple[List[str], bool]:
    """Split ``text`` on ``\\n``; return the lines and whether a newline terminated them.

    A trailing newline does not start an extra, empty line.
    """
    if not text:
        return [], False
    terminated = text.endswith("\n")
    body = text[:-1] if terminated else text
    return body.split("\n"), terminated


def join_lines(lines: List[str], terminated: bool) -> str:
    """Inverse of :func:`split_lines`; an empty line list yields ``""``."""
    if not lines:
        return ""
    return "\n".join(lines) + ("\n" if terminated else "")


def numbered_lines(text: str) -> Iterator[Tuple[int, str]]:
    """Yield ``(1-based line number, line)`` pairs for ``text``."""
    lines, _ = split_lines(text)
    return enumerate(lines, start=1)
