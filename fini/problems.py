"""Problem records produced by the normalization pipeline.

Every ``ProblemKind`` variant carries a ``tag``. Whether a variant is
structural (its fix shows up in the normalized content) or detection-only
(flagged, never rewritten) is a pure function of that tag, see
:func:`is_detection_only`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, FrozenSet, Union

DETECTION_ONLY_TAGS: FrozenSet[str] = frozenset(
    {
        "todo_comment",
        "fixme_comment",
        "debug_code",
        "secret_pattern",
        "long_line",
    }
)


def is_detection_only(kind: Union["ProblemKind", str]) -> bool:
    """Return True when ``kind`` (or its tag) never alters content."""
    tag = kind if isinstance(kind, str) else kind.tag
    return tag in DETECTION_ONLY_TAGS


@dataclass(frozen=True)
class ProblemKind:
    tag: ClassVar[str] = ""

    def is_detection_only(self) -> bool:
        return is_detection_only(self.tag)

    def describe(self, line: int) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class FullWidthSpace(ProblemKind):
    tag: ClassVar[str] = "full_width_space"

    def describe(self, line: int) -> str:
        return f"full-width space at line {line}"


@dataclass(frozen=True)
class LeadingBlankLines(ProblemKind):
    tag: ClassVar[str] = "leading_blank_lines"
    count: int = 0

    def describe(self, line: int) -> str:
        return f"{self.count} leading blank line(s)"


@dataclass(frozen=True)
class ZeroWidthCharacter(ProblemKind):
    tag: ClassVar[str] = "zero_width_character"

    def describe(self, line: int) -> str:
        return f"zero-width character at line {line}"


@dataclass(frozen=True)
class ExcessiveBlankLines(ProblemKind):
    tag: ClassVar[str] = "excessive_blank_lines"
    found: int = 0
    limit: int = 0

    def describe(self, line: int) -> str:
        return f"{self.found} consecutive blank lines at line {line} (limit: {self.limit})"


@dataclass(frozen=True)
class CodeBlockRemnant(ProblemKind):
    tag: ClassVar[str] = "code_block_remnant"

    def describe(self, line: int) -> str:
        return f"code block remnant at line {line}"


@dataclass(frozen=True)
class TodoComment(ProblemKind):
    tag: ClassVar[str] = "todo_comment"

    def describe(self, line: int) -> str:
        return f"TODO comment at line {line}"


@dataclass(frozen=True)
class FixmeComment(ProblemKind):
    tag: ClassVar[str] = "fixme_comment"

    def describe(self, line: int) -> str:
        return f"FIXME comment at line {line}"


@dataclass(frozen=True)
class DebugCode(ProblemKind):
    tag: ClassVar[str] = "debug_code"
    pattern: str = ""

    def describe(self, line: int) -> str:
        return f"debug code '{self.pattern}' at line {line}"


@dataclass(frozen=True)
class SecretPattern(ProblemKind):
    tag: ClassVar[str] = "secret_pattern"
    hint: str = ""

    def describe(self, line: int) -> str:
        return f"potential secret ({self.hint}) at line {line}"


@dataclass(frozen=True)
class LongLine(ProblemKind):
    tag: ClassVar[str] = "long_line"
    length: int = 0
    limit: int = 0

    def describe(self, line: int) -> str:
        return f"line {line} is too long ({self.length} > {self.limit} chars)"


@dataclass(frozen=True)
class Problem:
    """A located issue: 1-based ``line`` plus its ``kind``."""

    line: int
    kind: ProblemKind

    def is_detection_only(self) -> bool:
        return self.kind.is_detection_only()

    def describe(self) -> str:
        return self.kind.describe(self.line)


__all__ = [
    "CodeBlockRemnant",
    "DETECTION_ONLY_TAGS",
    "DebugCode",
    "ExcessiveBlankLines",
    "FixmeComment",
    "FullWidthSpace",
    "LeadingBlankLines",
    "LongLine",
    "Problem",
    "ProblemKind",
    "SecretPattern",
    "TodoComment",
    "ZeroWidthCharacter",
    "is_detection_only",
]
