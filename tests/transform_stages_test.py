import pytest

from fini.passes.blank_runs import limit_blank_runs
from fini.passes.code_fences import is_fence_line, remove_code_fences
from fini.passes.eof_newline import normalize_eof_newline
from fini.passes.fullwidth_space import fix_fullwidth_spaces
from fini.passes.leading_blanks import remove_leading_blanks
from fini.passes.line_endings import normalize_line_endings
from fini.passes.trailing_whitespace import remove_trailing_whitespace
from fini.passes.zero_width import strip_zero_width
from fini.problems import (
    CodeBlockRemnant,
    ExcessiveBlankLines,
    FullWidthSpace,
    LeadingBlankLines,
    Problem,
    ZeroWidthCharacter,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("line1\r\nline2\r\n", "line1\nline2\n"),
        ("line1\rline2\r", "line1\nline2\n"),
        ("line1\r\nline2\rline3\n", "line1\nline2\nline3\n"),
        ("line1\nline2\n", "line1\nline2\n"),
        ("a\r\r\nb", "a\n\nb"),
    ],
)
def test_normalize_line_endings(text: str, expected: str) -> None:
    assert normalize_line_endings(text) == expected


def test_zero_width_removed_and_reported_per_line() -> None:
    text, problems = strip_zero_width("a\u200bb\nc\u200d\u2060d\n")
    assert text == "ab\ncd\n"
    assert problems == [
        Problem(1, ZeroWidthCharacter()),
        Problem(2, ZeroWidthCharacter()),
        Problem(2, ZeroWidthCharacter()),
    ]


def test_leading_bom_preserved_silently() -> None:
    assert strip_zero_width("\ufeffhello\n") == ("\ufeffhello\n", [])


def test_bom_after_first_character_removed() -> None:
    text, problems = strip_zero_width("hello\ufeffworld\n")
    assert text == "helloworld\n"
    assert problems == [Problem(1, ZeroWidthCharacter())]


def test_bom_at_start_of_later_line_is_not_file_start() -> None:
    text, problems = strip_zero_width("a\n\ufeffb\n")
    assert text == "a\nb\n"
    assert problems == [Problem(2, ZeroWidthCharacter())]


def test_direction_marks_removed() -> None:
    text, problems = strip_zero_width("x\u200ey\u200fz")
    assert text == "xyz"
    assert len(problems) == 2


def test_leading_blanks_removed_with_single_problem() -> None:
    text, problems = remove_leading_blanks("\n  \n\t\nhello\n\nworld\n")
    assert text == "hello\n\nworld\n"
    assert problems == [Problem(1, LeadingBlankLines(count=3))]


def test_leading_blanks_all_blank_file_becomes_empty() -> None:
    assert remove_leading_blanks("\n \n\n") == ("", [Problem(1, LeadingBlankLines(count=3))])


def test_leading_blanks_noop_when_first_line_has_content() -> None:
    assert remove_leading_blanks("hello\n\n") == ("hello\n\n", [])


def test_blank_run_collapsed_and_reported_at_first_excess_line() -> None:
    text, problems = limit_blank_runs("a\n\n\n\nb\n", 1)
    assert text == "a\n\nb\n"
    assert problems == [Problem(3, ExcessiveBlankLines(found=3, limit=1))]


def test_blank_runs_reported_independently() -> None:
    text, problems = limit_blank_runs("a\n\n\n\nb\n\n\n\n\nc\n", 2)
    assert text == "a\n\n\nb\n\n\nc\n"
    assert problems == [
        Problem(4, ExcessiveBlankLines(found=3, limit=2)),
        Problem(8, ExcessiveBlankLines(found=4, limit=2)),
    ]


def test_blank_run_at_end_of_file_reported() -> None:
    text, problems = limit_blank_runs("a\n\n\n\n", 1)
    assert text == "a\n\n"
    assert problems == [Problem(3, ExcessiveBlankLines(found=3, limit=1))]


def test_blank_run_limit_zero_removes_all_blank_lines() -> None:
    text, problems = limit_blank_runs("a\n\nb\n \nc\n", 0)
    assert text == "a\nb\nc\n"
    assert [p.line for p in problems] == [2, 4]


def test_blank_run_whitespace_only_lines_count_as_blank() -> None:
    text, problems = limit_blank_runs("a\n \n\t\nb", 1)
    assert text == "a\n \nb"
    assert problems == [Problem(3, ExcessiveBlankLines(found=2, limit=1))]


def test_blank_run_within_limit_untouched() -> None:
    assert limit_blank_runs("a\n\nb\n", 1) == ("a\n\nb\n", [])


@pytest.mark.parametrize(
    "line, expected",
    [
        ("```", True),
        ("```rust", True),
        ("  ```python  ", True),
        ("```c++", True),
        ("```objective-c", True),
        ("``` js ", True),
        ("````", False),
        ("````rust", False),
        ("```rust`", False),
        ("```{python}", False),
        ("```js // comment", False),
        ("text ```", False),
        ("``", False),
    ],
)
def test_is_fence_line(line: str, expected: bool) -> None:
    assert is_fence_line(line) is expected


def test_code_fences_deleted_with_original_line_numbers() -> None:
    text, problems = remove_code_fences("```rust\nfn main() {}\n```\n")
    assert text == "fn main() {}\n"
    assert problems == [Problem(1, CodeBlockRemnant()), Problem(3, CodeBlockRemnant())]


def test_code_fences_keep_quadruple_backticks() -> None:
    assert remove_code_fences("````\nx\n") == ("````\nx\n", [])


def test_fullwidth_space_replaced_one_problem_per_occurrence() -> None:
    text, problems = fix_fullwidth_spaces("line1\na\u3000b\u3000c\n")
    assert text == "line1\na b c\n"
    assert problems == [Problem(2, FullWidthSpace()), Problem(2, FullWidthSpace())]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("hello   \nworld  \n", "hello\nworld\n"),
        ("hello\t\t\nworld\t\n", "hello\nworld\n"),
        ("line1\n\nline2\n", "line1\n\nline2\n"),
        ("    indented\n\tTabbed\n", "    indented\n\tTabbed\n"),
        ("hello  \t \nworld", "hello\nworld"),
        ("   \n", "\n"),
    ],
)
def test_remove_trailing_whitespace(text: str, expected: str) -> None:
    assert remove_trailing_whitespace(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", ""),
        ("hello", "hello\n"),
        ("hello\n", "hello\n"),
        ("hello\n\n\n", "hello\n"),
        ("line1\nline2\n\n\n", "line1\nline2\n"),
    ],
)
def test_normalize_eof_newline(text: str, expected: str) -> None:
    assert normalize_eof_newline(text) == expected
