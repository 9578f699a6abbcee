"""Static pattern tables shared by the passes.

All tables are immutable module-level data: tuples for ordered lookups where
the first match wins, frozensets for membership tests.
"""

from __future__ import annotations

import re
from typing import FrozenSet, Pattern, Tuple

FULLWIDTH_SPACE = "\u3000"
BYTE_ORDER_MARK = "\ufeff"

ZERO_WIDTH_CHARS: FrozenSet[str] = frozenset(
    {
        "\u200b",  # zero-width space
        "\u200c",  # zero-width non-joiner
        "\u200d",  # zero-width joiner
        "\u200e",  # left-to-right mark
        "\u200f",  # right-to-left mark
        "\u2060",  # word joiner
        BYTE_ORDER_MARK,
    }
)

FENCE_MARKER = "```"

# ---------------------------------------------------------------------------
# Debug statements
# ---------------------------------------------------------------------------

DEBUG_PATTERNS: Tuple[str, ...] = (
    "console.log(",
    "console.debug(",
    "console.trace(",
    "fmt.Println(",
    "println!(",
    "dbg!(",
    "var_dump(",
    "print(",
    "debugger;",
)

STRICT_DEBUG_PATTERNS: Tuple[str, ...] = (
    "console.error(",
    "eprintln!(",
    *DEBUG_PATTERNS,
)


def _literal(pattern: str) -> Pattern[str]:
    # literal match that does not start inside a longer identifier
    return re.compile(r"(?<![\w$])" + re.escape(pattern))


DEBUG_MATCHERS: Tuple[Tuple[str, Pattern[str]], ...] = tuple(
    (p, _literal(p)) for p in DEBUG_PATTERNS
)
STRICT_DEBUG_MATCHERS: Tuple[Tuple[str, Pattern[str]], ...] = tuple(
    (p, _literal(p)) for p in STRICT_DEBUG_PATTERNS
)

# ---------------------------------------------------------------------------
# Marker comments
# ---------------------------------------------------------------------------

TODO_RE = re.compile(r"todo(?=[:(\s]|$)", re.IGNORECASE)
FIXME_RE = re.compile(r"fixme(?=[:(\s]|$)", re.IGNORECASE)

# ---------------------------------------------------------------------------
# Secrets
# ---------------------------------------------------------------------------

_QUOTED_VALUE = r"""['"`][^'"`\n]{8,}['"`]"""
_ASSIGN = r"""['"]?\s*[:=]\s*"""

SECRET_PATTERNS: Tuple[Tuple[Pattern[str], str], ...] = (
    (
        re.compile(r"-----BEGIN (?:[A-Z]+ )*PRIVATE KEY(?: BLOCK)?-----"),
        "private key",
    ),
    (
        re.compile(
            r"(?i)aws_?access_?key(?:_?id)?" + _ASSIGN + r"""['"]?(?:AKIA|ASIA)[0-9A-Z]{16}"""
        ),
        "AWS access key",
    ),
    (re.compile(r"\b(?:AKIA|ASIA)[0-9A-Z]{16}\b"), "AWS access key"),
    (
        re.compile(r"(?i)aws_?secret_?(?:access_?)?key" + _ASSIGN + r"""['"]?[A-Za-z0-9/+=]{40}"""),
        "AWS secret key",
    ),
    (re.compile(r"\bgh[pousr]_[A-Za-z0-9]{36,}"), "GitHub token"),
    (re.compile(r"\bgithub_pat_[A-Za-z0-9_]{22,}"), "GitHub token"),
    (re.compile(r"\bxox[abposr]-[A-Za-z0-9-]{10,}"), "Slack token"),
    (re.compile(r"\b[rs]k_(?:live|test)_[A-Za-z0-9]{16,}"), "Stripe API key"),
    (re.compile(r"(?i)\bbearer\s+[A-Za-z0-9\-._~+/]{20,}=*"), "bearer token"),
    (
        re.compile(r"(?i)\w*(?:password|passwd|pwd)\w*" + _ASSIGN + _QUOTED_VALUE),
        "hardcoded password",
    ),
    (
        re.compile(r"(?i)\w*api[_-]?key\w*" + _ASSIGN + _QUOTED_VALUE),
        "hardcoded API key",
    ),
    (
        re.compile(r"(?i)\w*secret\w*" + _ASSIGN + _QUOTED_VALUE),
        "hardcoded secret",
    ),
    (
        re.compile(r"(?i)\w*token\w*" + _ASSIGN + _QUOTED_VALUE),
        "hardcoded token",
    ),
)

SECRET_SKIP_MARKERS: Tuple[str, ...] = (
    "process.env",
    "os.environ",
    "os.getenv",
    "getenv(",
    "System.getenv",
    "env::var",
    "ENV[",
    "${",
    "{{",
    "%(",
)

# only a stand-in value: after an assignment or an opening quote
PLACEHOLDER_RE = re.compile(r"""(?:[:=]\s*|['"`])<[^<>\n]+>""")


__all__ = [
    "BYTE_ORDER_MARK",
    "DEBUG_MATCHERS",
    "DEBUG_PATTERNS",
    "FENCE_MARKER",
    "FIXME_RE",
    "FULLWIDTH_SPACE",
    "PLACEHOLDER_RE",
    "SECRET_PATTERNS",
    "SECRET_SKIP_MARKERS",
    "STRICT_DEBUG_MATCHERS",
    "STRICT_DEBUG_PATTERNS",
    "TODO_RE",
    "ZERO_WIDTH_CHARS",
]
