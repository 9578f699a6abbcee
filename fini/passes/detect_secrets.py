from __future__ import annotations

from typing import List, Optional

from fini.framework import Artifact, register
from fini.line_utils import numbered_lines
from fini.patterns import PLACEHOLDER_RE, SECRET_PATTERNS, SECRET_SKIP_MARKERS
from fini.problems import Problem, SecretPattern


def is_placeholder_line(line: str) -> bool:
    """Return True when ``line`` reads a secret from elsewhere rather than embedding one."""
    return any(marker in line for marker in SECRET_SKIP_MARKERS) or bool(
        PLACEHOLDER_RE.search(line)
    )


def _secret_hint(line: str) -> Optional[str]:
    if is_placeholder_line(line):
        return None
    return next((hint for regex, hint in SECRET_PATTERNS if regex.search(line)), None)


def detect_secrets(text: str) -> List[Problem]:
    """Flag lines that look like hard-coded credentials, first pattern per line."""
    hits = ((number, _secret_hint(line)) for number, line in numbered_lines(text))
    return [Problem(number, SecretPattern(hint=hint)) for number, hint in hits if hint]


class _DetectSecretsPass:
    name = "detect_secrets"

    def enabled(self, config) -> bool:
        return config.detect_secrets

    def __call__(self, a: Artifact, config) -> Artifact:
        return a.evolve(a.text, detect_secrets(a.text))


detect_secrets_pass = register(_DetectSecretsPass())
