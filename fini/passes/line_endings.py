from __future__ import annotations

from fini.framework import Artifact, register


def normalize_line_endings(text: str) -> str:
    """Convert CRLF, then any remaining lone CR, to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


class _LineEndingsPass:
    name = "line_endings"

    def enabled(self, config) -> bool:
        return True

    def __call__(self, a: Artifact, config) -> Artifact:
        return a.evolve(normalize_line_endings(a.text))


line_endings = register(_LineEndingsPass())
