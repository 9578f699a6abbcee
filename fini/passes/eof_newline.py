from __future__ import annotations

from fini.framework import Artifact, register


def normalize_eof_newline(text: str) -> str:
    """End non-empty ``text`` with exactly one ``\\n``; ``""`` stays empty."""
    if not text:
        return ""
    return text.rstrip("\n") + "\n"


class _EofNewlinePass:
    name = "eof_newline"

    def enabled(self, config) -> bool:
        return True

    def __call__(self, a: Artifact, config) -> Artifact:
        return a.evolve(normalize_eof_newline(a.text))


eof_newline = register(_EofNewlinePass())
