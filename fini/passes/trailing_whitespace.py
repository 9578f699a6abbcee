from __future__ import annotations

from fini.framework import Artifact, register


def remove_trailing_whitespace(text: str) -> str:
    """Strip trailing spaces and tabs from every line; blank lines stay."""
    return "\n".join(line.rstrip(" \t") for line in text.split("\n"))


class _TrailingWhitespacePass:
    name = "trailing_whitespace"

    def enabled(self, config) -> bool:
        return True

    def __call__(self, a: Artifact, config) -> Artifact:
        return a.evolve(remove_trailing_whitespace(a.text))


trailing_whitespace = register(_TrailingWhitespacePass())
