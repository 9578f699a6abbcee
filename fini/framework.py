from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from functools import reduce
from types import MappingProxyType
from typing import TYPE_CHECKING, Dict, Iterable, Mapping, Protocol, Tuple, runtime_checkable

if TYPE_CHECKING:  # pragma: no cover
    from fini.pipeline import NormalizeConfig
    from fini.problems import Problem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Artifact:
    """Immutable carrier of text + accumulated problems between passes."""

    text: str
    problems: Tuple["Problem", ...] = ()

    def evolve(self, text: str, problems: Iterable["Problem"] = ()) -> Artifact:
        """Return a new artifact with ``text`` and ``problems`` appended."""
        return replace(self, text=text, problems=(*self.problems, *problems))


@runtime_checkable
class Pass(Protocol):
    name: str

    def enabled(self, config: "NormalizeConfig") -> bool:
        """Return whether the pass runs under ``config``."""
        ...

    def __call__(self, a: Artifact, config: "NormalizeConfig") -> Artifact:
        """Execute the pass."""
        ...


_REGISTRY: Mapping[str, Pass] = MappingProxyType({})


def register(p: Pass) -> Pass:
    """Register a pass by name; idempotent for same object."""
    global _REGISTRY
    _REGISTRY = MappingProxyType({**dict(_REGISTRY), p.name: p})
    return p


def run_step(name: str, a: Artifact, config: "NormalizeConfig") -> Artifact:
    """Run a single registered step if ``config`` enables it."""
    p = _REGISTRY[name]
    if not p.enabled(config):
        return a
    out = p(a, config)
    logger.debug("%s: %d new problem(s)", name, len(out.problems) - len(a.problems))
    return out


def run_pipeline(steps: Iterable[str], a: Artifact, config: "NormalizeConfig") -> Artifact:
    """Apply registered steps in order."""
    return reduce(lambda acc, s: run_step(s, acc, config), steps, a)


def registry() -> Dict[str, Pass]:
    """Shallow copy of the registry for inspection/testing."""
    return dict(_REGISTRY)
