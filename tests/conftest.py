from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from fini.pipeline import NormalizeConfig  # noqa: E402


@pytest.fixture
def config() -> Callable[..., NormalizeConfig]:
    return lambda **overrides: NormalizeConfig(**overrides)


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[..., Path]:
    def _write(name: str, content: str | bytes) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode("utf-8"))
        return path

    return _write


@pytest.fixture
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Run from an empty git-less directory with no FINI__/NO_COLOR env leaking in."""
    import os

    for key in list(os.environ):
        if key.startswith("FINI__") or key == "NO_COLOR":
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
