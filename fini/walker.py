"""Expand CLI paths into the files to normalize.

Hidden files and directories are skipped. Inside a git work tree, files git
would ignore are skipped too (``git ls-files --exclude-standard``).
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, List, Optional

logger = logging.getLogger(__name__)


def _is_hidden(name: str) -> bool:
    return name.startswith(".") and name not in {".", ".."}


def _git(args: List[str], cwd: Path) -> Optional[str]:
    if not shutil.which("git"):
        return None
    try:
        cp = subprocess.run(
            ["git", *args], cwd=cwd, capture_output=True, text=True, check=False
        )
    except OSError as exc:
        logger.debug("git %s failed: %s", args[0], exc)
        return None
    return cp.stdout if cp.returncode == 0 else None


def _git_visible_files(directory: Path) -> Optional[FrozenSet[Path]]:
    """Return tracked + untracked-but-not-ignored files under ``directory``, or None outside git."""
    listing = _git(["ls-files", "-z", "--cached", "--others", "--exclude-standard"], directory)
    if listing is None:
        return None
    return frozenset((directory / rel).resolve() for rel in listing.split("\0") if rel)


def _walk_directory(root: Path) -> Iterator[Path]:
    visible = _git_visible_files(root)

    def _onerror(exc: OSError) -> None:
        logger.warning("cannot read %s: %s", exc.filename, exc.strerror)

    for dirpath, dirnames, filenames in os.walk(root, onerror=_onerror):
        dirnames[:] = sorted(d for d in dirnames if not _is_hidden(d))
        for name in sorted(filenames):
            if _is_hidden(name):
                continue
            path = Path(dirpath) / name
            if visible is not None and path.resolve() not in visible:
                continue
            if path.is_file():
                yield path


def _expand(path: Path) -> Iterator[Path]:
    if path.is_dir():
        yield from _walk_directory(path)
    elif path.is_file():
        yield path
    else:
        logger.warning("no such file or directory: %s", path)


def walk_paths(paths: Iterable[str | os.PathLike]) -> List[Path]:
    """Return the files under ``paths`` in walk order, without duplicates."""
    seen: set[Path] = set()
    files: List[Path] = []
    for path in (f for p in paths for f in _expand(Path(p))):
        key = path.resolve()
        if key not in seen:
            seen.add(key)
            files.append(path)
    return files
