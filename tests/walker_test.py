import shutil
import subprocess

import pytest

from fini.walker import walk_paths


def _names(paths, root):
    return sorted(str(p.relative_to(root)) for p in paths)


def test_single_file_is_returned(write_file):
    path = write_file("a.txt", "x\n")
    assert walk_paths([path]) == [path]


def test_directory_is_walked_recursively(tmp_path, write_file):
    write_file("a.txt", "x\n")
    write_file("sub/b.txt", "y\n")
    write_file("sub/deeper/c.txt", "z\n")
    assert _names(walk_paths([tmp_path]), tmp_path) == ["a.txt", "sub/b.txt", "sub/deeper/c.txt"]


def test_hidden_entries_are_skipped(tmp_path, write_file):
    write_file("visible.txt", "x\n")
    write_file(".hidden.txt", "x\n")
    write_file(".cache/data.txt", "x\n")
    write_file("sub/.env", "x\n")
    assert _names(walk_paths([tmp_path]), tmp_path) == ["visible.txt"]


def test_explicit_hidden_file_is_kept(write_file):
    path = write_file(".env", "x\n")
    assert walk_paths([path]) == [path]


def test_duplicates_are_removed(tmp_path, write_file):
    path = write_file("a.txt", "x\n")
    assert walk_paths([path, tmp_path, path]) == [path]


def test_missing_path_is_skipped_with_warning(tmp_path, caplog):
    with caplog.at_level("WARNING", logger="fini.walker"):
        assert walk_paths([tmp_path / "nope.txt"]) == []
    assert "no such file or directory" in caplog.text


@pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")
def test_gitignored_files_are_skipped(tmp_path, write_file):
    subprocess.run(["git", "init", "-q"], cwd=tmp_path, check=True)
    write_file(".gitignore", "ignored.txt\nbuild/\n")
    write_file("kept.txt", "x\n")
    write_file("ignored.txt", "x\n")
    write_file("build/out.txt", "x\n")
    write_file("src/main.txt", "x\n")
    assert _names(walk_paths([tmp_path]), tmp_path) == ["kept.txt", "src/main.txt"]
