from pathlib import Path

import pytest
from typer.testing import CliRunner

from fini.cli import app

runner = CliRunner()


@pytest.fixture
def messy(isolated_env: Path) -> Path:
    path = isolated_env / "messy.txt"
    path.write_bytes(b"hello   \r\nworld")
    return path


def test_fix_mode_rewrites(messy):
    result = runner.invoke(app, [str(messy)])
    assert result.exit_code == 0, result.output
    assert messy.read_bytes() == b"hello\nworld\n"
    assert "Fixed:" in result.output


def test_check_mode_exit_codes(messy):
    result = runner.invoke(app, ["--check", str(messy)])
    assert result.exit_code == 1
    assert messy.read_bytes() == b"hello   \r\nworld"
    assert "missing EOF newline" in result.output

    messy.write_text("clean\n")
    assert runner.invoke(app, ["--check", str(messy)]).exit_code == 0


def test_check_mode_fails_on_detection_only(isolated_env):
    path = isolated_env / "a.py"
    path.write_text("# FIXME: later\n")
    result = runner.invoke(app, ["--check", str(path)])
    assert result.exit_code == 1
    assert "FIXME comment at line 1" in result.output

    result = runner.invoke(app, ["--check", "--no-detect-fixmes", str(path)])
    assert result.exit_code == 0


def test_quiet_prints_only_changed_paths(messy, isolated_env):
    (isolated_env / "clean.txt").write_text("ok\n")
    result = runner.invoke(app, ["--quiet", str(isolated_env)])
    assert result.exit_code == 0
    assert result.output.strip().splitlines() == [str(messy)]


def test_diff_mode_shows_unified_diff(messy):
    result = runner.invoke(app, ["--diff", str(messy)])
    assert result.exit_code == 0
    assert "-hello   " in result.output
    assert "+hello" in result.output


def test_missing_paths_is_usage_error(isolated_env):
    result = runner.invoke(app, ["--check"])
    assert result.exit_code == 2


def test_stdin_mode_writes_normalized_text():
    result = runner.invoke(app, ["--stdin", "--max-blank-lines", "1"], input="\n\na\n\n\n\nb   ")
    assert result.exit_code == 0
    assert result.stdout == "a\n\nb\n"


def test_stdin_check_mode(isolated_env):
    assert runner.invoke(app, ["--stdin", "--check"], input="fine\n").exit_code == 0
    result = runner.invoke(app, ["--stdin", "--check", "--diff"], input="bad  \n")
    assert result.exit_code == 1
    assert "+bad" in result.output


def test_init_creates_template_once(isolated_env):
    result = runner.invoke(app, ["--init"])
    assert result.exit_code == 0
    assert (isolated_env / "fini.yaml").is_file()

    again = runner.invoke(app, ["--init"])
    assert again.exit_code == 1
    assert "already exists" in again.output


def test_discovered_config_is_applied(isolated_env):
    (isolated_env / "fini.yaml").write_text("normalize:\n  max_blank_lines: 1\n")
    path = isolated_env / "a.txt"
    path.write_text("a\n\n\n\nb\n")
    result = runner.invoke(app, [str(path)])
    assert result.exit_code == 0
    assert "Using config:" in result.output
    assert path.read_text() == "a\n\nb\n"


def test_cli_flag_beats_config_file(isolated_env):
    (isolated_env / "fini.yaml").write_text("normalize:\n  max_blank_lines: 1\n")
    path = isolated_env / "a.txt"
    path.write_text("a\n\n\n\nb\n")
    runner.invoke(app, ["--max-blank-lines", "0", str(path)])
    assert path.read_text() == "a\nb\n"


def test_explicit_config_path(isolated_env):
    cfg = isolated_env / "custom.yaml"
    cfg.write_text("normalize:\n  fix_code_blocks: true\n")
    path = isolated_env / "a.md"
    path.write_text("```python\nx = 1\n```\n")
    result = runner.invoke(app, ["--config", str(cfg), str(path)])
    assert result.exit_code == 0
    assert path.read_text() == "x = 1\n"


def test_env_override(isolated_env, monkeypatch):
    monkeypatch.setenv("FINI__FIX_CODE_BLOCKS", "true")
    path = isolated_env / "a.md"
    path.write_text("```\ny\n```\n")
    runner.invoke(app, [str(path)])
    assert path.read_text() == "y\n"


def test_broken_config_falls_back_to_defaults(isolated_env):
    (isolated_env / "fini.yaml").write_text("- nope\n")
    path = isolated_env / "a.txt"
    path.write_text("a  \n")
    result = runner.invoke(app, [str(path)])
    assert result.exit_code == 0
    assert "Warning: Failed to load" in result.output
    assert path.read_text() == "a\n"


def test_editorconfig_conflict_warning(isolated_env):
    (isolated_env / ".editorconfig").write_text("[*]\ninsert_final_newline = false\n")
    path = isolated_env / "a.txt"
    path.write_text("a\n")
    result = runner.invoke(app, [str(path)])
    assert "insert_final_newline" in result.output
