"""Pass modules, imported for their registration side effects."""

from importlib import import_module

_PASS_MODULES = [
    "line_endings",
    "zero_width",
    "leading_blanks",
    "blank_runs",
    "code_fences",
    "fullwidth_space",
    "trailing_whitespace",
    "eof_newline",
    "detect_markers",
    "detect_debug",
    "detect_secrets",
    "detect_long_lines",
]

# Import submodules for registration side effects without polluting the package
# namespace. This keeps ``fini.passes.<module>`` importable while ensuring
# each pass registers itself with the framework.
for _mod in _PASS_MODULES:  # pragma: no cover - import side effects only
    import_module(f".{_mod}", __name__)

__all__ = list(_PASS_MODULES)
