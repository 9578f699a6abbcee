# Auto-register passes on package import (e.g., when importing any submodule)
from . import passes  # noqa: F401
from .pipeline import NormalizeConfig, NormalizeResult, normalize
from .problems import Problem, ProblemKind, is_detection_only

__version__ = "0.4.0"

__all__: list[str] = [
    "NormalizeConfig",
    "NormalizeResult",
    "Problem",
    "ProblemKind",
    "is_detection_only",
    "normalize",
]
