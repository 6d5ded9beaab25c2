"""oxlint-x: run oxlint on in-memory source and report fixable edits."""

from oxlint_x.core.config_merge import merge_configs
from oxlint_x.core.diff_engine import apply_differences, coalesce, generate_differences, raw_diff
from oxlint_x.core.invisibles import show_invisibles
from oxlint_x.linter import OxlintLinter

__version__ = "0.9.20"

__all__ = [
    "OxlintLinter",
    "__version__",
    "apply_differences",
    "coalesce",
    "generate_differences",
    "merge_configs",
    "raw_diff",
    "show_invisibles",
]
