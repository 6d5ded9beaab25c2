"""Core functionality package."""

from .binary import BinaryNotFoundError, BinaryProvider
from .config_merge import merge_configs
from .config_resolver import ResolvedConfig, find_config_file, load_config_file, resolve_config
from .diff_engine import (
    CoalescerState,
    DiffCoalescer,
    UnexpectedDiffOperationError,
    apply_differences,
    coalesce,
    contains_line_ending,
    generate_differences,
    raw_diff,
)
from .file_io import atomic_write, remove_file
from .invisibles import show_invisibles
from .locator import SourceLocator
from .runner import ExecutionResult, OxlintExecutionError, OxlintOutputError, OxlintRunner
from .temp_files import TempFileRegistry

__all__ = [
    "BinaryNotFoundError",
    "BinaryProvider",
    "CoalescerState",
    "DiffCoalescer",
    "ExecutionResult",
    "OxlintExecutionError",
    "OxlintOutputError",
    "OxlintRunner",
    "ResolvedConfig",
    "SourceLocator",
    "TempFileRegistry",
    "UnexpectedDiffOperationError",
    "apply_differences",
    "atomic_write",
    "coalesce",
    "contains_line_ending",
    "find_config_file",
    "generate_differences",
    "load_config_file",
    "merge_configs",
    "raw_diff",
    "remove_file",
    "resolve_config",
    "show_invisibles",
]
