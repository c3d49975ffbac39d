"""Copy files and directory trees with glob-pattern exclusions.

A directory copy uses the native bulk-copy tool (robocopy) when the
caller says one is available, and otherwise, or when the tool fails,
walks the tree and copies entries in concurrent batches.  Per-entry
failures are collected in the returned :class:`CopyOutcome`.
"""

from .._exclude import DEFAULT_PATTERNS, ExcludeFilter, is_excluded, normalize_patterns
from ._types import CopyOptions, CopyOutcome, EntryError, NativeExclusionPlan, StatusLine
from ._resolve import enumerate_tree
from ._io import BATCH_SIZE, copy_entries, copy_single_file
from ._native import AcceleratedCopy, build_native_command, to_native_plan
from ._ops import PortableCopy, copy_path

__all__ = [
    # Public types
    "CopyOptions", "CopyOutcome", "EntryError", "ExcludeFilter",
    "NativeExclusionPlan", "StatusLine", "AcceleratedCopy", "PortableCopy",
    # Public functions
    "copy_path", "copy_entries", "copy_single_file", "enumerate_tree",
    "is_excluded", "normalize_patterns", "to_native_plan",
    "build_native_command",
    # Constants
    "BATCH_SIZE", "DEFAULT_PATTERNS",
]
