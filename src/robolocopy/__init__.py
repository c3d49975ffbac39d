from .exceptions import (
    AcceleratorError,
    DestinationUncreatableError,
    EnumerationError,
    PathNotFoundError,
    RobolocopyError,
)
from .copy import copy_path, copy_entries, enumerate_tree, to_native_plan
from .copy import CopyOptions, CopyOutcome, EntryError, NativeExclusionPlan
from .copy import AcceleratedCopy, PortableCopy
from .copy import DEFAULT_PATTERNS, ExcludeFilter, is_excluded, normalize_patterns

__all__ = [
    "copy_path", "copy_entries", "enumerate_tree", "to_native_plan",
    "CopyOptions", "CopyOutcome", "EntryError", "NativeExclusionPlan",
    "AcceleratedCopy", "PortableCopy",
    "DEFAULT_PATTERNS", "ExcludeFilter", "is_excluded", "normalize_patterns",
    "RobolocopyError", "PathNotFoundError", "DestinationUncreatableError",
    "EnumerationError", "AcceleratorError",
]
