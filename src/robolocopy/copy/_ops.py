"""Top-level copy: validation, strategy selection, and fallback."""

from __future__ import annotations

import os
from collections.abc import Callable, Sequence
from pathlib import Path

from .._exclude import ExcludeFilter
from ..exceptions import AcceleratorError, DestinationUncreatableError, PathNotFoundError
from ._io import BATCH_SIZE, copy_entries, copy_single_file
from ._native import AcceleratedCopy
from ._resolve import enumerate_tree
from ._types import CopyOptions, CopyOutcome, StatusLine


def _quiet(msg: str) -> None:
    pass


class PortableCopy:
    """Copy a directory tree by walking it and copying entries in batches."""

    name = "portable"

    def __init__(self, batch_size: int = BATCH_SIZE):
        self.batch_size = batch_size

    def copy(
        self,
        source: Path,
        dest: Path,
        patterns: Sequence[str],
        say: Callable[[str], None],
        *,
        verbose: bool = False,
    ) -> CopyOutcome:
        base = source.resolve()
        entries = enumerate_tree(base)
        say(f"Found {len(entries)} entries to process")

        kept = ExcludeFilter(patterns=patterns).filter(entries)
        say(f"After exclusion filters: {len(kept)} entries to copy")

        return copy_entries(
            base, dest, kept,
            batch_size=self.batch_size,
            progress=say if verbose else None,
        )


def _copy_one_file(src: Path, dest: Path, patterns: Sequence[str],
                   say: Callable[[str], None]) -> CopyOutcome:
    """Copy a single file into *dest* unless its base name is excluded."""
    name = src.name
    if ExcludeFilter(patterns=patterns).is_excluded(name):
        say(StatusLine(f"Skipping excluded file: {name}", "notice"))
        return CopyOutcome(strategy="skipped")
    copy_single_file(src, dest)
    say(StatusLine(f"Copied file: {name}", "success"))
    return CopyOutcome(attempted=1, succeeded=1, strategy="file")


def copy_path(
    input_path: str | os.PathLike[str],
    output_path: str | os.PathLike[str],
    options: CopyOptions | None = None,
    *,
    accelerated: bool = False,
    progress: Callable[[str], None] | None = None,
    native: AcceleratedCopy | None = None,
    portable: PortableCopy | None = None,
) -> CopyOutcome:
    """Copy a file or directory tree from *input_path* into *output_path*.

    Args:
        input_path: Source file or directory.
        output_path: Destination directory; created if missing.  A file
            source lands at ``output_path/<basename>``; a directory
            source has its *contents* copied into ``output_path``.
        options: Exclusion and verbosity settings
            (default: :class:`CopyOptions` with default patterns).
        accelerated: Whether a native bulk-copy tool is available.  When
            set and the source is a directory, the native tool is tried
            first and any :class:`AcceleratorError` falls back silently
            to the portable copy.
        progress: Called with human-readable status lines when
            ``options.verbose`` is set.
        native: Accelerated strategy to use (default: robocopy).
        portable: Portable strategy to use (default: batches of 100).

    Returns:
        A :class:`CopyOutcome`.  Per-entry failures are collected there
        and do not raise.

    Raises:
        PathNotFoundError: *input_path* does not exist.
        DestinationUncreatableError: *output_path* cannot be created.
        EnumerationError: the source tree cannot be listed.
    """
    options = options or CopyOptions()
    verbose = bool(options.verbose and progress)
    say = progress if verbose else _quiet

    src = Path(input_path)
    dest = Path(output_path)
    say(f"Copying from: {src}")
    say(f"Copying to: {dest}")

    if not os.path.exists(src):
        raise PathNotFoundError(f"Source path does not exist: {src}")

    try:
        dest.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DestinationUncreatableError(
            f"Cannot create destination directory: {dest} ({exc.strerror or exc})"
        ) from exc

    patterns = options.patterns
    if patterns:
        say(StatusLine("Excluding patterns:", "notice"))
        for p in patterns:
            say(StatusLine(f"- {p}", "notice"))

    if not src.is_dir():
        return _copy_one_file(src, dest, patterns, say)

    if accelerated:
        native = native or AcceleratedCopy()
        try:
            return native.copy(src, dest, patterns, say, verbose=verbose)
        except AcceleratorError as exc:
            say(StatusLine(
                f"{native.executable} failed, falling back to portable copy: {exc}",
                "notice",
            ))

    portable = portable or PortableCopy()
    return portable.copy(src, dest, patterns, say, verbose=verbose)
