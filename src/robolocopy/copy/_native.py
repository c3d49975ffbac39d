"""Native bulk-copy accelerator (robocopy) support.

.. warning::

   :func:`to_native_plan` is a heuristic, not a faithful compiler of glob
   semantics.  robocopy only understands exclusions by directory name or
   path (``/XD``) and by file name wildcard (``/XF``), with no recursive
   ``**``.  Patterns are sorted into those two buckets by shape: anything
   without an extension is assumed to be a directory, anything with one
   a file.  Extension-less files and dotted directory names can land in
   the wrong bucket, and a path-anchored glob like ``dist/**`` excludes
   *every* directory named ``dist``, not only the top-level one.

   A few very common names (``node_modules``, ``dist``, ``build``,
   ``.git``) are always added as directory exclusions when any pattern
   mentions them.

The portable copy (:mod:`._io`) applies the exact glob semantics; use it
whenever precise exclusion matters.
"""

from __future__ import annotations

import os
import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path

from ..exceptions import AcceleratorError
from ._types import CopyOutcome, NativeExclusionPlan, StatusLine


NATIVE_EXECUTABLE = "robocopy"

# robocopy exit codes 0-7 are bit flags describing a successful run
# (files copied, extras present, mismatches); 8 and above mean failure.
MAX_SUCCESS_EXIT_CODE = 7

# substring in any pattern as given -> directory name always excluded
_SAFETY_NET = (
    ("node_modules", "node_modules"),
    ("dist/", "dist"),
    ("build/", "build"),
    (".git", ".git"),
)


def _has_wildcard(pattern: str) -> bool:
    return "*" in pattern or "?" in pattern


def _dedupe(items: list[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(items))


def to_native_plan(patterns: Sequence[str]) -> NativeExclusionPlan:
    """Sort glob *patterns* into robocopy directory and file exclusions.

    Best effort; see the module docstring for what gets lost.
    """
    dirs: list[str] = []
    files: list[str] = []

    for pattern in patterns:
        norm = pattern.replace("\\", "/")

        # "dist/**" -> directory "dist"
        if norm.endswith("/**"):
            dirs.append(norm[:-3])
            continue

        if "/" in norm:
            parts = norm.split("/")
            if "*" not in parts[-1]:
                dirs.append("\\".join(parts))
            continue

        # No separator: robocopy has no recursive wildcard, collapse ** to *
        native = norm.replace("**", "*")
        if native.endswith("/"):
            dirs.append(native[:-1])
        elif not _has_wildcard(native):
            if "." in native:
                files.append(native)
            else:
                dirs.append(native)
        else:
            files.append(native)

    for needle, name in _SAFETY_NET:
        if any(needle in p for p in patterns):
            dirs.append(name)

    return NativeExclusionPlan(dir_excludes=_dedupe(dirs), file_excludes=_dedupe(files))


def build_native_command(
    source: str | os.PathLike[str],
    dest: str | os.PathLike[str],
    plan: NativeExclusionPlan,
    *,
    executable: str = NATIVE_EXECUTABLE,
) -> list[str]:
    """Return the robocopy argv for copying *source* into *dest*.

    ``/E`` copies subdirectories including empty ones, ``/NFL`` and
    ``/NDL`` suppress the per-file and per-directory listing, ``/XJ``
    skips junctions and symlinked directories and ``/DCOPY:T`` keeps
    directory timestamps (file timestamps are kept by default).
    """
    cmd = [executable, os.fspath(source), os.fspath(dest), "/E", "/NFL", "/NDL", "/XJ", "/DCOPY:T"]
    if plan.file_excludes:
        cmd.append("/XF")
        cmd.extend(plan.file_excludes)
    if plan.dir_excludes:
        cmd.append("/XD")
        cmd.extend(plan.dir_excludes)
    return cmd


class AcceleratedCopy:
    """Copy a directory tree with the platform's native bulk-copy tool.

    Raises :class:`AcceleratorError` when the tool cannot be started or
    exits with a failure status.
    """

    name = "native"

    def __init__(self, executable: str = NATIVE_EXECUTABLE):
        self.executable = executable

    def copy(
        self,
        source: Path,
        dest: Path,
        patterns: Sequence[str],
        say: Callable[[str], None],
        *,
        verbose: bool = False,
    ) -> CopyOutcome:
        plan = to_native_plan(patterns)
        cmd = build_native_command(
            source.resolve(), dest.resolve(), plan, executable=self.executable,
        )

        say(f"Using {self.executable}: {subprocess.list2cmdline(cmd)}")
        if plan.dir_excludes:
            say(StatusLine("Directory exclusions:", "notice"))
            for d in plan.dir_excludes:
                say(StatusLine(f"- {d}", "notice"))
        if plan.file_excludes:
            say(StatusLine("File exclusions:", "notice"))
            for f in plan.file_excludes:
                say(StatusLine(f"- {f}", "notice"))

        output = None if verbose else subprocess.DEVNULL
        try:
            proc = subprocess.run(cmd, stdout=output, stderr=output, check=False)
        except OSError as exc:
            raise AcceleratorError(f"Cannot run {self.executable}: {exc}") from exc

        if proc.returncode > MAX_SUCCESS_EXIT_CODE or proc.returncode < 0:
            raise AcceleratorError(
                f"{self.executable} failed with exit code {proc.returncode}",
                exit_code=proc.returncode,
            )
        return CopyOutcome(strategy=self.name, exit_code=proc.returncode)
