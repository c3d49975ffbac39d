"""Directory walking for the portable copy."""

from __future__ import annotations

import os
from pathlib import Path

from ..exceptions import EnumerationError


def enumerate_tree(root: str | os.PathLike[str]) -> list[str]:
    """Return every file and directory under *root* as relative paths.

    Paths use forward slashes and include dotfiles.  Directories are
    listed as entries of their own so empty ones survive the copy.
    Symlinks are listed but never descended into, including symlinks
    to directories.

    The result is sorted, so a directory always precedes its contents.
    Raises :class:`EnumerationError` if *root* is missing, is not a
    directory, or any directory below it cannot be listed.
    """
    base = Path(root)
    if not base.is_dir():
        raise EnumerationError(f"Cannot list source directory: {base}")

    def _onerror(exc: OSError) -> None:
        raise EnumerationError(f"Cannot list {exc.filename}: {exc.strerror}") from exc

    result: list[str] = []
    for dirpath, dirnames, filenames in os.walk(base, onerror=_onerror, followlinks=False):
        dp = Path(dirpath)
        for name in dirnames + filenames:
            rel = (dp / name).relative_to(base)
            result.append(str(rel).replace(os.sep, "/"))
    result.sort()
    return result
