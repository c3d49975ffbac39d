"""File I/O helpers: single-file copy and the batched tree copier."""

from __future__ import annotations

import errno
import os
import shutil
import stat
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from ._types import CopyOutcome, EntryError, StatusLine


BATCH_SIZE = 100
PROGRESS_EVERY = 100


# ---------------------------------------------------------------------------
# Single entries
# ---------------------------------------------------------------------------

def _copy_file(src: Path, dst: Path) -> None:
    """Copy one file or symlink, overwriting *dst* and keeping timestamps."""
    # copy2 would otherwise drop the file inside an existing directory
    if dst.is_dir() and not dst.is_symlink():
        raise IsADirectoryError(errno.EISDIR, "Is a directory", str(dst))
    if dst.is_symlink():
        dst.unlink()
    if src.is_symlink():
        if dst.exists():
            dst.unlink()
        shutil.copy2(src, dst, follow_symlinks=False)
    else:
        shutil.copy2(src, dst)


def copy_single_file(src: str | os.PathLike[str], dest_dir: str | os.PathLike[str]) -> Path:
    """Copy *src* to ``dest_dir/<basename>`` and return the new path."""
    src = Path(src)
    out = Path(dest_dir) / src.name
    out.parent.mkdir(parents=True, exist_ok=True)
    _copy_file(src, out)
    return out


def _copy_entry(base: Path, dest: Path, entry: str) -> EntryError | None:
    """Copy one enumerated entry; return an :class:`EntryError` on failure."""
    src = base / entry
    out = dest / entry
    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        st = os.lstat(src)
        if stat.S_ISDIR(st.st_mode):
            out.mkdir(exist_ok=True)
        else:
            _copy_file(src, out)
    except OSError as exc:
        return EntryError(path=entry, error=exc.strerror or str(exc))
    except Exception as exc:
        return EntryError(path=entry, error=str(exc) or type(exc).__name__)
    return None


# ---------------------------------------------------------------------------
# Batched copy
# ---------------------------------------------------------------------------

def copy_entries(
    root: str | os.PathLike[str],
    dest: str | os.PathLike[str],
    entries: Sequence[str],
    *,
    batch_size: int = BATCH_SIZE,
    progress: Callable[[str], None] | None = None,
) -> CopyOutcome:
    """Copy *entries* (relative to *root*) into *dest*, best effort.

    Entries are processed in consecutive batches of *batch_size*.  All
    entries of a batch run concurrently and the whole batch settles
    before the next one starts.  A failing entry is recorded in
    :attr:`CopyOutcome.errors` and never stops the remaining entries.

    No filtering happens here; *entries* must already be filtered.
    """
    if batch_size < 1:
        raise ValueError(f"batch_size must be positive, got {batch_size}")
    base = Path(root)
    out = Path(dest)
    outcome = CopyOutcome(attempted=len(entries), strategy="portable")
    if not entries:
        return outcome

    with ThreadPoolExecutor(max_workers=min(batch_size, len(entries))) as pool:
        for start in range(0, len(entries), batch_size):
            batch = entries[start:start + batch_size]
            # map() yields in submission order once every task has finished
            results = list(pool.map(lambda e: _copy_entry(base, out, e), batch))
            for err in results:
                if err is not None:
                    outcome.errors.append(err)
                    if progress:
                        progress(StatusLine(f"Failed to copy {err.path}: {err.error}", "error"))
                    continue
                outcome.succeeded += 1
                if progress and outcome.succeeded % PROGRESS_EVERY == 0:
                    progress(StatusLine(f"Progress: copied {outcome.succeeded} entries...", "success"))

    if progress:
        progress(StatusLine(
            f"Successfully copied {outcome.succeeded} out of "
            f"{outcome.attempted} entries",
            "success",
        ))
    return outcome
