"""Exclude-pattern support for copy operations.

Combines the built-in default patterns, ``--exclude`` tokens, and
``--exclude-from`` files into a single predicate used when filtering the
enumerated source tree.

Pattern syntax is plain glob (``*``, ``**``, ``?``) matched against the
whole ``/``-separated relative path, with dotfiles matchable by
wildcards.  See :func:`robolocopy._glob.glob_match`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

from ._glob import glob_match

DEFAULT_PATTERNS: tuple[str, ...] = (
    "node_modules/**",
    "dist/**",
    "build/**",
    "temp/**",
    "delete/**",
    "bin/**",
    "obj/**",
    "cache/**",
    "tmp/**",
    ".DS_Store",
    "coverage/**",
    ".cache/**",
    ".idea/**",
    "*.log",
)


def normalize_patterns(raw: Iterable[str] | None) -> list[str]:
    """Split comma-joined *raw* tokens into individual trimmed patterns.

    ``["a.txt, b.txt", " c "]`` becomes ``["a.txt", "b.txt", "c"]``.
    Empty pieces are dropped; order of appearance is kept.
    """
    patterns: list[str] = []
    for token in raw or ():
        for piece in token.split(","):
            piece = piece.strip()
            if piece:
                patterns.append(piece)
    return patterns


def read_exclude_file(path: str | Path) -> list[str]:
    """Read patterns from *path*, one per line.

    Blank lines and lines starting with ``#`` are skipped.
    """
    result: list[str] = []
    for raw in Path(path).read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if line and not line.startswith("#"):
            result.append(line)
    return result


def is_excluded(path: str, patterns: Sequence[str]) -> bool:
    """True if *path* matches any of *patterns*."""
    if not patterns:
        return False
    normalized = path.replace("\\", "/")
    return any(glob_match(p, normalized) for p in patterns)


class ExcludeFilter:
    """Combines --exclude patterns and --exclude-from files."""

    def __init__(
        self,
        *,
        patterns: Sequence[str] | None = None,
        exclude_from: str | Path | None = None,
    ) -> None:
        base: list[str] = list(patterns or ())
        if exclude_from is not None:
            base.extend(read_exclude_file(exclude_from))
        self._patterns: tuple[str, ...] = tuple(base)

    # ------------------------------------------------------------------
    @property
    def patterns(self) -> tuple[str, ...]:
        """The active patterns, in the order they were given."""
        return self._patterns

    @property
    def active(self) -> bool:
        """True if any filtering is configured."""
        return bool(self._patterns)

    # ------------------------------------------------------------------
    def is_excluded(self, rel_path: str) -> bool:
        """Check *rel_path* against every pattern."""
        return is_excluded(rel_path, self._patterns)

    def filter(self, entries: Iterable[str]) -> list[str]:
        """Return the *entries* that are not excluded, order preserved."""
        if not self.active:
            return list(entries)
        return [e for e in entries if not self.is_excluded(e)]
