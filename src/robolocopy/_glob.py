"""Shared dotfile-matching glob matching."""

from __future__ import annotations

from fnmatch import fnmatchcase as _fnmatch


def _glob_match(pattern: str, name: str) -> bool:
    """Match *name* against a single glob *pattern* segment.

    ``*`` and ``?`` match a leading ``.`` too, so wildcards reach hidden
    entries.  Matching is case-sensitive on every platform.
    """
    return _fnmatch(name, pattern)


def _split(path: str) -> list[str]:
    return path.replace("\\", "/").split("/")


def glob_match(pattern: str, path: str) -> bool:
    """Match a relative *path* against a full glob *pattern*.

    Both are split on ``/`` (backslashes are treated as ``/``).  A segment
    that is exactly ``**`` matches zero or more whole path segments; every
    other segment is matched with :func:`_glob_match` against exactly one
    path segment.
    """
    return _match_segments(_split(pattern), _split(path))


def _match_segments(segs: list[str], parts: list[str]) -> bool:
    if not segs:
        return not parts
    seg = segs[0]
    rest = segs[1:]

    if seg == "**":
        # Collapse runs of ** so each is only explored once
        while rest and rest[0] == "**":
            rest = rest[1:]
        if not rest:
            return True
        for i in range(len(parts) + 1):
            if _match_segments(rest, parts[i:]):
                return True
        return False

    if not parts:
        return False
    if not _glob_match(seg, parts[0]):
        return False
    return _match_segments(rest, parts[1:])
