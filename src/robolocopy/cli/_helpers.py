"""Shared helpers and option decorators for the CLI."""

from __future__ import annotations

import shutil
import sys

import click

from ..copy._native import NATIVE_EXECUTABLE


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

_KIND_COLOURS = {
    "info": "blue",
    "notice": "yellow",
    "success": "green",
    "error": "red",
}


def _style_for(msg: str) -> str:
    """Colour for a progress line, from its kind (plain strings are info)."""
    return _KIND_COLOURS.get(getattr(msg, "kind", "info"), "blue")


def _status(ctx, msg):
    """Emit a status message to stderr when verbose mode (-V) is on."""
    if ctx.obj.get("verbose"):
        click.secho(msg, err=True, fg=_style_for(msg))


def _progress_cb(ctx):
    """Return a progress callback if verbose mode is on, else None."""
    if not ctx.obj.get("verbose"):
        return None
    def _on_progress(msg):
        _status(ctx, msg)
    return _on_progress


def _native_available(executable: str = NATIVE_EXECUTABLE) -> bool:
    """True on Windows when the native bulk-copy tool is on PATH."""
    return sys.platform == "win32" and shutil.which(executable) is not None


# ---------------------------------------------------------------------------
# Option decorators
# ---------------------------------------------------------------------------

def _exclude_options(f):
    """Shared --exclude / --exclude-from / --ignore-defaults options."""
    f = click.option("-X", "--ignore-defaults", is_flag=True, default=False,
                     help="Ignore default exclusion patterns.")(f)
    f = click.option("--exclude-from", "exclude_from",
                     type=click.Path(exists=True, dir_okay=False),
                     help="Read exclude patterns from file (one per line).")(f)
    f = click.option("-x", "--exclude", "exclude", multiple=True, metavar="PATTERNS",
                     help="Glob patterns to exclude (comma-separated or repeatable).")(f)
    return f
