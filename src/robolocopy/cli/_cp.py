"""The robolocopy command."""

from __future__ import annotations

import click

from ..copy import CopyOptions, StatusLine, copy_path
from .._exclude import ExcludeFilter, normalize_patterns
from ..exceptions import RobolocopyError
from ._helpers import _exclude_options, _native_available, _progress_cb, _status


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(None, "-v", "--version", package_name="robolocopy",
                      message="%(version)s", help="Output the current version.")
@click.argument("input_path", type=click.Path())
@click.argument("output_path", type=click.Path())
@_exclude_options
@click.option("--portable", is_flag=True, default=False,
              help="Never use the native bulk-copy tool.")
@click.option("-V", "--verbose", is_flag=True, default=False,
              help="Enable verbose output.")
@click.pass_context
def main(ctx, input_path, output_path, exclude, exclude_from, ignore_defaults, portable, verbose):
    """Copy INPUT_PATH into the OUTPUT_PATH directory, skipping excluded paths.

    A directory source has its contents copied into OUTPUT_PATH; a file
    source is copied to OUTPUT_PATH/<name>.  Exclusions are glob
    patterns (*, **, ?) matched against paths relative to the source,
    and wildcards match dotfiles too.

    \b
    Default exclusions (disable with -X):
      node_modules/**  dist/**  build/**  temp/**  delete/**  bin/**
      obj/**  cache/**  tmp/**  .DS_Store  coverage/**  .cache/**
      .idea/**  *.log

    \b
    Examples:
        robolocopy ./project ./backup
        robolocopy ./project ./backup -x "*.tmp, docs/**" -x .env
        robolocopy ./project ./backup -X --exclude-from .copyignore
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    try:
        user = ExcludeFilter(patterns=normalize_patterns(exclude), exclude_from=exclude_from)
    except (OSError, UnicodeDecodeError) as exc:
        raise click.ClickException(f"Cannot read {exclude_from}: {exc}")
    if user.active:
        _status(ctx, StatusLine(f"User exclusions: {len(user.patterns)}", "notice"))

    options = CopyOptions.from_tokens(
        user.patterns, ignore_defaults=ignore_defaults, verbose=verbose,
    )
    accelerated = not portable and _native_available()

    try:
        outcome = copy_path(
            input_path, output_path, options,
            accelerated=accelerated, progress=_progress_cb(ctx),
        )
    except (RobolocopyError, OSError) as exc:
        raise click.ClickException(str(exc))

    if not verbose:
        for err in outcome.errors:
            click.secho(f"Failed to copy {err.path}: {err.error}", err=True, fg="red")
    if outcome.errors:
        _status(ctx, StatusLine(
            f"Failed to copy {outcome.failed} of {outcome.attempted} entries", "error",
        ))
    click.secho("✓ Copy completed successfully.", fg="green")
