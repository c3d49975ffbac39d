"""Console-script entry point for ``robolocopy`` and ``python -m robolocopy``.

The copy engine has no third-party dependencies; only the command line
needs click, which ships in the ``cli`` extra.
"""

import sys


def main():
    try:
        from .cli import main as cli_main
    except ModuleNotFoundError as exc:
        if exc.name != "click":
            raise
        sys.stderr.write(
            "robolocopy: the command line needs click, which is not installed.\n"
            "Install it with:  pip install 'robolocopy[cli]'\n"
        )
        raise SystemExit(1)
    cli_main(prog_name="robolocopy")
