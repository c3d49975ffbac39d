"""robolocopy CLI: copy files and directories with glob exclusions."""

from ._cp import main  # noqa: F401 (entry point)
