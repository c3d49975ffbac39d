"""Exceptions for robolocopy."""


class RobolocopyError(Exception):
    """Base class for all errors raised by robolocopy."""


class PathNotFoundError(RobolocopyError, FileNotFoundError):
    """Raised when the copy source does not exist or cannot be accessed."""


class DestinationUncreatableError(RobolocopyError, OSError):
    """Raised when the destination directory cannot be created."""


class EnumerationError(RobolocopyError, OSError):
    """Raised when the source tree cannot be listed."""


class AcceleratorError(RobolocopyError):
    """Raised when the native bulk-copy tool is missing or reports failure.

    :func:`~robolocopy.copy_path` catches this and falls back to the
    portable copy, so callers normally never see it.
    """

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        self.exit_code = exit_code
