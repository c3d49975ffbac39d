"""Data structures for copy operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .._exclude import DEFAULT_PATTERNS, normalize_patterns


@dataclass(frozen=True)
class CopyOptions:
    """Per-invocation copy settings.

    Attributes:
        exclude: User exclusion patterns (already normalized).
        ignore_defaults: Skip *defaults* when building :attr:`patterns`.
        verbose: Emit progress messages through the ``progress`` callback.
        defaults: Default exclusion patterns, :data:`DEFAULT_PATTERNS`
            unless overridden.
    """
    exclude: tuple[str, ...] = ()
    ignore_defaults: bool = False
    verbose: bool = False
    defaults: tuple[str, ...] = DEFAULT_PATTERNS

    @classmethod
    def from_tokens(
        cls,
        tokens: Iterable[str] | None = None,
        *,
        ignore_defaults: bool = False,
        verbose: bool = False,
        defaults: Iterable[str] = DEFAULT_PATTERNS,
    ) -> CopyOptions:
        """Build options from raw, possibly comma-joined, exclude tokens."""
        return cls(
            exclude=tuple(normalize_patterns(tokens)),
            ignore_defaults=ignore_defaults,
            verbose=verbose,
            defaults=tuple(defaults),
        )

    @property
    def patterns(self) -> list[str]:
        """Effective pattern set: defaults (unless ignored) then user patterns."""
        base = [] if self.ignore_defaults else list(self.defaults)
        return base + list(self.exclude)


@dataclass
class EntryError:
    """An entry that failed during a batched copy.

    Attributes:
        path: Relative path of the entry (forward slashes).
        error: Human-readable error message.
    """
    path: str
    error: str


@dataclass
class CopyOutcome:
    """Result of a :func:`~robolocopy.copy_path` call.

    The native accelerator does not report per-entry results, so a
    ``"native"`` outcome has ``attempted == succeeded == 0`` and carries
    the tool's :attr:`exit_code` instead.

    Attributes:
        attempted: Entries handed to the copier.
        succeeded: Entries copied without error.
        errors: Per-entry failures, in the order they were collected.
        strategy: ``"native"``, ``"portable"``, ``"file"`` or ``"skipped"``.
        exit_code: Exit status of the native tool, if it was used.
    """
    attempted: int = 0
    succeeded: int = 0
    errors: list[EntryError] = field(default_factory=list)
    strategy: str = "portable"
    exit_code: int | None = None

    @property
    def failed(self) -> int:
        """Number of entries that failed."""
        return len(self.errors)

    @property
    def ok(self) -> bool:
        """``True`` if no entry failed."""
        return not self.errors


@dataclass(frozen=True)
class NativeExclusionPlan:
    """Exclusions for the native tool's ``/XD`` and ``/XF`` flags.

    Approximation only: see :func:`~robolocopy.copy._native.to_native_plan`.
    """
    dir_excludes: tuple[str, ...] = ()
    file_excludes: tuple[str, ...] = ()


class StatusLine(str):
    """A progress message tagged with what kind of event it reports.

    Behaves as the plain message text; :attr:`kind` is one of ``"info"``,
    ``"notice"`` (exclusions, skips, fallbacks), ``"success"`` or
    ``"error"``.
    """
    kind: str

    def __new__(cls, text: str, kind: str = "info") -> StatusLine:
        line = super().__new__(cls, text)
        line.kind = kind
        return line
