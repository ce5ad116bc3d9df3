"""Exception taxonomy for module lookup and composition.

WHY: Every failure here is either a caller misconfiguration (wrong module
name, bad preset) or an environment problem (unreadable file). Callers
need typed exceptions to report them clearly; nothing is retried.

HOW: A single base class, ComposerError, with one subclass per failure.
Lower-level exceptions are chained with ``raise ... from``.

RULES:
- Catch ComposerError to handle every composer failure
- IOFailure always chains the original OSError / UnicodeDecodeError
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class ComposerError(Exception):
    """Base class for all instruction composer errors."""


class ModuleNotFound(ComposerError):
    """Raised when a module reference does not resolve to a file.

    WHY: A missing module means the composed document would silently lack
    guidance the caller asked for.

    HOW: Raised by the library before any content is joined, so no partial
    output is ever produced.

    RULES:
    - ref is the reference as the caller gave it
    - searched lists the library directories that were checked
    """

    def __init__(self, ref: str, searched: Sequence[str] = ()) -> None:
        self.ref = ref
        self.searched = list(searched)
        if self.searched:
            message = "Module not found: {} (searched: {})".format(
                ref, ", ".join(self.searched)
            )
        else:
            message = "Module not found: {}".format(ref)
        super().__init__(message)


class AmbiguousModule(ComposerError):
    """Raised when a bare module name exists in more than one category."""

    def __init__(self, ref: str, candidates: Sequence[str]) -> None:
        self.ref = ref
        self.candidates = list(candidates)
        super().__init__(
            "Module name '{}' is ambiguous; use one of: {}".format(
                ref, ", ".join(self.candidates)
            )
        )


class EmptyRequest(ComposerError):
    """Raised when a composition is requested with no modules."""


class IOFailure(ComposerError):
    """Raised when a module or output file cannot be read or written.

    RULES:
    - path is the file that failed
    - The original exception is available as __cause__
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__("Cannot access {}: {}".format(path, reason))


class PresetError(ComposerError):
    """Raised for an invalid preset manifest or an unknown preset name."""
