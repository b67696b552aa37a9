"""Exception hierarchy for Gauntlet.

Expected transformation failures are values (`Failure[TransformError]`), not
exceptions. The exceptions here cover misconfiguration and the explicit
conversion of a failure back into an exception at a caller-chosen boundary.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from gauntlet.transform import TransformError


class GauntletError(Exception):
    """Base exception for all Gauntlet errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(GauntletError):
    """Configuration or option validation failed."""


class TransformFailedError(GauntletError):
    """A transformation failure was escalated to an exception.

    Raised by `throw_on_err`. The message is the failure message; the full
    record, including the offending input, stays available as ``error``.
    """

    def __init__(self, error: TransformError[Any], *, hint: str | None = None) -> None:
        super().__init__(error.message, hint=hint)
        self.error = error

    @property
    def value(self) -> Any:
        """The input that failed to transform."""
        return self.error.value
