"""Exception hierarchy for errtuple."""

from __future__ import annotations

from typing import Any


class ErrtupleError(Exception):
    """Base exception for all errtuple errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class WrappedFailure(ErrtupleError):
    """Canonical failure built for a signal that was not an ``Exception``.

    ``message`` is the text rendering of the signal; ``original`` keeps the
    raw object so callers can still inspect it.
    """

    def __init__(
        self,
        message: str,
        *,
        original: Any = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.message = message
        self.original = original


class ConfigurationError(ErrtupleError):
    """Configuration validation failed."""
