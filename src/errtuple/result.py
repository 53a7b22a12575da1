"""Result tuple returned by every wrapper."""

from __future__ import annotations

from typing import Generic, NamedTuple, TypeVar

T = TypeVar("T")


class ResultTuple(NamedTuple, Generic[T]):
    """Two-slot ``(error, value)`` outcome of a wrapped call.

    ``error`` is ``None`` when the operation succeeded and ``value`` is what it
    produced. On failure ``error`` holds the normalized exception and
    ``value`` the caller's fallback (``None`` when none was given).

    Example:
        err, user = await wrap_deferred(lambda: fetch_user(1))
        if err is not None:
            log.warning("fetch failed: %s", err)
    """

    error: Exception | None
    value: T | None

    @classmethod
    def success(cls, value: T) -> ResultTuple[T]:
        return cls(None, value)

    @classmethod
    def failure(cls, error: Exception, fallback: T | None = None) -> ResultTuple[T]:
        return cls(error, fallback)

    @property
    def ok(self) -> bool:
        """True when no failure was captured."""
        return self.error is None

    def unwrap(self) -> T | None:
        """Return the value, or re-raise the captured failure."""
        if self.error is not None:
            raise self.error
        return self.value

    def unwrap_or(self, default: T) -> T | None:
        """Return the produced value, or *default* when a failure was captured."""
        if self.error is not None:
            return default
        return self.value
