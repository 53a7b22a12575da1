"""Configuration: frozen settings for failure normalization."""

from __future__ import annotations

from dataclasses import dataclass

from errtuple.errors import ConfigurationError, WrappedFailure


@dataclass(frozen=True)
class Config:
    """Immutable settings consulted when a signal has to be normalized.

    Example:
        config = Config(unrenderable_message="<bad error>")
        failure = normalize_failure(signal, config=config)
    """

    #: Message used when the raised signal cannot be turned into text.
    unrenderable_message: str = "<unrenderable failure>"
    #: Exception type built around signals that are not exceptions.
    failure_type: type[Exception] = WrappedFailure

    def __post_init__(self) -> None:
        """Validate configuration."""
        if (
            not isinstance(self.unrenderable_message, str)
            or not self.unrenderable_message
        ):
            raise ConfigurationError(
                f"unrenderable_message must be a non-empty string, "
                f"got {self.unrenderable_message!r}",
                hint="Failures always carry a message; pick a fixed placeholder.",
            )
        if not (
            isinstance(self.failure_type, type)
            and issubclass(self.failure_type, Exception)
        ):
            raise ConfigurationError(
                f"failure_type must be an Exception subclass, got {self.failure_type!r}",
                hint="Use WrappedFailure or a subclass accepting a single message argument.",
            )


DEFAULT_CONFIG = Config()
