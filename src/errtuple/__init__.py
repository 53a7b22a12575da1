"""errtuple: Go-style ``(error, value)`` tuples for fallible Python calls.

Public API:
    - wrap_deferred() / to(): Await a factory that starts async work
    - wrap_sync() / to_sync(): Call a plain function
    - wrap_awaitable() / to_promise(): Await work already in flight
    - normalize_failure(): Coerce any raised signal into an Exception
    - ResultTuple: The ``(error, value)`` shape every wrapper returns
    - Config: Normalization settings
"""

from __future__ import annotations

import logging

from errtuple.config import DEFAULT_CONFIG, Config
from errtuple.errors import ConfigurationError, ErrtupleError, WrappedFailure
from errtuple.normalize import normalize_failure
from errtuple.result import ResultTuple
from errtuple.wrap import (
    to,
    to_promise,
    to_sync,
    wrap_awaitable,
    wrap_deferred,
    wrap_sync,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("errtuple")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("errtuple").addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_CONFIG",
    "Config",
    "ConfigurationError",
    "ErrtupleError",
    "ResultTuple",
    "WrappedFailure",
    "normalize_failure",
    "to",
    "to_promise",
    "to_sync",
    "wrap_awaitable",
    "wrap_deferred",
    "wrap_sync",
]
