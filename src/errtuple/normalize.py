"""Coerce any raised signal into a canonical ``Exception``."""

from __future__ import annotations

import logging
from typing import Any

from errtuple.config import DEFAULT_CONFIG, Config
from errtuple.errors import WrappedFailure

logger = logging.getLogger(__name__)


def normalize_failure(raised: Any, *, config: Config | None = None) -> Exception:
    """Return *raised* as an ``Exception``, wrapping it when it is not one.

    Exceptions pass through untouched so identity, attributes and traceback
    survive. Anything else (strings, numbers, ``None``, records, or a
    ``BaseException`` that is not an ``Exception``) becomes a new failure whose
    message is ``str(raised)``; the raw signal is kept on ``original``.

    Never raises.
    """
    # type() rather than isinstance(): a hostile __class__ property must not run.
    kind = type(raised)
    if issubclass(kind, Exception):
        return raised

    cfg = config or DEFAULT_CONFIG
    message = _render(raised, kind, cfg)

    try:
        failure = cfg.failure_type(message)
        failure.original = raised  # type: ignore[attr-defined]
    except BaseException as exc:
        logger.debug(
            "Could not build %s, using WrappedFailure: %r",
            cfg.failure_type.__name__,
            exc,
        )
        failure = WrappedFailure(message, original=raised)

    if issubclass(kind, BaseException):
        failure.__cause__ = raised
    return failure


def _render(raised: Any, kind: type, cfg: Config) -> str:
    try:
        return str(raised)
    except BaseException as exc:
        # RecursionError from runaway __str__ recursion lands here too, as does
        # a SystemExit or KeyboardInterrupt raised from inside __str__.
        logger.debug("Could not render raised %s: %r", kind.__name__, exc)
        return cfg.unrenderable_message
