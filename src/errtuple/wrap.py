"""Wrappers turning raised exceptions into ``(error, value)`` tuples.

Three entry points share one result shape:

- ``wrap_deferred``: call a factory that starts async work, await it.
- ``wrap_sync``: call a plain function, no suspension.
- ``wrap_awaitable``: await work the caller already started.

Everything raised is captured except the control-flow signals in
``PASSTHROUGH`` (``asyncio.CancelledError``, ``KeyboardInterrupt``,
``SystemExit``, ``GeneratorExit``), which propagate unchanged so task
cancellation and interpreter shutdown keep working.
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import inspect
from typing import TYPE_CHECKING, Any, TypeVar

from errtuple.normalize import normalize_failure
from errtuple.result import ResultTuple

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

T = TypeVar("T")

PASSTHROUGH: tuple[type[BaseException], ...] = (
    asyncio.CancelledError,
    KeyboardInterrupt,
    SystemExit,
    GeneratorExit,
)


async def wrap_deferred(
    operation: Callable[[], Awaitable[T]],
    fallback: T | None = None,
) -> ResultTuple[T]:
    """Run an async factory and capture its outcome.

    A raise while calling *operation* and a failure of the awaitable it
    returns end up in the same failure slot. A non-awaitable return value is
    treated as an already-settled success.

    Example:
        err, users = await wrap_deferred(lambda: fetch_users(), [])
    """
    try:
        pending: Any = operation()
        if inspect.isawaitable(pending):
            value = await pending
        else:
            value = pending
    except PASSTHROUGH:
        raise
    except BaseException as exc:
        return ResultTuple.failure(normalize_failure(exc), fallback)
    return ResultTuple.success(value)


def wrap_sync(
    operation: Callable[[], T],
    fallback: T | None = None,
) -> ResultTuple[T]:
    """Call *operation* and capture its outcome without suspending.

    Example:
        err, data = wrap_sync(lambda: json.loads(raw), {})
    """
    try:
        value = operation()
    except PASSTHROUGH:
        raise
    except BaseException as exc:
        return ResultTuple.failure(normalize_failure(exc), fallback)
    return ResultTuple.success(value)


async def wrap_awaitable(
    awaitable: Awaitable[T] | concurrent.futures.Future[T],
    fallback: T | None = None,
) -> ResultTuple[T]:
    """Await work that is already in flight and capture its outcome.

    Accepts coroutines, tasks, asyncio futures, and ``concurrent.futures``
    futures (e.g. work submitted to a thread pool).

    Example:
        task = asyncio.create_task(fetch_user(1))
        err, user = await wrap_awaitable(task)
    """
    if isinstance(awaitable, concurrent.futures.Future):
        awaitable = asyncio.wrap_future(awaitable)
    try:
        value = await awaitable
    except PASSTHROUGH:
        raise
    except BaseException as exc:
        return ResultTuple.failure(normalize_failure(exc), fallback)
    return ResultTuple.success(value)


# Short names for call sites that read like ``err, v = await to(...)``.
to = wrap_deferred
to_sync = wrap_sync
to_promise = wrap_awaitable
