"""Test helpers (small, reusable doubles).

Keep this file tiny and purpose-built: it exists to prevent test suites from
growing lots of one-off fallible operations as coverage expands.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any


def settled_future(value: Any) -> asyncio.Future[Any]:
    """Return a future on the running loop already resolved with *value*."""
    fut: asyncio.Future[Any] = asyncio.get_running_loop().create_future()
    fut.set_result(value)
    return fut


def rejected_future(exc: BaseException) -> asyncio.Future[Any]:
    """Return a future on the running loop already failed with *exc*."""
    fut: asyncio.Future[Any] = asyncio.get_running_loop().create_future()
    fut.set_exception(exc)
    return fut


@dataclass
class ScriptedOperation:
    """Zero-argument async factory that returns or raises a scripted outcome.

    ``raise_on_call`` raises before any awaitable exists; ``outcome`` is
    returned or raised once the coroutine runs.
    """

    outcome: Any = None
    raise_on_call: BaseException | None = None
    calls: int = 0
    awaited: list[bool] = field(default_factory=list)

    def __call__(self) -> Any:
        self.calls += 1
        if self.raise_on_call is not None:
            raise self.raise_on_call
        return self._run()

    async def _run(self) -> Any:
        await asyncio.sleep(0)
        self.awaited.append(True)
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return self.outcome
