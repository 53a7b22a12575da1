"""Pytest configuration and fixtures.

Provides shared test doubles for fallible operations. Fixtures here are
opt-in unless noted.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
import logging
from typing import Any

import pytest

# =============================================================================
# Test Doubles
# =============================================================================


class Unrenderable:
    """Signal whose ``__str__`` blows up, for exercising the placeholder path."""

    def __str__(self) -> str:
        raise RuntimeError("cannot render")


class SelfReferencing:
    """Signal whose text rendering recurses until the interpreter gives up."""

    def __str__(self) -> str:
        return f"<{self}>"


@dataclass
class FakeUserStore:
    """Async store double that records calls and fails for unknown ids."""

    missing_id: int = 404
    calls: int = 0

    async def get_user(self, user_id: int) -> dict[str, Any]:
        self.calls += 1
        await asyncio.sleep(0)
        if user_id <= 0:
            raise ValueError("Invalid user ID")
        if user_id == self.missing_id:
            raise LookupError("User not found")
        return {"id": user_id, "name": f"User {user_id}", "email": f"user{user_id}@example.com"}

    async def get_posts(self, user_id: int) -> list[dict[str, Any]]:
        self.calls += 1
        await asyncio.sleep(0)
        if user_id == self.missing_id:
            raise LookupError("User not found")
        return [
            {"id": 1, "title": "Post 1", "content": "Content 1"},
            {"id": 2, "title": "Post 2", "content": "Content 2"},
        ]


@pytest.fixture
def user_store() -> FakeUserStore:
    return FakeUserStore()


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture
def errtuple_debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture DEBUG records emitted under the ``errtuple`` logger."""
    caplog.set_level(logging.DEBUG, logger="errtuple")
    return caplog
