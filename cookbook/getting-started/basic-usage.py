#!/usr/bin/env python3
"""Recipe: Replace try/except blocks with (error, value) tuples.

Problem:
    A handler calls several fallible operations and wants to keep going with
    sensible defaults instead of nesting try/except around each call.

When to use:
    - Each failure is handled locally (log, default, skip).
    - The same call site mixes coroutines, plain functions and running tasks.

When not to use:
    - The failure should abort the whole request (just let it raise).

Run:
    PYTHONPATH=. python cookbook/getting-started/basic-usage.py

Success check:
    - Every section prints one line per call; nothing raises.
    - The profile section prints data assembled partly from fallbacks.
"""

from __future__ import annotations

import argparse
import asyncio
from concurrent.futures import ThreadPoolExecutor
import json
from typing import Any

from cookbook.utils.presentation import (
    print_header,
    print_kv_rows,
    print_learning_hints,
    print_outcome,
    print_section,
)
from errtuple import wrap_awaitable, wrap_deferred, wrap_sync

MISSING_USER_ID = 999
DEFAULT_SETTINGS = {"theme": "light", "notifications": False}


class FakeDatabase:
    """In-process stand-in for a remote store; fails for ``MISSING_USER_ID``."""

    async def get_user(self, user_id: int) -> dict[str, Any]:
        await asyncio.sleep(0.01)
        if user_id <= 0:
            raise ValueError("Invalid user ID")
        if user_id == MISSING_USER_ID:
            raise LookupError("User not found")
        return {"id": user_id, "name": f"User {user_id}", "preferences": {}}

    async def get_posts(self, user_id: int) -> list[dict[str, Any]]:
        await asyncio.sleep(0.01)
        if user_id == MISSING_USER_ID:
            raise LookupError("User not found")
        return [
            {"id": 1, "title": "Hello World", "content": "First post"},
            {"id": 2, "title": "Second Post", "content": "Another post"},
        ]

    async def get_settings(self, user_id: int) -> dict[str, Any]:
        await asyncio.sleep(0.01)
        if user_id == MISSING_USER_ID:
            raise LookupError("Settings not found")
        return {"theme": "dark", "notifications": True}


async def basic_example(db: FakeDatabase) -> None:
    print_section("Async calls")
    print_outcome("get_user(1)", await wrap_deferred(lambda: db.get_user(1)))
    print_outcome("get_user(-1)", await wrap_deferred(lambda: db.get_user(-1)))
    print_outcome(
        "get_posts(999) with []",
        await wrap_deferred(lambda: db.get_posts(MISSING_USER_ID), []),
    )


def sync_example() -> None:
    print_section("Sync calls")
    for raw in ['{"valid": "json"}', "invalid json"]:
        print_outcome(f"json.loads({raw!r})", wrap_sync(lambda: json.loads(raw), {}))


async def in_flight_example(db: FakeDatabase) -> None:
    print_section("Work already in flight")
    task = asyncio.create_task(db.get_user(MISSING_USER_ID))
    print_outcome("task", await wrap_awaitable(task, {"name": "Anonymous"}))

    with ThreadPoolExecutor(max_workers=1) as pool:
        future = pool.submit(int, "42")
        print_outcome("thread pool", await wrap_awaitable(future))


async def profile_example(db: FakeDatabase, user_id: int) -> dict[str, Any]:
    """Assemble a profile, substituting defaults for whatever failed."""
    user_err, user = await wrap_deferred(lambda: db.get_user(user_id))
    _, posts = await wrap_deferred(lambda: db.get_posts(user_id), [])
    _, settings = await wrap_deferred(
        lambda: db.get_settings(user_id), DEFAULT_SETTINGS
    )

    profile = {
        "user": user or {"id": 0, "name": "Anonymous", "preferences": {}},
        "posts": posts,
        "settings": settings,
    }
    print_section(f"Profile for {user_id}")
    print_kv_rows(
        [
            ("User", profile["user"]["name"]),
            ("Posts", len(profile["posts"] or [])),
            ("Settings", profile["settings"]),
            ("User lookup error", user_err),
        ]
    )
    return profile


async def main_async(user_id: int) -> None:
    db = FakeDatabase()
    await basic_example(db)
    sync_example()
    await in_flight_example(db)
    await profile_example(db, user_id)
    print_learning_hints(
        [
            f"Next: rerun with --user-id {MISSING_USER_ID} to see every fallback kick in.",
            "Next: log `err` where you ignore it; a silent fallback hides outages.",
        ]
    )


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Show the three errtuple wrappers against an in-process fake.",
    )
    parser.add_argument("--user-id", type=int, default=1, help="User to build a profile for")
    args = parser.parse_args()

    print_header("errtuple basics")
    asyncio.run(main_async(args.user_id))


if __name__ == "__main__":
    main()
