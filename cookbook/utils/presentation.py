"""Shared output helpers for cookbook recipe terminal presentation.

These helpers aim for:
- scan-friendly sectioning
- compact, consistent key/value rows
- one line per captured outcome
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from errtuple import ResultTuple


def print_header(title: str) -> None:
    """Print recipe title."""
    print(title)
    print("=" * len(title))


def print_section(title: str) -> None:
    """Print a named section heading."""
    print(f"\n{title}")
    print("-" * len(title))


def print_kv_rows(rows: list[tuple[str, object]]) -> None:
    """Print compact key/value rows using a uniform bullet style."""
    for key, value in rows:
        rendered = str(value)
        # Preserve readability for multi-line values (indent continuation lines).
        lines = rendered.splitlines() or [""]
        print(f"- {key}: {lines[0]}")
        for cont in lines[1:]:
            print(f"  {' ' * len(key)}  {cont}")


def print_outcome(label: str, result: ResultTuple[object]) -> None:
    """Print one captured outcome as ``ok`` or the failure type and message."""
    err, value = result
    if err is None:
        print_kv_rows([(label, f"ok -> {value!r}")])
    else:
        print_kv_rows(
            [(label, f"{type(err).__name__}: {err} (value={value!r})")]
        )


def print_learning_hints(hints: list[str], *, title: str = "Next steps") -> None:
    """Print short coaching bullets that explain what to do next."""
    if not hints:
        return
    print_section(title)
    for hint in hints:
        print(f"- {hint}")
