"""Pure candidate-list transforms.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def deduplicate(candidates: Iterable[str]) -> list[str]:
    """Drop repeated entries, keeping the first occurrence."""
    seen: set[str] = set()
    result: list[str] = []
    for candidate in candidates:
        if candidate not in seen:
            seen.add(candidate)
            result.append(candidate)
    return result


def current_first(candidates: Sequence[str], current: str | None) -> list[str]:
    """Move *current* to the front, preserving the order of the rest.

    When *current* is ``None``, empty, or not a candidate the list is
    returned unchanged (as a copy).
    """
    ordered = deduplicate(candidates)
    if current and current in ordered:
        ordered.remove(current)
        ordered.insert(0, current)
    return ordered
