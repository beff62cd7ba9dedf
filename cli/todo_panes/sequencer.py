"""
Display ordering for todo items
"""

from functools import cmp_to_key
from typing import Iterable, List

from .models import TodoItem


def compare_todos(a: TodoItem, b: TodoItem) -> int:
    """Comparator by action date.

    Two undated items: someday/maybe first, otherwise equal.
    One undated item against a dated one compares equal (no fallback).
    Two dated items: earlier date first.
    """
    if a.action_date is None and b.action_date is None:
        if a.is_someday_maybe_note and not b.is_someday_maybe_note:
            return -1
        if not a.is_someday_maybe_note and b.is_someday_maybe_note:
            return 1
        return 0
    if a.action_date is None or b.action_date is None:
        return 0
    if a.action_date < b.action_date:
        return -1
    if a.action_date > b.action_date:
        return 1
    return 0


def sort_todos(items: Iterable[TodoItem]) -> List[TodoItem]:
    """Stable sort with compare_todos; returns a new list."""
    return sorted(items, key=cmp_to_key(compare_todos))
