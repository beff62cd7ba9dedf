"""
Pane Classification

Decides which pane a todo item belongs to. Each pane has its own predicate
over the same item, so panes can be checked (and tested) in isolation.

Usage:
    from todo_panes.classifier import is_member
    is_member(item, "alice", TodoItemViewPane.TODAY, date.today())
"""

from datetime import date, datetime
from typing import Callable, Dict

from .models import TodoItem, TodoItemViewPane
from .text_filter import matches

PanePredicate = Callable[[TodoItem, str, date], bool]


def _as_date(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def is_today_or_overdue(item: TodoItem, today: date) -> bool:
    """Action date is today or earlier"""
    if item.action_date is None:
        return False
    return item.action_date <= _as_date(today)


def is_future_scheduled(item: TodoItem, today: date) -> bool:
    """Dated after today and not flagged someday/maybe"""
    return (
        not item.is_someday_maybe_note
        and item.action_date is not None
        and not is_today_or_overdue(item, today)
    )


def _today_pane(item: TodoItem, query: str, today: date) -> bool:
    return is_today_or_overdue(item, today)


def _scheduled_pane(item: TodoItem, query: str, today: date) -> bool:
    return is_future_scheduled(item, today)


def _inbox_pane(item: TodoItem, query: str, today: date) -> bool:
    return (
        not item.is_someday_maybe_note
        and not is_today_or_overdue(item, today)
        and not is_future_scheduled(item, today)
    )


def _someday_pane(item: TodoItem, query: str, today: date) -> bool:
    return item.is_someday_maybe_note


def _stakeholder_pane(item: TodoItem, query: str, today: date) -> bool:
    # Only ever shows filtered results
    return query != ""


PANE_RULES: Dict[TodoItemViewPane, PanePredicate] = {
    TodoItemViewPane.TODAY: _today_pane,
    TodoItemViewPane.SCHEDULED: _scheduled_pane,
    TodoItemViewPane.INBOX: _inbox_pane,
    TodoItemViewPane.SOMEDAY: _someday_pane,
    TodoItemViewPane.STAKEHOLDER: _stakeholder_pane,
}


def is_member(item: TodoItem, query: str, pane: TodoItemViewPane, today: date) -> bool:
    """Return True if the item is shown in `pane` for the given filter and day.

    A non-empty query that matches neither person nor project hides the item
    from every pane. Raises ValueError for an unknown pane.
    """
    rule = PANE_RULES.get(pane)
    if rule is None:
        raise ValueError(f"Unknown pane: {pane!r}")
    if not matches(item, query):
        return False
    return rule(item, query, today)
