"""
Filter -> classify -> sort pipeline consumed by the view
"""

from datetime import date
from typing import Dict, Iterable, List

from .classifier import is_member
from .models import TodoItem, TodoItemViewPane
from .sequencer import sort_todos


def project(items: Iterable[TodoItem], query: str, pane: TodoItemViewPane, today: date) -> List[TodoItem]:
    """Items shown in `pane`, in display order. The input is left untouched."""
    return sort_todos(item for item in items if is_member(item, query, pane, today))


def pane_counts(items: Iterable[TodoItem], query: str, today: date) -> Dict[TodoItemViewPane, int]:
    """Number of items each pane would show"""
    items = list(items)
    return {
        pane: sum(1 for item in items if is_member(item, query, pane, today))
        for pane in TodoItemViewPane
    }
