"""
Todo Panes for Obsidian Notes

Sorts todo items extracted from notes into the Today, Scheduled, Inbox,
Someday / Maybe and Stakeholder panes, applies the text filter, and orders
the result for display.
"""

from .models import TodoItem, TodoItemStatus, TodoItemViewPane, next_status
from .text_filter import matches
from .classifier import is_member, is_today_or_overdue, is_future_scheduled
from .sequencer import compare_todos, sort_todos
from .pipeline import project, pane_counts
from .view import TodoItemView, TodoItemViewProps, VIEW_TYPE_TODO

__all__ = [
    'TodoItem',
    'TodoItemStatus',
    'TodoItemViewPane',
    'next_status',
    'matches',
    'is_member',
    'is_today_or_overdue',
    'is_future_scheduled',
    'compare_todos',
    'sort_todos',
    'project',
    'pane_counts',
    'TodoItemView',
    'TodoItemViewProps',
    'VIEW_TYPE_TODO',
]
