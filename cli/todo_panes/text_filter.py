"""
Text filter over the person and project tags of a todo item
"""

from .models import TodoItem


def matches(item: TodoItem, query: str) -> bool:
    """Case-sensitive substring match against person or project.

    An empty query disables the filter and matches everything.
    """
    if not query:
        return True
    return query in item.person or query in item.project
