"""
Headless Todo View

Holds the state a host view keeps for the todo sidebar: the active pane, the
filter text, and the props handed in by the plugin (items plus the open-file
and toggle sinks). Every state change triggers the render callback.
"""

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Callable, List, Optional, Tuple

from .models import TodoItem, TodoItemStatus, TodoItemViewPane, next_status
from .pipeline import project

VIEW_TYPE_TODO = "todo"


@dataclass(frozen=True)
class TodoItemViewProps:
    """Data and callbacks supplied by the host"""
    todos: List[TodoItem] = field(default_factory=list)
    open_file: Callable[[str], None] = lambda file_path: None
    toggle_todo: Callable[[TodoItem, TodoItemStatus], None] = lambda todo, new_status: None


class TodoItemView:
    """
    Todo sidebar state without a UI surface.

    Usage:
        view = TodoItemView(props, render=lambda v: print(v.visible_items()))
        view.set_filter("alice")
        view.set_active_pane(TodoItemViewPane.STAKEHOLDER)
    """

    def __init__(
        self,
        props: TodoItemViewProps,
        render: Optional[Callable[["TodoItemView"], None]] = None,
        today_provider: Callable[[], date] = date.today,
        active_pane: TodoItemViewPane = TodoItemViewPane.TODAY,
    ):
        self.props = props
        self.active_pane = TodoItemViewPane(active_pane)
        self.filter = ""
        self._render = render
        self._today_provider = today_provider

    def get_view_type(self) -> str:
        return VIEW_TYPE_TODO

    def get_display_text(self) -> str:
        return "Todo"

    def get_icon(self) -> str:
        return "checkmark"

    def set_props(self, setter: Callable[[TodoItemViewProps], TodoItemViewProps]) -> None:
        """Replace props via a setter that receives the current props"""
        self.props = setter(self.props)
        self.render()

    def set_todos(self, todos: List[TodoItem]) -> None:
        self.set_props(lambda current: replace(current, todos=list(todos)))

    def set_active_pane(self, pane: TodoItemViewPane) -> None:
        self.active_pane = TodoItemViewPane(pane)
        self.render()

    def set_filter(self, text: str) -> None:
        self.filter = text
        self.render()

    def visible_items(self) -> List[TodoItem]:
        """Items of the active pane under the current filter, in display order"""
        return project(self.props.todos, self.filter, self.active_pane, self._today_provider())

    def toolbar(self) -> List[Tuple[TodoItemViewPane, str, str, bool]]:
        """(pane, label, icon, is_active) for each toolbar entry"""
        return [(pane, pane.label, pane.icon, pane is self.active_pane) for pane in TodoItemViewPane]

    def toggle_todo(self, todo: TodoItem) -> None:
        self.props.toggle_todo(todo, next_status(todo.status))

    def open_file(self, todo: TodoItem) -> None:
        self.props.open_file(todo.source_file_path)

    def render(self) -> None:
        if self._render is not None:
            self._render(self)
