"""
Pydantic models for the Todo Panes view
"""

from enum import Enum
from datetime import date, datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TodoItemStatus(str, Enum):
    """Completion status of a todo item"""
    OPEN = "open"
    DONE = "done"

    def toggle(self) -> "TodoItemStatus":
        """Return the other status (open <-> done)"""
        return TodoItemStatus.DONE if self is TodoItemStatus.OPEN else TodoItemStatus.OPEN


def next_status(status: Union[TodoItemStatus, str]) -> TodoItemStatus:
    """Next status for a toggled checkbox. Committing it is up to the caller."""
    return TodoItemStatus(status).toggle()


class TodoItemViewPane(str, Enum):
    """Panes shown in the view toolbar"""
    TODAY = "today"
    SCHEDULED = "scheduled"
    INBOX = "inbox"
    SOMEDAY = "someday"
    STAKEHOLDER = "stakeholder"

    @property
    def label(self) -> str:
        return PANE_LABELS[self]

    @property
    def icon(self) -> str:
        return PANE_ICONS[self]


# Toolbar order
PANE_LABELS = {
    TodoItemViewPane.TODAY: "Today",
    TodoItemViewPane.SCHEDULED: "Scheduled",
    TodoItemViewPane.INBOX: "Inbox",
    TodoItemViewPane.SOMEDAY: "Someday / Maybe",
    TodoItemViewPane.STAKEHOLDER: "Stakeholder actions",
}

PANE_ICONS = {
    TodoItemViewPane.TODAY: "today",
    TodoItemViewPane.SCHEDULED: "scheduled",
    TodoItemViewPane.INBOX: "inbox",
    TodoItemViewPane.SOMEDAY: "someday",
    TodoItemViewPane.STAKEHOLDER: "stakeholder",
}


class TodoItem(BaseModel):
    """A todo item extracted from a note (read-only snapshot)"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    description: str
    status: TodoItemStatus = TodoItemStatus.OPEN
    action_date: Optional[date] = Field(default=None, alias="actionDate")
    is_someday_maybe_note: bool = Field(default=False, alias="isSomedayMaybeNote")
    person: str = ""
    project: str = ""
    source_file_path: str = Field(default="", alias="sourceFilePath")

    @field_validator('action_date', mode='before')
    @classmethod
    def truncate_datetime(cls, v):
        # Only the calendar day matters for classification
        if isinstance(v, datetime):
            return v.date()
        return v

    @field_validator('person', 'project', 'source_file_path', mode='before')
    @classmethod
    def none_as_empty(cls, v):
        return "" if v is None else v
