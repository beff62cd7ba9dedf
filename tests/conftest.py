"""
Pytest configuration and fixtures for Todo Panes tests
"""
import pytest
from datetime import date
from pathlib import Path
import sys

# Add the cli directory to the Python path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "cli"))

from todo_panes import TodoItem, TodoItemStatus

TODAY = date(2024, 1, 2)


@pytest.fixture
def today():
    """Fixed reference day"""
    return TODAY


@pytest.fixture
def sample_todos():
    """One item per classification bucket, relative to TODAY"""
    return {
        "overdue": TodoItem(description="Send invoice", action_date=date(2024, 1, 1),
                            person="alice-smith", project="billing",
                            source_file_path="Meetings/2023-12-28.md"),
        "today": TodoItem(description="Call Bob", action_date=date(2024, 1, 2),
                          person="bob", project="hiring"),
        "future": TodoItem(description="Quarterly review", action_date=date(2024, 2, 1),
                           person="carol", project="planning"),
        "inbox": TodoItem(description="Sort out expenses", project="billing"),
        "someday": TodoItem(description="Learn the cello", is_someday_maybe_note=True),
        "done": TodoItem(description="Book flights", status=TodoItemStatus.DONE,
                         action_date=date(2023, 12, 30), person="alice-smith"),
    }


@pytest.fixture
def records_file(tmp_path):
    """Records file in the camelCase layout written by the extractor"""
    path = tmp_path / "todos.yaml"
    path.write_text("""todos:
  - description: Send invoice
    actionDate: 2024-01-01
    person: alice-smith
    project: billing
    sourceFilePath: Meetings/2023-12-28.md
  - description: Quarterly review
    actionDate: 2024-02-01
    person: carol
    project: planning
  - description: Sort out expenses
    project: billing
  - description: Learn the cello
    isSomedayMaybeNote: true
  - description: Book flights
    status: done
    actionDate: 2023-12-30
    person: alice-smith
""", encoding='utf-8')
    return path
