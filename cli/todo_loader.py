#!/usr/bin/env python3
"""
Todo Records Loader

Reads todo items that were already extracted from notes. The records file is
YAML (JSON is accepted too, being a YAML subset) holding either a list of
items or a mapping with a `todos` list:

    todos:
      - description: "Call **Alice** about the budget"
        actionDate: 2024-01-02
        person: alice-smith
        project: budget
        sourceFilePath: Meetings/2024-01-01.md
      - description: "Learn the cello"
        isSomedayMaybeNote: true
"""

import yaml
from pathlib import Path
from typing import Any, List

from pydantic import ValidationError
from rich.console import Console

from todo_panes import TodoItem

console = Console()


def parse_records(data: Any) -> List[TodoItem]:
    """Build TodoItems from loaded YAML data, skipping invalid entries"""
    if isinstance(data, dict):
        data = data.get('todos', [])
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of todo records, got {type(data).__name__}")

    items = []
    for i, raw in enumerate(data):
        if not isinstance(raw, dict):
            console.print(f"[yellow]Warning: Skipping record {i}: not a mapping[/yellow]")
            continue
        try:
            items.append(TodoItem.model_validate(raw))
        except ValidationError as e:
            console.print(f"[yellow]Warning: Skipping record {i}: {e.error_count()} validation error(s)[/yellow]")
    return items


def load_records(records_path: Path) -> List[TodoItem]:
    """Load todo items from a YAML/JSON records file.

    Raises:
        FileNotFoundError: if the file does not exist
        ValueError: if the file is not a list (or a mapping with `todos`)
    """
    records_path = Path(records_path)
    if not records_path.exists():
        raise FileNotFoundError(f"Records file not found: {records_path}")

    content = records_path.read_text(encoding='utf-8')
    return parse_records(yaml.safe_load(content))
