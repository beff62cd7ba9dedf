#!/usr/bin/env python3
"""
Todo View CLI

Shows todo items extracted from Obsidian notes, pane by pane.

Usage:
    # Show today's (and overdue) items
    uv run todo_view.py show todos.yaml

    # Show a pane with a person/project filter
    uv run todo_view.py show todos.yaml --pane stakeholder --filter alice

    # Count items per pane as of a given day
    uv run todo_view.py panes todos.yaml --today 2024-01-02

    # Show the status item 3 would toggle to
    uv run todo_view.py toggle todos.yaml 3

    # Check configuration
    uv run todo_view.py config
"""

import sys
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

# Add cli directory to path
cli_path = Path(__file__).parent
if str(cli_path) not in sys.path:
    sys.path.insert(0, str(cli_path))

from todo_panes import TodoItem, TodoItemStatus, TodoItemView, TodoItemViewPane, TodoItemViewProps, pane_counts
from todo_loader import load_records
from config_loader import get_config_loader

console = Console()

PANE_CHOICES = [pane.value for pane in TodoItemViewPane]


def resolve_records(records_file: Optional[Path]) -> List[TodoItem]:
    """Load records from the given file or from records.path in config"""
    if records_file is None:
        records_file = get_config_loader().get_records_path()
        if records_file is None:
            console.print("[red]Error: No records file given[/red]")
            console.print("[yellow]Pass RECORDS_FILE or set records.path in config.yaml (RECORDS_PATH env var)[/yellow]")
            sys.exit(1)
    try:
        return load_records(records_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)


def resolve_today(today: Optional[datetime]) -> date:
    return today.date() if today is not None else date.today()


def resolve_pane(pane: Optional[str]) -> TodoItemViewPane:
    value = pane or get_config_loader().get_default_pane()
    try:
        return TodoItemViewPane(value)
    except ValueError:
        console.print(f"[red]Error: Unknown pane '{value}' (expected one of: {', '.join(PANE_CHOICES)})[/red]")
        sys.exit(1)


def render_items(view: TodoItemView) -> None:
    """Print the active pane of the view as a table"""
    items = view.visible_items()
    title = view.active_pane.label
    if view.filter:
        title += f" [dim](filter: {escape(view.filter)})[/dim]"

    if not items:
        console.print(f"[yellow]No items in {view.active_pane.label}[/yellow]")
        return

    table = Table(title=title)
    table.add_column("Done", justify="center")
    table.add_column("Description")
    table.add_column("Date", style="green")
    table.add_column("Person", style="cyan")
    table.add_column("Project", style="blue")
    table.add_column("File", style="dim")

    for item in items:
        done = "[green]✓[/green]" if item.status == TodoItemStatus.DONE else " "
        table.add_row(
            done,
            escape(item.description),
            item.action_date.isoformat() if item.action_date else "-",
            escape(item.person or "-"),
            escape(item.project or "-"),
            escape(item.source_file_path or "-"),
        )

    console.print(table)


# ==================== CLI Groups ====================

@click.group()
def cli():
    """Todo View - Today, Scheduled, Inbox, Someday and Stakeholder panes for note todos"""
    pass


@cli.command('show')
@click.argument('records_file', required=False, type=click.Path(path_type=Path))
@click.option('--pane', '-p', type=click.Choice(PANE_CHOICES), help='Pane to show (default from config)')
@click.option('--filter', '-f', 'query', default=None, help='Person/project substring filter')
@click.option('--today', type=click.DateTime(formats=["%Y-%m-%d"]), help='Reference day (default: today)')
def show(records_file: Optional[Path], pane: Optional[str], query: Optional[str], today: Optional[datetime]):
    """Show the items of one pane in display order"""
    todos = resolve_records(records_file)
    reference_day = resolve_today(today)

    view = TodoItemView(
        TodoItemViewProps(todos=todos),
        today_provider=lambda: reference_day,
        active_pane=resolve_pane(pane),
    )
    view.filter = query if query is not None else get_config_loader().get_default_filter()
    render_items(view)


@cli.command('panes')
@click.argument('records_file', required=False, type=click.Path(path_type=Path))
@click.option('--filter', '-f', 'query', default=None, help='Person/project substring filter')
@click.option('--today', type=click.DateTime(formats=["%Y-%m-%d"]), help='Reference day (default: today)')
def panes(records_file: Optional[Path], query: Optional[str], today: Optional[datetime]):
    """Count the items in every pane"""
    todos = resolve_records(records_file)
    if query is None:
        query = get_config_loader().get_default_filter()
    counts = pane_counts(todos, query, resolve_today(today))

    table = Table(title="Panes")
    table.add_column("Pane", style="cyan")
    table.add_column("Items", justify="right")
    for pane, count in counts.items():
        table.add_row(pane.label, str(count))

    console.print(table)


@cli.command('toggle')
@click.argument('records_file', type=click.Path(path_type=Path))
@click.argument('index', type=int)
def toggle(records_file: Path, index: int):
    """Show the status a record would toggle to (nothing is written)"""
    todos = resolve_records(records_file)
    if index < 0 or index >= len(todos):
        console.print(f"[red]Error: No record at index {index} ({len(todos)} records loaded)[/red]")
        sys.exit(1)

    def report(todo: TodoItem, new_status: TodoItemStatus):
        console.print(f"[green]✓ {escape(todo.description)}: {todo.status.value} -> {new_status.value}[/green]")

    view = TodoItemView(TodoItemViewProps(todos=todos, toggle_todo=report))
    view.toggle_todo(todos[index])


@cli.command('config')
def show_config():
    """Show configuration summary and problems"""
    loader = get_config_loader()
    loader.print_config_summary()

    errors = loader.validate_config()
    if errors:
        console.print("\n[red]Configuration Errors:[/red]")
        for error in errors:
            console.print(f"  - {error}")
    else:
        console.print("\n[green]✓ Configuration is valid[/green]")


if __name__ == "__main__":
    cli()
