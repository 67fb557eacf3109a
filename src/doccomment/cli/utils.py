"""
CLI utility helpers: source reading and output formatting.
"""

from __future__ import annotations

import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from doccomment.core.errors import SourceError, SourceNotFoundError
from doccomment.core.models import Record

console = Console()
err_console = Console(stderr=True)

STDIN_PATH = "-"


# ── Source reading ───────────────────────────────────────────────────────


def read_source(path: str, encoding: str = "utf-8") -> str:
    """Read comment-bearing text from a file, or stdin for ``-``.

    Raises:
        SourceNotFoundError: If the file does not exist
        SourceError: If the file cannot be read or decoded
    """
    if path == STDIN_PATH:
        return sys.stdin.read()

    source = Path(path)
    if not source.is_file():
        raise SourceNotFoundError(f"No such file: {path}").with_context(source_path=path)

    try:
        return source.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise SourceError(f"Cannot read {path}: {e}", cause=e).with_context(
            source_path=path, encoding=encoding
        )


# ── Output helpers ───────────────────────────────────────────────────────


def print_record(record: Record, *, title: str = "") -> None:
    """Render a Record as its brief followed by a tag/text table."""
    if title:
        console.print(f"[bold]{escape(title)}[/bold]")

    if not record.entries:
        console.print("[dim]No documentation comments found.[/dim]")
        return

    if record.brief:
        console.print(record.brief, markup=False, highlight=False)
        console.print()

    table = Table(show_lines=True, pad_edge=False)
    table.add_column("Tag", style="cyan", no_wrap=True)
    table.add_column("Text", overflow="fold")
    for entry in record.entries:
        tag = Text(entry.tag) if entry.tag else Text("(brief)", style="dim")
        table.add_row(tag, Text(entry.text))
    console.print(table)


def print_error(message: str) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)
