import os
import json
from typing import List, Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

from catalog.book import Book

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "CATALOG_CLI_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

_console = Console()


def set_output_mode(mode: Optional[str]) -> None:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode


def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, "plain").lower()
    return mode if mode in OUTPUT_MODES else "plain"


def build_book_table(books: List[Book], title: str = "📚 Catalog") -> Table:
    table = Table(title=title, show_lines=True, header_style="bold cyan")
    table.add_column("ID", style="magenta", no_wrap=True, justify="right")
    table.add_column("Title", style="white")
    table.add_column("Author", style="white")
    table.add_column("Genre", style="white")
    table.add_column("Year", style="white", justify="right")
    for b in books:
        table.add_row(str(b.id), escape(b.title), escape(b.author), escape(b.genre), str(b.year))
    return table


def print_book_list(books: List[Book], empty_message: str = "No books found.") -> None:
    """Print books in the current output mode.
    - plain: one '{id} - {title} ({year}) - Author: ... - Genre: ...' line per book
    - json: JSON array of book objects
    - rich: Rich table
    An empty list prints ``empty_message`` in every mode.
    """
    mode = get_output_mode()

    if not books:
        print(empty_message)
        return

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif mode == "rich":
        _console.print(build_book_table(books))
    else:
        for b in books:
            print(str(b))


def print_book(book: Book, heading: str = "Book") -> None:
    """Print a single book in the current output mode."""
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps(book.to_dict(), ensure_ascii=False))
    elif mode == "rich":
        content = (
            f"[bold]ID:[/] {book.id}\n"
            f"[bold]Title:[/] {escape(book.title)}\n"
            f"[bold]Author:[/] {escape(book.author)}\n"
            f"[bold]Genre:[/] {escape(book.genre)}\n"
            f"[bold]Year:[/] {book.year}"
        )
        _console.print(Panel.fit(content, title=heading, border_style="green"))
    else:
        print(f"{heading}: {book}")
