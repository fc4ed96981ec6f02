import logging
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.table import Table

from catalog import BookStore, CatalogService, ValidationError
from config import settings
from utils.ui_helpers import build_book_table, print_book, print_book_list, set_output_mode

console = Console()
logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.effective_log_level, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def build_service(seed: Optional[bool] = None) -> CatalogService:
    """Create the store and the service that wraps it.

    The catalog starts with the sample books unless ``seed`` (or
    ``settings.seed_catalog`` when ``seed`` is None) is false.
    """
    if seed is None:
        seed = settings.seed_catalog
    store = BookStore() if seed else BookStore(books=[])
    return CatalogService(store)


# --- Typer CLI Application ---
app = typer.Typer(help=settings.app_name, no_args_is_help=False)


@app.callback(invoke_without_command=True)
def _global_options(
    ctx: typer.Context,
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    ),
):
    """Global options for the CLI (output mode). Without a command, starts the menu."""
    set_output_mode(output or settings.default_output)
    if ctx.obj is None:
        ctx.obj = build_service()
    if ctx.invoked_subcommand is None:
        run_menu(ctx.obj)


@app.command("list")
def cli_list(ctx: typer.Context):
    """List every book in the catalog."""
    print_book_list(ctx.obj.list_books(), empty_message="No books found.")


@app.command("find")
def cli_find(ctx: typer.Context, book_id: int = typer.Argument(..., help="Book ID")):
    """Show one book by ID."""
    book = ctx.obj.get_book(book_id)
    if book is None:
        print(f"Book with ID {book_id} not found.")
        raise typer.Exit(code=1)
    print_book(book, heading="Book found")


@app.command("add")
def cli_add(
    ctx: typer.Context,
    title: str,
    author: str,
    year: int,
    genre: str = typer.Option("", "--genre", "-g", help="Genre"),
):
    """Add a book to the catalog."""
    try:
        book = ctx.obj.add_book(title, author, genre, year)
    except ValidationError as e:
        print(f"Invalid data: {e}")
        raise typer.Exit(code=1)
    print_book(book, heading="Book added")


@app.command("update")
def cli_update(
    ctx: typer.Context,
    book_id: int,
    title: str,
    author: str,
    year: int,
    genre: str = typer.Option("", "--genre", "-g", help="Genre"),
):
    """Replace the title, author, genre and year of a book."""
    try:
        book = ctx.obj.update_book(book_id, title, author, genre, year)
    except ValidationError as e:
        print(f"Invalid data: {e}")
        raise typer.Exit(code=1)
    if book is None:
        print(f"Book with ID {book_id} not found.")
        raise typer.Exit(code=1)
    print_book(book, heading="Book updated")


@app.command("delete")
def cli_delete(ctx: typer.Context, book_id: int):
    """Delete a book by ID."""
    if ctx.obj.delete_book(book_id):
        print(f"Book with ID {book_id} deleted.")
    else:
        print(f"Book with ID {book_id} not found.")
        raise typer.Exit(code=1)


@app.command("search-author")
def cli_search_author(ctx: typer.Context, author: str = typer.Argument(..., help="Part of the author name")):
    """Find books whose author contains the given text (case-insensitive)."""
    print_book_list(ctx.obj.search_by_author(author), empty_message="No books found for author.")


@app.command("search-genre")
def cli_search_genre(ctx: typer.Context, genre: str = typer.Argument(..., help="Part of the genre")):
    """Find books whose genre contains the given text (case-insensitive)."""
    print_book_list(ctx.obj.search_by_genre(genre), empty_message="No books found for genre.")


@app.command("menu")
def cli_menu(ctx: typer.Context):
    """Start the interactive menu."""
    run_menu(ctx.obj)


# --- Interactive menu ---
def show_books(books, empty_message: str, title: str = "📚 Catalog") -> None:
    if not books:
        console.print(f"[yellow]{empty_message}[/]")
        return
    console.print(build_book_table(books, title=title))
    console.print(f"[dim]📊 {len(books)} book(s)[/]")


def list_all_books(service: CatalogService) -> None:
    show_books(service.list_books(), "No books found.")


def add(service: CatalogService) -> None:
    """Ask for the book fields and add it."""
    title = Prompt.ask("Title", default="", show_default=False)
    author = Prompt.ask("Author", default="", show_default=False)
    genre = Prompt.ask("Genre", default="", show_default=False)
    year = IntPrompt.ask("Publication year")
    try:
        book = service.add_book(title, author, genre, year)
    except ValidationError as e:
        console.print(f"[bold red]Invalid data:[/] {escape(str(e))}")
        return
    console.print(Panel.fit(f"[green]Book added:[/] [bold]{escape(str(book))}[/]", title="✅ Success", border_style="green"))


def update(service: CatalogService) -> None:
    """Ask for an ID and the new field values, current values as defaults."""
    book_id = IntPrompt.ask("ID of the book to update")
    current = service.get_book(book_id)
    if current is None:
        console.print(f"[yellow]⚠️ Book with ID [bold]{book_id}[/] not found.[/]")
        return

    title = Prompt.ask("New title", default=current.title)
    author = Prompt.ask("New author", default=current.author)
    genre = Prompt.ask("New genre", default=current.genre)
    year = IntPrompt.ask("New publication year", default=current.year)
    try:
        book = service.update_book(book_id, title, author, genre, year)
    except ValidationError as e:
        console.print(f"[bold red]Invalid data:[/] {escape(str(e))}")
        return
    if book is None:
        console.print(f"[yellow]⚠️ Book with ID [bold]{book_id}[/] not found.[/]")
        return
    console.print(Panel.fit(f"[green]Book updated:[/] [bold]{escape(str(book))}[/]", title="✅ Success", border_style="green"))


def delete(service: CatalogService) -> None:
    """Delete a book after confirmation."""
    book_id = IntPrompt.ask("ID of the book to delete")
    book = service.get_book(book_id)
    if book is None:
        console.print(f"[yellow]⚠️ Book with ID [bold]{book_id}[/] not found.[/]")
        return

    console.print(Panel(
        f"[bold]Title:[/] {escape(book.title)}\n"
        f"[bold]Author:[/] {escape(book.author)}\n"
        f"[bold]ID:[/] {book.id}",
        title="📚 Book to delete",
        border_style="yellow"
    ))
    if not Confirm.ask("🗑️ Delete this book?", default=False):
        console.print("[blue]🚫 Deletion cancelled.[/]")
        return
    if service.delete_book(book_id):
        console.print(f"[green]✅ [bold]{escape(book.title)}[/] deleted.[/]")
    else:
        console.print(f"[yellow]⚠️ Book with ID [bold]{book_id}[/] not found.[/]")


def search_author(service: CatalogService) -> None:
    query = Prompt.ask("Author", default="", show_default=False)
    show_books(service.search_by_author(query), "No books found for author.", title=f"🔎 Author: '{escape(query)}'")


def search_genre(service: CatalogService) -> None:
    query = Prompt.ask("Genre", default="", show_default=False)
    show_books(service.search_by_genre(query), "No books found for genre.", title=f"🔎 Genre: '{escape(query)}'")


MENU_ACTIONS = {
    "1": ("List books", "📚", list_all_books),
    "2": ("Add book", "➕", add),
    "3": ("Update book", "✏️", update),
    "4": ("Delete book", "🗑️", delete),
    "5": ("Search books by author", "🔎", search_author),
    "6": ("Search books by genre", "🏷️", search_genre),
}


def render_menu() -> None:
    table = Table.grid(padding=(0, 2))
    table.add_column(justify="right", style="bold cyan", width=4)
    table.add_column(justify="left", style="white")
    for key, (label, icon, _) in MENU_ACTIONS.items():
        table.add_row(f"[reverse]{key}[/]", f"{icon} {label}")
    table.add_row("[reverse]0[/]", "🚪 Exit")

    console.print(Panel(
        table,
        title=settings.app_name,
        border_style="cyan",
        box=box.HEAVY,
        padding=(1, 2),
    ))


def run_menu(service: CatalogService) -> None:
    """Interactive menu loop; returns when the user picks 0."""
    choices = list(MENU_ACTIONS) + ["0"]
    while True:
        console.clear()
        render_menu()
        choice = Prompt.ask("Choose an option", choices=choices, default="1").strip()

        if choice == "0":
            console.print("[green]Goodbye![/]")
            break

        _, _, action = MENU_ACTIONS[choice]
        action(service)
        Prompt.ask("[dim]Press Enter to continue[/]", default="", show_default=False)


def main() -> None:
    configure_logging()
    logger.debug(f"Starting {settings.app_name} {settings.app_version}")
    app()


if __name__ == "__main__":
    main()
