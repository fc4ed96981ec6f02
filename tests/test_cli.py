import json

import pytest
from typer.testing import CliRunner

from catalog import BookStore, CatalogService
from main import app, build_service

runner = CliRunner()


def invoke(service, *args, input=None):
    return runner.invoke(app, list(args), obj=service, input=input)


def test_list_books(service):
    result = invoke(service, "list")
    assert result.exit_code == 0
    assert "1 - 1984 (1949) - Author: George Orwell - Genre: Distopia" in result.stdout
    assert "Dom Quixote" in result.stdout


def test_list_no_books(empty_store):
    result = invoke(CatalogService(empty_store), "list")
    assert result.exit_code == 0
    assert "No books found." in result.stdout


def test_list_json_output(service):
    result = invoke(service, "--output", "json", "list")
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert [item["id"] for item in payload] == [1, 2, 3]


def test_find_book(service):
    result = invoke(service, "find", "2")
    assert result.exit_code == 0
    assert "Book found: 2 - O Hobbit" in result.stdout


def test_find_book_not_found(service):
    result = invoke(service, "find", "99")
    assert result.exit_code == 1
    assert "Book with ID 99 not found." in result.stdout


def test_add_book(service):
    result = invoke(service, "add", "Brave New World", "Aldous Huxley", "1932", "--genre", "Distopia")
    assert result.exit_code == 0
    assert "Book added: 4 - Brave New World (1932)" in result.stdout
    assert len(service.list_books()) == 4


def test_add_book_invalid(service):
    result = invoke(service, "add", "", "X", "2000")
    assert result.exit_code == 1
    assert "Invalid data: title must not be empty" in result.stdout
    assert len(service.list_books()) == 3


def test_update_book(service):
    result = invoke(service, "update", "1", "Nineteen Eighty-Four", "George Orwell", "1949", "-g", "Distopia")
    assert result.exit_code == 0
    assert "Book updated: 1 - Nineteen Eighty-Four" in result.stdout
    assert service.get_book(1).title == "Nineteen Eighty-Four"


def test_update_book_not_found(service):
    before = service.list_books()
    result = invoke(service, "update", "99", "Ghost", "Nobody", "2000")
    assert result.exit_code == 1
    assert "Book with ID 99 not found." in result.stdout
    assert service.list_books() == before


def test_update_book_invalid_year(service):
    result = invoke(service, "update", "1", "1984", "George Orwell", "0")
    assert result.exit_code == 1
    assert "Invalid data: year must be a positive integer" in result.stdout


def test_delete_book(service):
    result = invoke(service, "delete", "3")
    assert result.exit_code == 0
    assert "Book with ID 3 deleted." in result.stdout
    assert service.get_book(3) is None


def test_delete_book_not_found(service):
    result = invoke(service, "delete", "99")
    assert result.exit_code == 1
    assert "Book with ID 99 not found." in result.stdout


def test_search_author(service):
    result = invoke(service, "search-author", "orwell")
    assert result.exit_code == 0
    assert "1984" in result.stdout
    assert "O Hobbit" not in result.stdout


def test_search_author_no_match(service):
    result = invoke(service, "search-author", "huxley")
    assert "No books found for author." in result.stdout


def test_search_genre(service):
    result = invoke(service, "search-genre", "FANTASIA")
    assert result.exit_code == 0
    assert "O Hobbit" in result.stdout


def test_search_genre_no_match(service):
    result = invoke(service, "search-genre", "poetry")
    assert "No books found for genre." in result.stdout


# --- Interactive menu ---
def test_menu_list_and_exit(service):
    result = invoke(service, "menu", input="1\n\n0\n")
    assert result.exit_code == 0
    assert "1984" in result.stdout
    assert "Goodbye!" in result.stdout


def test_menu_add_book(service):
    result = invoke(service, "menu", input="2\nBrave New World\nAldous Huxley\nDistopia\n1932\n\n0\n")
    assert result.exit_code == 0
    assert service.get_book(4).title == "Brave New World"


def test_menu_add_book_invalid(service):
    result = invoke(service, "menu", input="2\n\nX\nY\n2000\n\n0\n")
    assert result.exit_code == 0
    assert "Invalid data" in result.stdout
    assert len(service.list_books()) == 3


def test_menu_update_keeps_defaults(service):
    result = invoke(service, "menu", input="3\n1\nNineteen Eighty-Four\n\n\n\n\n0\n")
    assert result.exit_code == 0
    book = service.get_book(1)
    assert book.title == "Nineteen Eighty-Four"
    assert (book.author, book.genre, book.year) == ("George Orwell", "Distopia", 1949)


def test_menu_update_missing_book(service):
    result = invoke(service, "menu", input="3\n99\n\n0\n")
    assert result.exit_code == 0
    assert "not found" in result.stdout


@pytest.mark.parametrize("answer, remaining", [("y", 2), ("n", 3)])
def test_menu_delete_asks_for_confirmation(service, answer, remaining):
    result = invoke(service, "menu", input=f"4\n2\n{answer}\n\n0\n")
    assert result.exit_code == 0
    assert len(service.list_books()) == remaining


def test_menu_search_by_genre(service):
    result = invoke(service, "menu", input="6\nfantasia\n\n0\n")
    assert result.exit_code == 0
    assert "Hobbit" in result.stdout


def test_no_command_starts_menu(service):
    result = invoke(service, input="0\n")
    assert result.exit_code == 0
    assert "Goodbye!" in result.stdout


# --- Composition root ---
def test_build_service_seeds_catalog():
    service = build_service(seed=True)
    assert isinstance(service.store, BookStore)
    assert [b.id for b in service.list_books()] == [1, 2, 3]


def test_build_service_without_seed():
    assert build_service(seed=False).list_books() == []


def test_build_service_follows_settings(monkeypatch):
    monkeypatch.setattr("main.settings.seed_catalog", False)
    assert build_service().list_books() == []
