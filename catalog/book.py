from __future__ import annotations


class Book:
    """Represents a single entry in the catalog."""

    def __init__(self, title: str, author: str, genre: str = "", year: int = 0, id: int = 0) -> None:
        self.id = id
        self.title = (title or "").strip()
        self.author = (author or "").strip()
        self.genre = (genre or "").strip()
        self.year = year

    def __str__(self) -> str:
        return f"{self.id} - {self.title} ({self.year}) - Author: {self.author} - Genre: {self.genre}"

    def __repr__(self) -> str:
        return f"Book(id={self.id!r}, title={self.title!r}, author={self.author!r}, genre={self.genre!r}, year={self.year!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def copy(self) -> "Book":
        return Book(title=self.title, author=self.author, genre=self.genre, year=self.year, id=self.id)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "genre": self.genre,
            "year": self.year,
        }

    @staticmethod
    def from_dict(data: dict) -> "Book":
        return Book(
            title=data["title"],
            author=data["author"],
            genre=data.get("genre", ""),
            year=int(data.get("year", 0)),
            id=int(data.get("id", 0)),
        )
