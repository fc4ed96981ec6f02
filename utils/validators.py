from typing import Any, List, Optional


class BookValidator:
    """Field rules applied before a book reaches the store."""

    @staticmethod
    def _is_non_empty(text: Optional[str]) -> bool:
        if text is None:
            return False
        return bool(text.strip())

    @staticmethod
    def validate_title(title: Optional[str]) -> bool:
        return BookValidator._is_non_empty(title)

    @staticmethod
    def validate_author(author: Optional[str]) -> bool:
        return BookValidator._is_non_empty(author)

    @staticmethod
    def validate_year(year: Any) -> bool:
        # bool is an int subclass; True must not pass as year 1
        if isinstance(year, bool) or not isinstance(year, int):
            return False
        return year > 0

    @staticmethod
    def errors(title: Optional[str], author: Optional[str], year: Any) -> List[str]:
        """Return one message per rule broken, empty when the data is valid."""
        problems = []
        if not BookValidator.validate_title(title):
            problems.append("title must not be empty")
        if not BookValidator.validate_author(author):
            problems.append("author must not be empty")
        if not BookValidator.validate_year(year):
            problems.append("year must be a positive integer")
        return problems
