"""Application service for quotes."""

from citatnik.entity import Quote
from citatnik.repository import QuoteRepo


class QuoteService:
    """Quote operations backed by a repository."""

    def __init__(self, repo: QuoteRepo) -> None:
        self._repo = repo

    def add(self, quote: Quote) -> Quote:
        return self._repo.create(quote)

    def get_all(self) -> list[Quote]:
        return self._repo.get_all()

    def get_by_author(self, author: str) -> list[Quote]:
        return self._repo.get_by_author(author)

    def get_random(self) -> Quote:
        return self._repo.get_random()

    def delete_by_id(self, quote_id: str) -> None:
        self._repo.delete_by_id(quote_id)