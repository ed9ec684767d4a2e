"""Quote storage: the repository contract and an in-memory implementation."""

import dataclasses
import random
import threading
from abc import ABC, abstractmethod

from citatnik.counter import increment
from citatnik.entity import MissingQuotesError, Quote, QuoteNotFoundError


class QuoteRepo(ABC):
    """Storage for quotes."""

    @abstractmethod
    def create(self, quote: Quote) -> Quote:
        """Store ``quote`` and return it with its new id."""

    @abstractmethod
    def get_all(self) -> list[Quote]:
        """Return every stored quote."""

    @abstractmethod
    def get_random(self) -> Quote:
        """Return one stored quote chosen at random."""

    @abstractmethod
    def get_by_author(self, author: str) -> list[Quote]:
        """Return the quotes whose author is exactly ``author``."""

    @abstractmethod
    def delete_by_id(self, quote_id: str) -> None:
        """Remove the quote with ``quote_id``."""


class MemoryQuoteRepo(QuoteRepo):
    """Thread-safe in-memory quote repository with sequential string ids."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._quotes: dict[str, Quote] = {}
        self._current_id = "0"

    def create(self, quote: Quote) -> Quote:
        with self._lock:
            new_id = increment(self._current_id)
            self._current_id = new_id
            stored = dataclasses.replace(quote, id=new_id)
            self._quotes[new_id] = stored
            return stored

    def get_all(self) -> list[Quote]:
        with self._lock:
            return list(self._quotes.values())

    def get_random(self) -> Quote:
        with self._lock:
            if not self._quotes:
                raise MissingQuotesError()
            return random.choice(list(self._quotes.values()))

    def get_by_author(self, author: str) -> list[Quote]:
        with self._lock:
            return [quote for quote in self._quotes.values() if quote.author == author]

    def delete_by_id(self, quote_id: str) -> None:
        with self._lock:
            try:
                del self._quotes[quote_id]
            except KeyError:
                raise QuoteNotFoundError() from None