"""Domain objects of the quote service."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Quote:
    """A quote; ``id`` is assigned by the repository."""

    author: str
    text: str
    id: str = ""


class QuoteError(Exception):
    """Base class for quote domain errors."""

    default_message = "quote error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class MissingQuotesError(QuoteError):
    default_message = "quotes are missing"


class QuoteNotFoundError(QuoteError):
    default_message = "quote not found"