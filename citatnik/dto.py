"""JSON shapes exchanged with HTTP clients."""

import json
from dataclasses import dataclass
from typing import Any

from citatnik.entity import Quote

_FIELDS = ("author", "quote")


@dataclass(frozen=True)
class QuoteRequest:
    """Body of a request that adds a quote."""

    author: str = ""
    quote: str = ""

    @classmethod
    def from_json(cls, data: bytes | bytearray | str) -> "QuoteRequest":
        """Decode the first JSON value of ``data``; raise ``ValueError`` if unusable.

        Keys match case-insensitively; unknown keys and nulls are ignored.
        """
        if isinstance(data, (bytes, bytearray)):
            data = bytes(data).decode("utf-8", errors="replace")
        text = data.lstrip(" \t\n\r")
        if not text:
            raise ValueError("empty request body")
        payload, _ = json.JSONDecoder().raw_decode(text)
        if payload is None:
            return cls()
        if not isinstance(payload, dict):
            raise ValueError("request body must be a JSON object")
        values: dict[str, str] = {}
        for key, value in payload.items():
            name = key if key in _FIELDS else key.casefold()
            if name not in _FIELDS or value is None:
                continue
            if not isinstance(value, str):
                raise ValueError(f"field {key!r} must be a string")
            values[name] = value
        return cls(**values)

    def to_entity(self) -> Quote:
        return Quote(author=self.author, text=self.quote)


@dataclass(frozen=True)
class QuoteResponse:
    """A quote as returned to clients."""

    author: str
    quote: str

    @classmethod
    def from_entity(cls, quote: Quote) -> "QuoteResponse":
        return cls(author=quote.author, quote=quote.text)

    def to_dict(self) -> dict[str, Any]:
        return {"author": self.author, "quote": self.quote}