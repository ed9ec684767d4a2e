"""HTTP handlers of the quote API."""

from http import HTTPStatus
from typing import Any

from werkzeug.wrappers import Request, Response

from citatnik.dto import QuoteRequest, QuoteResponse
from citatnik.entity import MissingQuotesError, Quote, QuoteNotFoundError
from citatnik.httperror import HTTPError, _encode_json
from citatnik.usecase import QuoteService


def write_json(data: Any) -> Response:
    """Return ``data`` as a JSON response."""
    try:
        body = _encode_json(data)
    except (TypeError, ValueError) as exc:
        raise HTTPError(HTTPStatus.INTERNAL_SERVER_ERROR, "Error with encoder result", exc) from exc
    return Response(body, content_type="application/json")


def _to_responses(quotes: list[Quote]) -> list[dict[str, Any]]:
    return [QuoteResponse.from_entity(quote).to_dict() for quote in quotes]


class QuoteHandlers:
    """Request handlers over a quote service; failures are raised as ``HTTPError``."""

    def __init__(self, quotes: QuoteService) -> None:
        self._quotes = quotes

    def add_quote(self, request: Request) -> Response:
        try:
            payload = QuoteRequest.from_json(request.get_data())
        except ValueError as exc:
            raise HTTPError(
                HTTPStatus.BAD_REQUEST, "Can't parse the request body. Check the fields.", exc
            ) from exc
        try:
            quote = self._quotes.add(payload.to_entity())
        except Exception as exc:
            raise HTTPError(HTTPStatus.INTERNAL_SERVER_ERROR, "Can't added the quoter", exc) from exc
        return write_json(QuoteResponse.from_entity(quote).to_dict())

    def get_quotes(self, request: Request) -> Response:
        if request.args.get("author", ""):
            return self.get_quotes_by_author(request)
        try:
            quotes = self._quotes.get_all()
        except Exception as exc:
            raise HTTPError(
                HTTPStatus.INTERNAL_SERVER_ERROR, "Error when receiving all quotes", exc
            ) from exc
        return write_json(_to_responses(quotes))

    def get_quotes_by_author(self, request: Request) -> Response:
        author = request.args.get("author", "")
        if not author:
            raise HTTPError(
                HTTPStatus.BAD_REQUEST, "Author in request is empty", ValueError("author is empty")
            )
        try:
            quotes = self._quotes.get_by_author(author)
        except Exception as exc:
            raise HTTPError(
                HTTPStatus.INTERNAL_SERVER_ERROR,
                "There is no way to get an entity by author",
                exc,
            ) from exc
        return write_json(_to_responses(quotes))

    def get_random_quote(self, request: Request) -> Response:
        try:
            quote = self._quotes.get_random()
        except MissingQuotesError as exc:
            raise HTTPError(HTTPStatus.NOT_FOUND, "There are no quotes", exc) from exc
        except Exception as exc:
            raise HTTPError(
                HTTPStatus.INTERNAL_SERVER_ERROR, "Error when searching for a random quote", exc
            ) from exc
        return write_json(QuoteResponse.from_entity(quote).to_dict())

    def delete_quote_by_id(self, request: Request, quote_id: str) -> Response:
        if not quote_id:
            raise HTTPError(HTTPStatus.BAD_REQUEST, "Empty id", ValueError("empty quote id"))
        try:
            self._quotes.delete_by_id(quote_id)
        except QuoteNotFoundError as exc:
            raise HTTPError(HTTPStatus.NOT_FOUND, "quote not found", exc) from exc
        except Exception as exc:
            raise HTTPError(
                HTTPStatus.INTERNAL_SERVER_ERROR, "Error when deleting a quote", exc
            ) from exc
        response = Response(status=HTTPStatus.NO_CONTENT)
        del response.headers["Content-Type"]
        return response