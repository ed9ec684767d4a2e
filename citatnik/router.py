"""WSGI application routing requests to the quote handlers."""

import logging
import sys
from collections.abc import Callable, Iterable
from typing import Any

from werkzeug.exceptions import MethodNotAllowed, NotFound
from werkzeug.routing import Map, Rule
from werkzeug.wrappers import Request, Response

from citatnik.handlers import QuoteHandlers
from citatnik.httperror import wrap_handler
from citatnik.usecase import QuoteService

_log = logging.getLogger(__name__)

WSGIApp = Callable[[dict[str, Any], Callable[..., Any]], Iterable[bytes]]


def recovery(app: WSGIApp) -> WSGIApp:
    """Turn an unhandled exception in ``app`` into a plain 500 response."""

    def wrapped(environ: dict[str, Any], start_response: Callable[..., Any]) -> Iterable[bytes]:
        try:
            return app(environ, start_response)
        except Exception:
            _log.exception("panic")
            start_response("500 Internal Server Error",
                           [("Content-Type", "text/plain; charset=utf-8"),
                            ("X-Content-Type-Options", "nosniff")],
                           sys.exc_info())
            return [b"internal server error\n"]

    return wrapped


class QuoteApp:
    """The quote API as a WSGI application."""

    def __init__(self, quotes: QuoteService) -> None:
        handlers = QuoteHandlers(quotes)
        self._url_map = Map([
            Rule("/quotes", endpoint=handlers.add_quote, methods=["POST"]),
            Rule("/quotes", endpoint=handlers.get_quotes, methods=["GET"]),
            Rule("/quotes/random", endpoint=handlers.get_random_quote, methods=["GET"]),
            Rule("/quotes/<quote_id>", endpoint=handlers.delete_quote_by_id, methods=["DELETE"]),
        ])
        self._wsgi = recovery(self._dispatch)

    def _dispatch(self, environ: dict[str, Any],
                  start_response: Callable[..., Any]) -> Iterable[bytes]:
        try:
            endpoint, values = self._url_map.bind_to_environ(environ).match()
        except NotFound:
            response = Response("404 page not found\n", status=404,
                                content_type="text/plain; charset=utf-8")
        except MethodNotAllowed:
            response = Response(status=405)
            del response.headers["Content-Type"]
        else:
            response = wrap_handler(endpoint)(Request(environ), **values)
        return response(environ, start_response)

    def __call__(self, environ: dict[str, Any],
                 start_response: Callable[..., Any]) -> Iterable[bytes]:
        return self._wsgi(environ, start_response)


def create_app(quotes: QuoteService) -> QuoteApp:
    return QuoteApp(quotes)