"""HTTP errors raised by handlers and their conversion into JSON responses."""

import functools
import json
import logging
from collections.abc import Callable
from http import HTTPStatus
from typing import Any

from werkzeug.wrappers import Request, Response

_log = logging.getLogger(__name__)

_HTML_SAFE = {ord("<"): "\\u003c", ord(">"): "\\u003e", ord("&"): "\\u0026",
              0x2028: "\\u2028", 0x2029: "\\u2029"}


def _encode_json(data: Any) -> str:
    """Encode ``data`` compactly, HTML-safe, with a trailing newline."""
    body = json.dumps(data, ensure_ascii=False, allow_nan=False, sort_keys=True,
                      separators=(",", ":"))
    return body.translate(_HTML_SAFE) + "\n"


class HTTPError(Exception):
    """An error with a status code and a message meant for the client."""

    def __init__(self, code: int, message: str, inner: BaseException | None = None) -> None:
        super().__init__(message)
        self.code = int(code)
        self.message = message
        self.inner = inner


def _error_response(code: int, message: str) -> Response:
    return Response(_encode_json({"error": message}), status=code,
                    content_type="application/json; charset=utf-8")


def wrap_handler(endpoint: Callable[..., Response]) -> Callable[..., Response]:
    """Turn exceptions raised by ``endpoint`` into JSON error responses."""

    @functools.wraps(endpoint)
    def handler(request: Request, *args: Any, **kwargs: Any) -> Response:
        try:
            return endpoint(request, *args, **kwargs)
        except HTTPError as exc:
            if exc.inner is not None:
                _log.error("Client Message: %s, Internal Error: %s. Status Code: %d",
                           exc.message, exc.inner, exc.code)
            else:
                _log.error("HTTP error: %d %s", exc.code, exc.message)
            return _error_response(exc.code, exc.message)
        except Exception as exc:
            _log.error("Internal server error: %s", exc)
            return _error_response(HTTPStatus.INTERNAL_SERVER_ERROR, "Internal Server Error")

    return handler