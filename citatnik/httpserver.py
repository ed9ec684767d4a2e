"""A threaded HTTP server running a WSGI application in the background."""

import logging
import threading
from socketserver import ThreadingMixIn
from typing import Any
from wsgiref.simple_server import WSGIRequestHandler, WSGIServer, make_server

from citatnik.config import Config

_log = logging.getLogger(__name__)

_POLL_INTERVAL = 0.05


class _ThreadingWSGIServer(ThreadingMixIn, WSGIServer):
    daemon_threads = False
    block_on_close = True


class _RequestHandler(WSGIRequestHandler):
    max_header_bytes = 1 << 20

    def log_message(self, format: str, *args: Any) -> None:
        _log.info("%s - %s", self.address_string(), format % args)

    def parse_request(self) -> bool:
        if not super().parse_request():
            return False
        size = len(self.raw_requestline) + sum(
            len(k) + len(v) + 4 for k, v in self.headers.items())
        if size > self.max_header_bytes:
            self.send_error(431)
            return False
        return True


class Server:
    """Serves a WSGI app on a background thread.

    Keyword options override the configuration: ``host``, ``port``,
    ``read_timeout``, ``write_timeout``, ``idle_timeout``,
    ``max_header_bytes``, ``shutdown_timeout`` and ``handler``.
    """

    def __init__(self, config: Config, app: Any, **kwargs: Any) -> None:
        http = config.http
        options: dict[str, Any] = {
            "host": "", "port": http.port,
            "read_timeout": http.read_timeout, "write_timeout": http.write_timeout,
            "idle_timeout": http.idle_timeout, "max_header_bytes": http.max_header_bytes,
            "shutdown_timeout": http.shutdown_timeout, "handler": app,
        }
        unknown = set(kwargs) - set(options)
        if unknown:
            raise TypeError(f"unknown server options: {', '.join(sorted(unknown))}")
        options.update(kwargs)
        self.host = options["host"]
        self.port = str(options["port"])
        self.read_timeout = options["read_timeout"]
        self.write_timeout = options["write_timeout"]
        self.idle_timeout = options["idle_timeout"]
        self.max_header_bytes = options["max_header_bytes"]
        self.shutdown_timeout = options["shutdown_timeout"]
        self.app = options["handler"]

        self._httpd: _ThreadingWSGIServer | None = None
        self._thread: threading.Thread | None = None
        self._bound = threading.Event()
        self._stopped = threading.Event()
        self._error: BaseException | None = None

    @property
    def address(self) -> tuple[str, int]:
        """Host and port the server listens on."""
        if self._httpd is None:
            raise RuntimeError("server is not listening")
        host, port = self._httpd.server_address[:2]
        return host, port

    def _serve(self) -> None:
        try:
            timeouts = [t.total_seconds() for t in (self.read_timeout, self.write_timeout)
                        if t.total_seconds() > 0]
            handler = type("RequestHandler", (_RequestHandler,), {
                "timeout": min(timeouts, default=None),
                "max_header_bytes": self.max_header_bytes,
            })
            self._httpd = make_server(self.host, int(self.port or 0), self.app,
                                      server_class=_ThreadingWSGIServer,
                                      handler_class=handler)
            self._bound.set()
            self._httpd.serve_forever(poll_interval=_POLL_INTERVAL)
        except Exception as exc:
            self._error = exc
        finally:
            self._bound.set()
            self._stopped.set()

    def start(self) -> None:
        """Start serving; failures are reported by :meth:`wait`."""
        if self._thread is not None:
            raise RuntimeError("server already started")
        self._thread = threading.Thread(target=self._serve, name="http-server", daemon=True)
        self._thread.start()
        self._bound.wait()

    def wait(self, timeout: float | None = None) -> BaseException | None:
        """Block until serving stops and return its error, if any.

        Raises ``TimeoutError`` if still running after ``timeout``.
        """
        if not self._stopped.wait(timeout):
            raise TimeoutError("server is still running")
        return self._error

    def shutdown(self) -> None:
        """Stop accepting connections and wait for open requests to finish."""
        httpd = self._httpd
        if httpd is None:
            return

        def stop() -> None:
            httpd.shutdown()
            httpd.server_close()

        stopper = threading.Thread(target=stop, name="http-server-shutdown", daemon=True)
        stopper.start()
        stopper.join(max(self.shutdown_timeout.total_seconds(), 0.0) + _POLL_INTERVAL * 2)
        if stopper.is_alive():
            raise TimeoutError("server shutdown timed out")