"""Wiring of the quote service and its command-line entry point."""

import argparse
import logging
import signal
import threading

from citatnik.config import Config, ConfigError, load_config
from citatnik.httpserver import Server
from citatnik.repository import MemoryQuoteRepo
from citatnik.router import QuoteApp, create_app
from citatnik.usecase import QuoteService

_log = logging.getLogger(__name__)


def build_app() -> QuoteApp:
    """Create the WSGI application over a fresh in-memory repository."""
    return create_app(QuoteService(MemoryQuoteRepo()))


def run(config: Config) -> None:
    """Serve until SIGINT/SIGTERM or a server failure, then shut down."""
    server = Server(config, build_app())
    server.start()

    received: list[int] = []
    stop = threading.Event()

    def on_signal(signum: int, frame: object) -> None:
        received.append(signum)
        stop.set()

    previous = {sig: signal.signal(sig, on_signal) for sig in (signal.SIGINT, signal.SIGTERM)}
    try:
        while not stop.is_set():
            try:
                error = server.wait(0.1)
            except TimeoutError:
                continue
            _log.error("app - Run - httpServer.Notify: %s", error)
            break
        else:
            _log.info("app - Run - signal: %s", signal.Signals(received[0]).name)
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)

    try:
        server.shutdown()
    except Exception as exc:
        _log.error("app - Run - httpServer.Shutdown: %s", exc)


def main(argv: list[str] | None = None) -> int:
    """Load the configuration and run the quote service."""
    argparse.ArgumentParser(prog="citatnik", description="Quote HTTP service.").parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    try:
        config = load_config()
    except ConfigError as exc:
        _log.critical("%s", exc)
        return 1
    run(config)
    return 0