"""An in-memory quote service with a JSON HTTP API served over WSGI."""

__version__ = "0.1.0"