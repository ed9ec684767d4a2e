"""Configuration read from the environment and an optional .env file."""

import os
import re
from collections.abc import MutableMapping
from dataclasses import dataclass, field
from datetime import timedelta
from decimal import Decimal


class ConfigError(Exception):
    """Raised when the configuration is missing or malformed."""


@dataclass(frozen=True)
class HTTPConfig:
    port: str
    read_timeout: timedelta = timedelta(seconds=30)
    write_timeout: timedelta = timedelta(seconds=30)
    idle_timeout: timedelta = timedelta(seconds=60)
    max_header_bytes: int = 1048576
    shutdown_timeout: timedelta = timedelta(seconds=5)


@dataclass(frozen=True)
class Config:
    http: HTTPConfig = field(default_factory=lambda: HTTPConfig(port=""))


_NANOS = {"ns": 1, "us": 10**3, "µs": 10**3, "μs": 10**3, "ms": 10**6,
          "s": 10**9, "m": 60 * 10**9, "h": 3600 * 10**9}
_PART = r"(\d+\.?\d*|\.\d+)(ns|us|µs|μs|ms|s|m|h)"
_DURATION = re.compile(rf"([+-]?)(0|(?:{_PART})+)")


def parse_duration(value: str) -> timedelta:
    """Parse a duration such as ``"30s"`` or ``"1h15m"``."""
    match = _DURATION.fullmatch(value)
    if match is None:
        raise ConfigError(f"Invalid duration format for '{value}'")
    nanos = sum(Decimal(n) * _NANOS[u] for n, u in re.findall(_PART, match.group(2)))
    micros = int(nanos / 1000)
    return timedelta(microseconds=-micros if match.group(1) == "-" else micros)


def parse_int(value: str) -> int:
    if not re.fullmatch(r"[+-]?[0-9]+", value):
        raise ConfigError(f"Invalid integer format for '{value}'")
    return int(value)


def get_env(key: str, default: str = "",
            environ: MutableMapping[str, str] | None = None) -> str:
    """Return a non-empty variable or ``default``; raise if both are empty."""
    value = (os.environ if environ is None else environ).get(key, "") or default
    if not value:
        raise ConfigError(f"Environment variable {key} is required")
    return value


def load_dotenv(path: str | os.PathLike[str] = ".env",
                environ: MutableMapping[str, str] | None = None) -> None:
    """Set variables from a ``KEY=value`` file; a missing file is ignored."""
    target = os.environ if environ is None else environ
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except FileNotFoundError:
        return
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"error reading .env file: {exc}") from exc
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, val = line.partition("=")
        if not sep:
            raise ConfigError(f"invalid .env line: {line!r}")
        target[key.strip()] = val.strip().strip("\"'")


def load_config(env_file: str | os.PathLike[str] = ".env",
                environ: MutableMapping[str, str] | None = None) -> Config:
    """Load the configuration, reading ``env_file`` into the environment first."""
    env = os.environ if environ is None else environ
    load_dotenv(env_file, env)
    http = HTTPConfig(
        port=get_env("HTTP_PORT", "", env),
        read_timeout=parse_duration(get_env("HTTP_READ_TIMEOUT", "30s", env)),
        write_timeout=parse_duration(get_env("HTTP_WRITE_TIMEOUT", "30s", env)),
        idle_timeout=parse_duration(get_env("HTTP_IDLE_TIMEOUT", "60s", env)),
        max_header_bytes=parse_int(get_env("HTTP_MAX_HEADER_BYTES", "1048576", env)),
        shutdown_timeout=parse_duration(get_env("HTTP_SHUTDOWN_TIMEOUT", "5s", env)),
    )
    if http.read_timeout < timedelta(0):
        raise ConfigError("HTTP_READ_TIMEOUT cannot be negative")
    if http.write_timeout < timedelta(0):
        raise ConfigError("HTTP_WRITE_TIMEOUT cannot be negative")
    return Config(http=http)