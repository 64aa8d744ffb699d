"""Environment-driven defaults for the CLI and the convenience wrappers."""

from __future__ import annotations

import logging
import os

DEFAULT_SCHEME = "pgp"
DEFAULT_READ_CHUNK = 64 * 1024
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _env_int(name: str) -> int | None:
    value = os.getenv(name)
    if not value:
        return None
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return None
    if parsed <= 0:
        return None
    return parsed


def _env_flag(name: str) -> bool:
    return os.getenv(name, "0").strip().lower() in ("1", "true", "yes", "on")


def default_scheme() -> str:
    return (os.getenv("LASTRESORT_SCHEME") or DEFAULT_SCHEME).strip().lower()


def line_words() -> int | None:
    return _env_int("LASTRESORT_LINE_WORDS")


def read_chunk() -> int:
    return _env_int("LASTRESORT_READ_CHUNK") or DEFAULT_READ_CHUNK


def eff_wordlist_path() -> str | None:
    return os.getenv("LASTRESORT_EFF_WORDLIST") or None


def debug_enabled() -> bool:
    return _env_flag("LASTRESORT_DEBUG")


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Attach a stream handler to the package logger when debugging is wanted."""
    logger = logging.getLogger("lastresort")
    if not (verbose or debug_enabled()):
        return logger
    logger.setLevel(logging.DEBUG)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
