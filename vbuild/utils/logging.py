# vbuild/utils/logging.py
"""
Logging Utilities — one root configuration for every vbuild module

Intent
- Configure root logging once; modules only call `get_logger(__name__)`.

What this module guarantees
- **Idempotent root configuration:** repeated `configure_logging()` calls never duplicate handlers.
- **Stable log format:** timestamp | level | logger name | message.
- **Optional log-to-file:** a FileHandler is added next to the stream handler, once per file.

Primary API
- `configure_logging(level="INFO", log_file=None) -> None`
- `configure_logging_from_options(options, log_file=None) -> None`
  Uses `options.log_level` (BuildOptions or anything shaped like it).
- `get_logger(name) -> logging.Logger`
  Lazily configures logging with defaults if not configured yet.

External dependencies
- Python stdlib: `logging`, `pathlib`
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Internal state to avoid duplicating handlers
_CONFIGURED = False


def level_from_name(level: str) -> int:
    """
    Map a level name ("info", "DEBUG", ...) to its numeric value; ValueError if unknown.
    """
    value = getattr(logging, str(level).upper(), None)
    if not isinstance(value, int):
        raise ValueError(f"Invalid log level: {level}")
    return value


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure root logging (idempotent for handlers).
    - Adds a StreamHandler only if the root has none yet.
    - If log_file is provided, adds a FileHandler for it (once per resolved path).
    """
    global _CONFIGURED

    root = logging.getLogger()
    root.setLevel(level_from_name(level))

    def _has_stream_handler() -> bool:
        return any(
            isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
            for h in root.handlers
        )

    def _has_file_handler(path: str) -> bool:
        target = Path(path).resolve()
        for h in root.handlers:
            if isinstance(h, logging.FileHandler):
                if Path(getattr(h, "baseFilename", "")).resolve() == target:
                    return True
        return False

    formatter = logging.Formatter(fmt=_DEFAULT_FORMAT, datefmt=_DEFAULT_DATEFMT)

    if not _has_stream_handler():
        sh = logging.StreamHandler()
        sh.setFormatter(formatter)
        root.addHandler(sh)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        if not _has_file_handler(log_file):
            fh = logging.FileHandler(log_file, encoding="utf-8")
            fh.setFormatter(formatter)
            root.addHandler(fh)

    _CONFIGURED = True


def configure_logging_from_options(options: Any, *, log_file: Optional[str] = None) -> None:
    """
    Configure logging from a BuildOptions-like object (reads `log_level`).
    """
    level = getattr(options, "log_level", None) or "INFO"
    configure_logging(level=level, log_file=log_file)


def get_logger(name: str) -> logging.Logger:
    """
    Get a module logger with consistent configuration.

    Notes:
    - Logging is configured lazily with INFO level unless configured already.
    - Handlers live on root; this never adds per-logger handlers.
    """
    if not _CONFIGURED:
        configure_logging(level="INFO", log_file=None)
    return logging.getLogger(name)


__all__ = [
    "get_logger",
    "configure_logging",
    "configure_logging_from_options",
    "level_from_name",
]
