"""Environment-driven CLI settings."""

from __future__ import annotations

import logging
import os
import sys

_DEFAULT_MAX_TEMPLATE_CHARS = 1_000_000
_DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_HANDLER_NAME = "percentfmt.cli"


class _StderrHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Stream handler bound to whatever ``sys.stderr`` is at emit time."""

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    def emit(self, record: logging.LogRecord) -> None:
        self.stream = sys.stderr
        super().emit(record)


def max_template_chars() -> int:
    raw = os.getenv("PERCENTFMT_MAX_TEMPLATE_CHARS")
    if raw is None:
        return _DEFAULT_MAX_TEMPLATE_CHARS
    try:
        parsed = int(raw)
    except ValueError:
        return _DEFAULT_MAX_TEMPLATE_CHARS
    return parsed if parsed > 0 else _DEFAULT_MAX_TEMPLATE_CHARS


def log_level_name(override: str | None = None) -> str:
    """Resolve the log level from an explicit option, then the environment."""

    for candidate in (override, os.getenv("PERCENTFMT_LOG_LEVEL")):
        if candidate is None:
            continue
        normalized = candidate.strip().upper()
        if normalized in _LOG_LEVELS:
            return normalized
    return _DEFAULT_LOG_LEVEL


def configure_logging(level_name: str) -> None:
    """Attach one stderr handler to the ``percentfmt`` logger tree."""

    base = logging.getLogger("percentfmt")
    base.setLevel(getattr(logging, level_name))
    if any(handler.get_name() == _HANDLER_NAME for handler in base.handlers):
        return

    handler = _StderrHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    base.addHandler(handler)
