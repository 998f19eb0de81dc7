"""Custom exceptions raised around, never inside, the placeholder scan."""

from __future__ import annotations

from pathlib import Path


class MappingFileError(ValueError):
    """Raised when a key/value mapping file cannot be loaded or validated."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class TemplateTooLargeError(ValueError):
    """Raised when a template exceeds the configured size limit."""

    def __init__(self, message: str, *, size: int, limit: int) -> None:
        super().__init__(message)
        self.size = size
        self.limit = limit
