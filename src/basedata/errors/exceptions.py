"""Custom exception hierarchy for basedata."""

from __future__ import annotations

from pathlib import Path
from typing import Any

INVALID_KEY_MESSAGE = "expected value to be a string, array or object."


class BaseDataError(Exception):
    """Base exception for all basedata errors."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message


class InvalidKeyError(BaseDataError, TypeError):
    """Raised when ``data()`` receives a key that is not a string, list or mapping."""

    def __init__(self, message: str = INVALID_KEY_MESSAGE, key: Any = None) -> None:
        super().__init__(message)
        self.key = key


class FileReadError(BaseDataError):
    """An explicitly named data file is missing or unreadable.

    Glob patterns never raise this; a pattern with no matches is an empty load.
    """

    def __init__(
        self,
        message: str = "",
        path: str | Path | None = None,
        original: Exception | None = None,
    ) -> None:
        if not message and path is not None:
            message = f"Failed to read data file: {path}"
        super().__init__(message)
        self.path = str(path) if path is not None else None
        self.original = original


class LoaderError(BaseDataError, ValueError):
    """Invalid loader registration, or no loader available for a file."""

    def __init__(self, message: str = "", matcher: Any = None) -> None:
        super().__init__(message)
        self.matcher = matcher
