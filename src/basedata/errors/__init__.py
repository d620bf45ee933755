"""Error handling: the basedata exception hierarchy."""

from basedata.errors.exceptions import (
    INVALID_KEY_MESSAGE,
    BaseDataError,
    FileReadError,
    InvalidKeyError,
    LoaderError,
)

__all__ = [
    "BaseDataError",
    "InvalidKeyError",
    "FileReadError",
    "LoaderError",
    "INVALID_KEY_MESSAGE",
]
