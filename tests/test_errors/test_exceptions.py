"""Tests for the custom exception hierarchy."""

import pytest

from basedata.errors import (
    INVALID_KEY_MESSAGE,
    BaseDataError,
    FileReadError,
    InvalidKeyError,
    LoaderError,
)


class TestExceptionHierarchy:
    def test_all_inherit_from_base(self):
        assert issubclass(InvalidKeyError, BaseDataError)
        assert issubclass(FileReadError, BaseDataError)
        assert issubclass(LoaderError, BaseDataError)

    def test_builtin_bases(self):
        assert issubclass(InvalidKeyError, TypeError)
        assert issubclass(LoaderError, ValueError)
        assert issubclass(BaseDataError, Exception)


class TestInvalidKeyError:
    def test_default_message(self):
        err = InvalidKeyError(key=42)
        assert str(err) == "expected value to be a string, array or object."
        assert err.message == INVALID_KEY_MESSAGE
        assert err.key == 42

    def test_catchable_as_type_error(self):
        with pytest.raises(TypeError):
            raise InvalidKeyError()


class TestFileReadError:
    def test_message_from_path(self):
        err = FileReadError(path="fixtures/missing.json")
        assert "Failed to read" in str(err)
        assert err.path == "fixtures/missing.json"
        assert err.original is None

    def test_explicit_message(self):
        original = OSError("boom")
        err = FileReadError("custom", path="x.json", original=original)
        assert str(err) == "custom"
        assert err.original is original


class TestLoaderError:
    def test_attributes(self):
        err = LoaderError("bad matcher", matcher=5)
        assert err.matcher == 5
        assert "bad matcher" in str(err)
