"""Tests for errors.py."""

import pytest
from juiceconfig.errors import (
    AlreadyFailedError,
    BackendError,
    FileReadError,
    InvalidSelectorError,
    JuiceConfigError,
    NotFoundError,
    ParseError,
    TypeMismatchError,
)


class TestJuiceConfigError:
    """Tests for the base exception."""

    def test_message_and_details(self):
        """Message and details are preserved."""
        error = JuiceConfigError("boom", details={"path": "a.b"})
        assert str(error) == "boom"
        assert error.message == "boom"
        assert error.details == {"path": "a.b"}

    def test_details_default_to_empty(self):
        """Details default to an empty dict."""
        assert JuiceConfigError("boom").details == {}

    @pytest.mark.parametrize(
        "error_cls",
        [
            InvalidSelectorError,
            ParseError,
            FileReadError,
            BackendError,
            NotFoundError,
            TypeMismatchError,
            AlreadyFailedError,
        ],
    )
    def test_subclasses_share_base(self, error_cls):
        """Every error can be caught as JuiceConfigError."""
        with pytest.raises(JuiceConfigError):
            raise error_cls("failure")

    def test_file_read_error_does_not_shadow_oserror(self):
        """FileReadError is not an OSError."""
        assert not issubclass(FileReadError, OSError)
