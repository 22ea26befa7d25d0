"""Tests for the RestException error payload."""

import pytest
from pydantic import ValidationError

from callsdk.resources import RestException


class TestRestExceptionFromJson:
    """Tests for RestException.from_json."""

    def test_parses_all_fields(self) -> None:
        """All four error fields are read."""
        error = RestException.from_json(
            '{"message": "bad request", "code": 20001, '
            '"more_info": "https://www.twilio.com/docs/errors/20001", "status": 400}'
        )

        assert error.message == "bad request"
        assert error.code == 20001
        assert error.more_info == "https://www.twilio.com/docs/errors/20001"
        assert error.status == 400

    def test_code_and_more_info_optional(self) -> None:
        """Errors without a code still parse."""
        error = RestException.from_json('{"message": "Not Found", "status": 404}')

        assert error.code is None
        assert error.more_info is None

    def test_invalid_body_raises(self) -> None:
        """Non-JSON bodies raise a validation error."""
        with pytest.raises(ValidationError):
            RestException.from_json("<html>Bad Gateway</html>")

    def test_status_optional(self) -> None:
        """Bodies without status still parse."""
        error = RestException.from_json('{"message": "Not Found", "code": 20404}')

        assert error.message == "Not Found"
        assert error.code == 20404
        assert error.status is None
