# tests/errors/test_base.py
"""Tests for nexusblog/errors/base.py module."""

from unittest.mock import MagicMock

import orjson
from sqlalchemy.exc import OperationalError

from nexusblog.errors import (
    BaseAppError,
    DuplicateEntryError,
    InvalidQueryTypeError,
    RecordNotFoundError,
    create_exception_handler,
    sqlalchemy_exception_handler,
)


def make_request() -> MagicMock:
    request = MagicMock()
    request.client.host = "192.168.1.1"
    request.url.path = "/api/test"
    return request


class TestBaseAppError:
    """Tests for BaseAppError exception."""

    def test_default_values(self) -> None:
        """Test default initialization values."""
        error = BaseAppError()
        assert error.detail == "Internal Server Error"
        assert error.status_code == 500

    def test_custom_values(self) -> None:
        error = BaseAppError(detail="Custom error", status_code=400)
        assert error.detail == "Custom error"
        assert error.status_code == 400

    def test_str_representation(self) -> None:
        """Test string representation returns the detail."""
        assert str(BaseAppError(detail="Test error")) == "Test error"

    def test_status_codes(self) -> None:
        assert RecordNotFoundError().status_code == 404
        assert DuplicateEntryError().status_code == 409
        assert InvalidQueryTypeError("Bogus").status_code == 400


class TestCreateExceptionHandler:
    """Tests for create_exception_handler factory function."""

    async def test_handler_with_base_app_error(self) -> None:
        logger = MagicMock()
        handler = create_exception_handler(logger)

        response = await handler(make_request(), BaseAppError(detail="Test error", status_code=400))

        assert response.status_code == 400
        assert orjson.loads(response.body) == {"detail": "Test error", "success": False}
        logger.warning.assert_called_once_with(
            "Test error for ip: 192.168.1.1 for endpoint /api/test",
        )

    async def test_handler_includes_extra_attributes(self) -> None:
        """Test that attributes set on the error are added to the body."""
        handler = create_exception_handler(MagicMock())

        response = await handler(make_request(), InvalidQueryTypeError("Bogus"))

        assert orjson.loads(response.body) == {
            "detail": "Invalid query type specified",
            "success": False,
            "qtype": "Bogus",
        }

    async def test_handler_with_plain_exception(self) -> None:
        handler = create_exception_handler(MagicMock())

        response = await handler(make_request(), ValueError("boom"))

        assert response.status_code == 500
        assert orjson.loads(response.body)["detail"] == "Internal Server Error"


class TestSqlAlchemyExceptionHandler:
    async def test_hides_driver_message(self) -> None:
        """Test that unmapped SQLAlchemy failures get the generic JSON body."""
        error = OperationalError("SELECT 1", {}, Exception("connection refused"))

        response = await sqlalchemy_exception_handler(make_request(), error)

        assert response.status_code == 500
        assert orjson.loads(response.body) == {
            "detail": "An unexpected server error occurred.",
            "success": False,
        }
