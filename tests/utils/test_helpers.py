# tests/utils/test_helpers.py
"""Tests for nexusblog/utils/helpers.py module."""

import re
from unittest.mock import MagicMock

from fastapi import FastAPI

from nexusblog.utils.helpers import get_summary, host, today_str


class TestTodayStr:
    """Tests for today_str function."""

    def test_format_matches_expected_pattern(self) -> None:
        """Test that the date format matches YYYY-MM-DD HH:MM:SS."""
        result = today_str()
        pattern = r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$"
        assert re.match(pattern, result), f"Date format mismatch: {result}"


class TestHost:
    def test_client_host(self) -> None:
        request = MagicMock()
        request.client.host = "10.0.0.1"
        assert host(request) == "10.0.0.1"

    def test_no_client(self) -> None:
        request = MagicMock()
        request.client = None
        assert host(request) == "unknown"


class TestGetSummary:
    """Tests for get_summary function."""

    def make_request(self, app: FastAPI, path: str, method: str = "GET") -> MagicMock:
        request = MagicMock()
        request.scope = {
            "type": "http",
            "app": app,
            "path": path,
            "method": method,
            "root_path": "",
        }
        return request

    def test_api_route_summary(self) -> None:
        app = FastAPI()

        @app.get("/things/{no}", summary="Get a thing")
        async def get_thing(no: int) -> dict[str, int]:
            return {"no": no}

        assert get_summary(self.make_request(app, "/things/3")) == "Get a thing"

    def test_unknown_path(self) -> None:
        app = FastAPI()
        assert get_summary(self.make_request(app, "/missing")) is None
