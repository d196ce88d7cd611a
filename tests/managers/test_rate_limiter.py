# tests/managers/test_rate_limiter.py
"""Tests for nexusblog/managers/rate_limiter.py module."""

from unittest.mock import MagicMock, patch

from nexusblog.managers.rate_limiter import get_identifier, limiter


class TestGetIdentifier:
    """Tests for get_identifier function."""

    def test_returns_ip(self) -> None:
        """Test that the client IP address is the rate limit key."""
        request = MagicMock()
        request.client.host = "192.168.1.100"

        with patch(
            "nexusblog.managers.rate_limiter.get_remote_address",
            return_value="192.168.1.100",
        ):
            assert get_identifier(request) == "ip:192.168.1.100"


class TestLimiterInstance:
    def test_disabled_by_environment(self) -> None:
        """Test that LIMITER_ENABLED=false from the test environment is honoured."""
        assert limiter.enabled is False
