"""Tests for the signup and signin endpoints."""

from httpx import AsyncClient
from starlette.status import (
    HTTP_200_OK,
    HTTP_201_CREATED,
    HTTP_400_BAD_REQUEST,
    HTTP_403_FORBIDDEN,
    HTTP_409_CONFLICT,
    HTTP_429_TOO_MANY_REQUESTS,
)

from nexusblog.managers import decode_access_token, limiter
from nexusblog.models import UserDB

SIGNUP = "/api/v1/user/signup"
SIGNIN = "/api/v1/user/signin"


class TestSignup:
    async def test_signup_returns_usable_token(self, client: AsyncClient) -> None:
        """Test that the issued JWT opens the blog routes."""
        response = await client.post(
            SIGNUP,
            json={"email": "new@example.com", "password": "secret123", "name": "New"},
        )

        assert response.status_code == HTTP_201_CREATED
        token = response.json()["jwt"]
        assert decode_access_token(token) is not None

        bulk = await client.get(
            "/api/v1/blog/bulk",
            headers={"Authorization": f"Bearer {token}"},
        )
        assert bulk.status_code == HTTP_200_OK

    async def test_signup_without_name(self, client: AsyncClient) -> None:
        response = await client.post(
            SIGNUP,
            json={"email": "anon@example.com", "password": "secret123"},
        )

        assert response.status_code == HTTP_201_CREATED

    async def test_duplicate_email(self, client: AsyncClient, user: UserDB) -> None:
        response = await client.post(
            SIGNUP,
            json={"email": user.email, "password": "secret123"},
        )

        assert response.status_code == HTTP_409_CONFLICT
        body = response.json()
        assert body["success"] is False
        assert user.email in body["detail"]

    async def test_short_password(self, client: AsyncClient) -> None:
        response = await client.post(
            SIGNUP,
            json={"email": "short@example.com", "password": "12345"},
        )

        assert response.status_code == HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Inputs are not correct"

    async def test_invalid_email(self, client: AsyncClient) -> None:
        response = await client.post(
            SIGNUP,
            json={"email": "not-an-email", "password": "secret123"},
        )

        assert response.status_code == HTTP_400_BAD_REQUEST
        assert response.json()["success"] is False


class TestSignin:
    async def test_signin(
        self,
        client: AsyncClient,
        user: UserDB,
        user_password: str,
    ) -> None:
        response = await client.post(
            SIGNIN,
            json={"email": user.email, "password": user_password},
        )

        assert response.status_code == HTTP_200_OK
        token_data = decode_access_token(response.json()["jwt"])
        assert token_data is not None
        assert token_data.user_id == user.id

    async def test_wrong_password(self, client: AsyncClient, user: UserDB) -> None:
        response = await client.post(
            SIGNIN,
            json={"email": user.email, "password": "wrong-password"},
        )

        assert response.status_code == HTTP_403_FORBIDDEN
        assert response.json() == {"detail": "Invalid credentials", "success": False}

    async def test_unknown_email(self, client: AsyncClient, user_password: str) -> None:
        response = await client.post(
            SIGNIN,
            json={"email": "nobody@example.com", "password": user_password},
        )

        assert response.status_code == HTTP_403_FORBIDDEN


class TestSignupRateLimit:
    async def test_fourth_signup_in_a_minute_is_limited(self, client: AsyncClient) -> None:
        """Test that signup allows three requests per minute per client."""
        limiter.reset()
        limiter.enabled = True

        statuses = []
        for i in range(4):
            response = await client.post(
                SIGNUP,
                json={"email": f"burst{i}@example.com", "password": "secret123"},
            )
            statuses.append(response.status_code)

        assert statuses[:3] == [HTTP_201_CREATED] * 3
        assert statuses[3] == HTTP_429_TOO_MANY_REQUESTS
        assert response.json()["detail"] == "Rate limit exceeded"
        assert response.json()["success"] is False
