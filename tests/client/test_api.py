"""Tests for the terminal client's HTTP layer."""

from datetime import UTC, datetime
from uuid import uuid4

import orjson
import pytest
from httpx import ASGITransport, ConnectError, MockTransport, Request, Response

from nexusblog.client import BlogCard, BlogClient, ClientError
from nexusblog.main import app
from nexusblog.schemas import AuthorName, PostResponse, QType

POST_ID = uuid4()
AUTHOR_ID = uuid4()


def post_json(no: int = 1, content: str = "Body", name: str | None = "Aditya") -> dict:
    return {
        "id": str(POST_ID),
        "no": no,
        "title": "Hello",
        "content": content,
        "published": False,
        "publishedDate": "2025-03-05T10:00:00+00:00",
        "authorId": str(AUTHOR_ID),
        "author": {"name": name},
    }


class Recorder:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, status_code: int = 200, body: dict | None = None) -> None:
        self.status_code = status_code
        self.body = body or {}
        self.requests: list[Request] = []

    def __call__(self, request: Request) -> Response:
        self.requests.append(request)
        return Response(self.status_code, json=self.body)


def make_client(recorder: Recorder, token: str | None = "stored-token") -> BlogClient:
    return BlogClient(base_url="http://backend", token=token, transport=MockTransport(recorder))


class TestBlogCard:
    def make_post(self, content: str = "Body", name: str | None = "Aditya") -> PostResponse:
        return PostResponse(
            id=POST_ID,
            no=3,
            title="Hello",
            content=content,
            published_date=datetime(2025, 3, 5, 12, 0, tzinfo=UTC),
            author_id=AUTHOR_ID,
            author=AuthorName(name=name),
        )

    def test_fields(self) -> None:
        card = BlogCard.from_post(self.make_post())

        assert card.no == 3
        assert card.author_name == "Aditya"
        assert card.published_date.endswith("Mar 2025")

    def test_anonymous_author(self) -> None:
        assert BlogCard.from_post(self.make_post(name=None)).author_name == "Anonymous"

    @pytest.mark.parametrize(
        ("length", "expected"),
        [(1, "1 minute(s) read"), (100, "1 minute(s) read"), (101, "2 minute(s) read")],
    )
    def test_reading_time(self, length: int, expected: str) -> None:
        """Test that reading time is one minute per started hundred characters."""
        assert BlogCard.from_post(self.make_post(content="a" * length)).reading_time == expected

    def test_preview_truncates_long_content(self) -> None:
        card = BlogCard.from_post(self.make_post(content="x" * 150))

        assert card.preview == "x" * 100 + "..."

    def test_preview_keeps_short_content(self) -> None:
        assert BlogCard.from_post(self.make_post(content="short")).preview == "short"


class TestBlogClient:
    async def test_signin_stores_token(self) -> None:
        recorder = Recorder(body={"jwt": "fresh-token"})

        async with make_client(recorder, token=None) as client:
            token = await client.signin("aditya@example.com", "secret123")

        assert token == "fresh-token"
        assert client.token == "fresh-token"
        request = recorder.requests[0]
        assert request.url.path == "/api/v1/user/signin"
        assert "Authorization" not in request.headers
        assert orjson.loads(request.content) == {
            "email": "aditya@example.com",
            "password": "secret123",
        }

    async def test_sends_bearer_token(self) -> None:
        recorder = Recorder(body={"blogs": [post_json()]})

        async with make_client(recorder) as client:
            cards = await client.bulk()

        assert recorder.requests[0].headers["Authorization"] == "Bearer stored-token"
        assert [card.title for card in cards] == ["Hello"]

    async def test_search_query_params(self) -> None:
        recorder = Recorder(body={"blogs": [], "success": True})

        async with make_client(recorder) as client:
            await client.search("python", qtype=QType.AUTHOR, limit=5)

        params = recorder.requests[0].url.params
        assert params["filter"] == "python"
        assert params["qtype"] == "Author"
        assert params["limit"] == "5"

    async def test_update_sends_only_given_fields(self) -> None:
        recorder = Recorder(body={"id": str(POST_ID)})

        async with make_client(recorder) as client:
            result = await client.update(POST_ID, title="New title")

        assert result == POST_ID
        assert recorder.requests[0].method == "PUT"
        assert orjson.loads(recorder.requests[0].content) == {
            "id": str(POST_ID),
            "title": "New title",
        }

    async def test_error_response(self) -> None:
        recorder = Recorder(404, {"detail": "Cant find blog with given no.", "success": False})

        async with make_client(recorder) as client:
            with pytest.raises(ClientError) as exc_info:
                await client.get_by_no(999)

        assert exc_info.value.status_code == 404
        assert exc_info.value.detail == "Cant find blog with given no."

    async def test_backend_unreachable(self) -> None:
        def refuse(request: Request) -> Response:
            raise ConnectError("Connection refused", request=request)

        async with BlogClient(base_url="http://backend", transport=MockTransport(refuse)) as client:
            with pytest.raises(ClientError) as exc_info:
                await client.bulk()

        assert exc_info.value.status_code is None


class TestAgainstBackend:
    async def test_signup_publish_and_read(self, use_test_db: None) -> None:
        """Test the client end to end against the real app and a test database."""
        async with BlogClient(base_url="http://test", transport=ASGITransport(app=app)) as client:
            await client.signup("reader@example.com", "secret123", name="Reader")
            no = await client.publish("From the terminal", "Written with BlogClient")
            card = await client.get_by_no(no)
            by_id = await client.get_by_id(card.id)
            found = await client.search("terminal", qtype=QType.CONTENT)

        assert card.title == "From the terminal"
        assert card.author_name == "Reader"
        assert by_id.no == no
        assert [c.no for c in found] == [no]
