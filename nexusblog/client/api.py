"""HTTP client for the Nexus Blog API, used by the terminal frontend."""

from dataclasses import dataclass
from datetime import datetime
from math import ceil
from typing import Any, Self
from uuid import UUID

from httpx import AsyncBaseTransport, AsyncClient, HTTPError, Response

from nexusblog.configs import ClientConfig
from nexusblog.schemas import PostResponse, QType

PREVIEW_LENGTH = 100
CHARS_PER_MINUTE = 100
ANONYMOUS = "Anonymous"


class ClientError(Exception):
    """Raised when the backend answers with an error status or cannot be reached."""

    def __init__(self, detail: str, status_code: int | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


def format_date(value: datetime) -> str:
    """Format a publish timestamp the way blog cards show it, e.g. `05 Mar 2025`."""
    return value.astimezone().strftime("%d %b %Y")


@dataclass(frozen=True)
class BlogCard:
    """What a feed entry or post page needs to render one post."""

    id: UUID
    no: int
    title: str
    content: str
    author_name: str
    published_date: str

    @classmethod
    def from_post(cls, post: PostResponse) -> Self:
        return cls(
            id=post.id,
            no=post.no,
            title=post.title,
            content=post.content,
            author_name=post.author.name or ANONYMOUS,
            published_date=format_date(post.published_date),
        )

    @property
    def preview(self) -> str:
        if len(self.content) <= PREVIEW_LENGTH:
            return self.content
        return f"{self.content[:PREVIEW_LENGTH]}..."

    @property
    def reading_time(self) -> str:
        return f"{ceil(len(self.content) / CHARS_PER_MINUTE)} minute(s) read"


class BlogClient:
    """
    Async client for the blog API.

    Holds the bearer token the way the browser frontend keeps it in local
    storage: `signup`/`signin` set it, every other call sends it.

    Example:
        ```python
        async with BlogClient() as client:
            await client.signin("aditya@example.com", "secret123")
            cards = await client.search("python", qtype=QType.CONTENT)
        ```
    """

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        timeout: float | None = None,
        transport: AsyncBaseTransport | None = None,
    ) -> None:
        config = ClientConfig()
        self.token = token
        self._client = AsyncClient(
            base_url=base_url or config.backend_url,
            timeout=timeout or config.timeout,
            transport=transport,
        )

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}

    async def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        try:
            response = await self._client.request(method, path, headers=self._headers(), **kwargs)
        except HTTPError as e:
            raise ClientError(f"Backend unreachable: {e}") from e

        if response.is_error:
            raise ClientError(_error_detail(response), response.status_code)
        return response.json()

    async def signup(self, email: str, password: str, name: str | None = None) -> str:
        data = await self._request(
            "POST",
            "/api/v1/user/signup",
            json={"email": email, "password": password, "name": name},
        )
        self.token = data["jwt"]
        return self.token

    async def signin(self, email: str, password: str) -> str:
        data = await self._request(
            "POST",
            "/api/v1/user/signin",
            json={"email": email, "password": password},
        )
        self.token = data["jwt"]
        return self.token

    async def bulk(self) -> list[BlogCard]:
        data = await self._request("GET", "/api/v1/blog/bulk")
        return _cards(data["blogs"])

    async def search(
        self,
        filter_text: str,
        qtype: QType = QType.ALL,
        limit: int = 10,
    ) -> list[BlogCard]:
        data = await self._request(
            "GET",
            "/api/v1/blog/search",
            params={"filter": filter_text, "limit": limit, "qtype": str(qtype)},
        )
        return _cards(data["blogs"])

    async def get_by_no(self, no: int) -> BlogCard:
        data = await self._request("GET", f"/api/v1/blog/no/{no}")
        return BlogCard.from_post(PostResponse.model_validate(data["blog"]))

    async def get_by_id(self, post_id: UUID) -> BlogCard:
        data = await self._request("GET", f"/api/v1/blog/{post_id}")
        return BlogCard.from_post(PostResponse.model_validate(data["blog"]))

    async def publish(self, title: str, content: str) -> int:
        """Publish a post and return its number."""
        data = await self._request(
            "POST",
            "/api/v1/blog/",
            json={"title": title, "content": content},
        )
        return int(data["no"])

    async def update(
        self,
        post_id: UUID,
        title: str | None = None,
        content: str | None = None,
    ) -> UUID:
        body: dict[str, str] = {"id": str(post_id)}
        if title is not None:
            body["title"] = title
        if content is not None:
            body["content"] = content
        data = await self._request("PUT", "/api/v1/blog/", json=body)
        return UUID(data["id"])


def _cards(blogs: list[dict[str, Any]]) -> list[BlogCard]:
    return [BlogCard.from_post(PostResponse.model_validate(blog)) for blog in blogs]


def _error_detail(response: Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and "detail" in body:
        return str(body["detail"])
    return response.reason_phrase
