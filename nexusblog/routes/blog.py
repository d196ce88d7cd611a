# nexusblog/routes/blog.py

"""
Blog Routes.

Post CRUD, the default feed and filtered search. Every route sits behind the
bearer token guard (`require_user_id`), mounted at router level so an
unauthenticated request is rejected before a database session is opened.

Summary
-------
Endpoints include:
  - Publish post
  - Update post
  - Get post by number
  - Bulk feed
  - Search posts
  - Get post by id
"""

from logging import getLogger
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from fastapi.responses import ORJSONResponse

from nexusblog.configs import file_logger, settings
from nexusblog.configs.settings import POST_CREATE_ERROR
from nexusblog.dependencies import CurrentUserIdDep, PostRepoDep, require_user_id
from nexusblog.errors.database import DatabaseError, RecordNotFoundError, TransactionError
from nexusblog.errors.validation import InvalidQueryTypeError
from nexusblog.models import PostDB
from nexusblog.schemas import (
    AuthorName,
    PostCreate,
    PostCreatedResponse,
    PostEnvelope,
    PostListResponse,
    PostResponse,
    PostUpdate,
    PostUpdatedResponse,
    QType,
    SearchResponse,
)

router = APIRouter(
    prefix="/api/v1/blog",
    tags=["📝 Blog"],
    dependencies=[Depends(require_user_id)],
    responses={
        403: {
            "description": "Missing or invalid bearer token",
            "content": {
                "application/json": {
                    "example": {"detail": "User not logged in!", "success": False},
                },
            },
        },
    },
)

logger = file_logger(getLogger(__name__))


def post_to_response(post: PostDB, author_name: str | None) -> PostResponse:
    """
    Convert a `PostDB` row and its author's name to `PostResponse`.

    Parameters
    ----------
    post : PostDB
        Database post entity.
    author_name : str | None
        Name of the post's author.

    Returns
    -------
    PostResponse
        Validated response model.
    """
    return PostResponse(
        id=post.id,
        no=post.no,
        title=post.title,
        content=post.content,
        published=post.published,
        published_date=post.published_date,
        author_id=post.author_id,
        author=AuthorName(name=author_name),
    )


def parse_qtype(qtype: str | None) -> QType:
    """
    Resolve the search scope.

    An absent or empty `qtype` means `All`; anything that is not one of the
    enum values is rejected.

    Raises
    ------
    InvalidQueryTypeError
        If `qtype` is set to an unknown value.
    """
    if not qtype:
        return QType.ALL
    try:
        return QType(qtype)
    except ValueError as e:
        logger.warning(f"Rejected search with qtype {qtype!r}")
        raise InvalidQueryTypeError(qtype) from e


@router.post(
    "/",
    response_class=ORJSONResponse,
    response_model=PostCreatedResponse,
    summary="Publish a post",
    description="Create a post authored by the token's user and assign it the next number.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {"id": "550e8400-e29b-41d4-a716-446655440000", "no": 42},
                },
            },
        },
        400: {
            "description": "Invalid body",
            "content": {
                "application/json": {
                    "example": {"detail": "Inputs are not correct", "success": False},
                },
            },
        },
    },
    operation_id="blog_create",
)
async def create_blog(
    post: PostCreate,
    repo: PostRepoDep,
    user_id: CurrentUserIdDep,
) -> PostCreatedResponse:
    """
    Publish a new post.

    Parameters
    ----------
    post : PostCreate
        Title and content.
    repo : PostRepository
        Repository dependency.
    user_id : UUID
        Author id taken from the bearer token.

    Returns
    -------
    PostCreatedResponse
        Id and number of the new post.

    Raises
    ------
    TransactionError
        If the counter increment or insert fails; the cause is logged.
    """
    try:
        db_post = await repo.create(post, author_id=user_id)
    except DatabaseError as e:
        logger.exception(f"Failed to create post for user {user_id}")
        raise TransactionError(detail=POST_CREATE_ERROR) from e
    return PostCreatedResponse(id=db_post.id, no=db_post.no)


@router.put(
    "/",
    response_class=ORJSONResponse,
    response_model=PostUpdatedResponse,
    summary="Update a post",
    description="Overwrite the supplied fields of a post; omitted fields keep their value.",
    responses={
        404: {
            "description": "Not found",
            "content": {
                "application/json": {
                    "example": {"detail": "Blog post not found", "success": False},
                },
            },
        },
    },
    operation_id="blog_update",
)
async def update_blog(post_update: PostUpdate, repo: PostRepoDep) -> PostUpdatedResponse:
    """
    Partially update a post.

    Parameters
    ----------
    post_update : PostUpdate
        Post id plus optional title and content.
    repo : PostRepository
        Repository dependency.

    Returns
    -------
    PostUpdatedResponse
        Id of the updated post.

    Raises
    ------
    RecordNotFoundError
        If no post has the given id.
    """
    db_post = await repo.update(post_update)
    if not db_post:
        raise RecordNotFoundError(detail="Blog post not found")
    return PostUpdatedResponse(id=db_post.id)


@router.get(
    "/no/{no}",
    response_class=ORJSONResponse,
    response_model=PostEnvelope,
    summary="Get post by number",
    responses={
        404: {
            "description": "Not found",
            "content": {
                "application/json": {
                    "example": {"detail": "Cant find blog with given no.", "success": False},
                },
            },
        },
    },
    operation_id="blog_get_by_no",
)
async def get_blog_by_no(no: int, repo: PostRepoDep) -> PostEnvelope:
    """
    Get a post by its sequential number.

    Raises
    ------
    RecordNotFoundError
        If no post has the given number.
    """
    row = await repo.get_by_no(no)
    if not row:
        raise RecordNotFoundError(detail="Cant find blog with given no.")
    return PostEnvelope(blog=post_to_response(*row))


@router.get(
    "/bulk",
    response_class=ORJSONResponse,
    response_model=PostListResponse,
    summary="Default feed",
    description="The most recent posts, newest first.",
    operation_id="blog_bulk",
)
async def get_bulk(repo: PostRepoDep) -> PostListResponse:
    rows = await repo.list_recent(settings.BULK_LIMIT)
    return PostListResponse(blogs=[post_to_response(*row) for row in rows])


@router.get(
    "/search",
    response_class=ORJSONResponse,
    response_model=SearchResponse,
    summary="Search posts",
    description=(
        "Substring search. `qtype=All` matches title, content, author name and email; "
        "`Author` only the author; `Content` only title and content."
    ),
    responses={
        400: {
            "description": "Unknown qtype",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Invalid query type specified",
                        "success": False,
                        "qtype": "Bogus",
                    },
                },
            },
        },
    },
    operation_id="blog_search",
)
async def search_blogs(
    repo: PostRepoDep,
    filter_text: Annotated[str, Query(alias="filter", description="Substring to look for")] = "",
    limit: Annotated[
        int,
        Query(ge=1, le=settings.SEARCH_MAX_LIMIT, description="Maximum number of posts"),
    ] = settings.SEARCH_DEFAULT_LIMIT,
    qtype: Annotated[str | None, Query(description="All, Author or Content")] = None,
) -> SearchResponse:
    """
    Search posts.

    Parameters
    ----------
    repo : PostRepository
        Repository dependency.
    filter_text : str
        Substring to look for (`filter` on the wire).
    limit : int
        Maximum number of posts.
    qtype : str | None
        Search scope; absent means `All`.

    Returns
    -------
    SearchResponse
        Matching posts and `success: true`.

    Raises
    ------
    InvalidQueryTypeError
        If `qtype` is not All, Author or Content.
    """
    scope = parse_qtype(qtype)
    rows = await repo.search(filter_text, scope, limit)
    return SearchResponse(blogs=[post_to_response(*row) for row in rows], success=True)


@router.get(
    "/{post_id}",
    response_class=ORJSONResponse,
    response_model=PostEnvelope,
    summary="Get post by id",
    responses={
        404: {
            "description": "Not found",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "blog with given id doesnt exist",
                        "success": False,
                    },
                },
            },
        },
    },
    operation_id="blog_get_by_id",
)
async def get_blog(post_id: UUID, repo: PostRepoDep) -> PostEnvelope:
    """
    Get a post by primary key.

    Raises
    ------
    RecordNotFoundError
        If no post has the given id.
    """
    row = await repo.get_by_id(post_id)
    if not row:
        raise RecordNotFoundError(detail="blog with given id doesnt exist")
    return PostEnvelope(blog=post_to_response(*row))
