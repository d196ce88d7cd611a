"""Post repository for database operations."""

from logging import getLogger
from uuid import UUID

from sqlalchemy import Select, desc, or_, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql.expression import ColumnElement
from sqlmodel import col

from nexusblog.configs import file_logger
from nexusblog.errors.database import TransactionError
from nexusblog.models import POST_COUNTER_ID, PostCounterDB, PostDB, UserDB
from nexusblog.protocols import PostRow
from nexusblog.repositories.base import BaseRepository
from nexusblog.schemas.blog import PostCreate, PostUpdate, QType

logger = file_logger(getLogger(__name__))


def _with_author() -> Select:
    """Select posts together with their author's name."""
    return select(PostDB, col(UserDB.name)).outerjoin(
        UserDB,
        col(PostDB.author_id) == col(UserDB.id),
    )


def search_clause(filter_text: str, qtype: QType) -> ColumnElement[bool]:
    """
    Build the WHERE clause for a post search.

    `%` and `_` in `filter_text` are escaped, so matching is plain substring
    containment.

    Args:
        filter_text: Substring to look for
        qtype: Which fields the substring is matched against

    Returns:
        ColumnElement[bool]: Clause to pass to `Select.where`
    """
    in_post = or_(
        col(PostDB.title).contains(filter_text, autoescape=True),
        col(PostDB.content).contains(filter_text, autoescape=True),
    )
    in_author = or_(
        col(UserDB.name).contains(filter_text, autoescape=True),
        col(UserDB.email).contains(filter_text, autoescape=True),
    )

    match qtype:
        case QType.AUTHOR:
            return in_author
        case QType.CONTENT:
            return in_post
        case _:
            return or_(in_post, in_author)


class SqlPostRepository(BaseRepository[PostDB]):
    """
    `PostRepository` implementation over SQLModel.

    Reads return `(PostDB, author_name)` rows; route handlers turn them into
    response models.
    """

    model = PostDB

    async def create(self, post: PostCreate, author_id: UUID) -> PostDB:
        """
        Create a post with the next sequential number.

        The counter increment and the insert share one transaction, committed
        by `_save`. Concurrent creators serialise on the counter row, so every
        post gets a distinct number.

        Args:
            post: Title and content
            author_id: Authenticated author

        Returns:
            PostDB: Created post, `no` included

        Raises:
            TransactionError: If the counter row is missing or the write fails
        """
        try:
            result = await self.session.execute(
                update(PostCounterDB)
                .where(col(PostCounterDB.id) == POST_COUNTER_ID)
                .values(count=col(PostCounterDB.count) + 1)
                .returning(col(PostCounterDB.count)),
            )
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.exception("Failed to increment post counter")
            raise TransactionError from e

        no = result.scalar_one_or_none()
        if no is None:
            await self.session.rollback()
            raise TransactionError(detail="Post counter is not initialised")

        db_post = PostDB(no=no, title=post.title, content=post.content, author_id=author_id)
        db_post = await self._save(db_post)
        logger.info(f"Post {db_post.id} created with no {db_post.no}")
        return db_post

    async def update(self, post_update: PostUpdate) -> PostDB | None:
        """
        Merge the supplied fields into the stored post.

        Args:
            post_update: Post id plus the fields to change

        Returns:
            PostDB | None: Updated post, None if it does not exist
        """
        db_post = await self._get(post_update.id)
        if not db_post:
            return None

        update_data = post_update.model_dump(
            exclude_unset=True,
            exclude_none=True,
            exclude={"id"},
        )
        for key, value in update_data.items():
            setattr(db_post, key, value)

        return await self._save(db_post)

    async def get_by_id(self, post_id: UUID) -> PostRow | None:
        result = await self.session.execute(
            _with_author().where(col(PostDB.id) == post_id),
        )
        row = result.one_or_none()
        return (row[0], row[1]) if row else None

    async def get_by_no(self, no: int) -> PostRow | None:
        result = await self.session.execute(
            _with_author().where(col(PostDB.no) == no),
        )
        row = result.one_or_none()
        return (row[0], row[1]) if row else None

    async def list_recent(self, limit: int) -> list[PostRow]:
        """
        Get the newest posts, highest number first.

        Args:
            limit: Maximum number of posts

        Returns:
            list[PostRow]: Posts with author names
        """
        result = await self.session.execute(
            _with_author().order_by(desc(col(PostDB.no))).limit(limit),
        )
        return [(post, name) for post, name in result.all()]

    async def search(self, filter_text: str, qtype: QType, limit: int) -> list[PostRow]:
        """
        Search posts by substring, scoped by `qtype`.

        Args:
            filter_text: Substring to look for
            qtype: All, Author or Content
            limit: Maximum number of posts

        Returns:
            list[PostRow]: Matching posts with author names
        """
        query = (
            _with_author()
            .where(search_clause(filter_text, qtype))
            .order_by(desc(col(PostDB.no)))
            .limit(limit)
        )
        result = await self.session.execute(query)
        posts = [(post, name) for post, name in result.all()]
        logger.info(f"Found {len(posts)} posts for {qtype} search")
        return posts
