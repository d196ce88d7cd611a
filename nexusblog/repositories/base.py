"""Base repository for database operations."""

from logging import getLogger
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from nexusblog.configs import file_logger
from nexusblog.errors.database import DatabaseError, DuplicateEntryError, TransactionError

logger = file_logger(getLogger(__name__))


class BaseRepository[ModelT: SQLModel]:
    """
    Shared plumbing for the entity repositories.

    Writes go through `_save`, which commits before returning: a caller that
    gets a record back can rely on it being durable, and a failure leaves
    nothing behind.

    Attributes:
        model: The SQLModel database model type.
        id_field: The name of the primary key field (default: "id").
    """

    model: type[ModelT]
    id_field: str = "id"

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def _get(self, record_id: UUID) -> ModelT | None:
        id_column = getattr(self.model, self.id_field)
        result = await self.session.execute(select(self.model).where(id_column == record_id))
        return result.scalar_one_or_none()

    async def _save(self, record: ModelT) -> ModelT:
        """
        Add a record, flush, refresh and commit the running transaction.

        Args:
            record: Record to persist

        Returns:
            ModelT: Refreshed record

        Raises:
            DuplicateEntryError: If a unique constraint is violated
            DatabaseError: For other integrity errors
            TransactionError: For any other database failure
        """
        try:
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            if "unique" in error_msg.lower() or "duplicate" in error_msg.lower():
                raise DuplicateEntryError(detail=error_msg) from e
            raise DatabaseError(detail=f"Database integrity error: {error_msg}") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.exception(f"Failed to save {self.model.__name__}")
            raise TransactionError from e
        return record
