"""Post number counter model."""

from typing import cast

from sqlalchemy.orm import declared_attr
from sqlmodel import Field, SQLModel

POST_COUNTER_ID = 1


class PostCounterDB(SQLModel, table=True):
    """Single-row counter backing `PostDB.no`."""

    __tablename__ = cast("declared_attr[str]", "post_counter")

    id: int = Field(default=POST_COUNTER_ID, primary_key=True)
    count: int = Field(default=0, nullable=False)
