from nexusblog.errors.auth import (
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    PasswordHashingError,
    UserAuthenticationError,
    auth_exception_handler,
)
from nexusblog.errors.base import BaseAppError, create_exception_handler
from nexusblog.errors.database import (
    DatabaseError,
    DatabaseInitializationError,
    DuplicateEntryError,
    RecordNotFoundError,
    TransactionError,
    database_exception_handler,
    sqlalchemy_exception_handler,
)
from nexusblog.errors.validation import (
    InvalidQueryTypeError,
    query_exception_handler,
    validation_exception_handler,
)

__all__ = [
    "BaseAppError",
    "create_exception_handler",
    "UserAuthenticationError",
    "MissingTokenError",
    "InvalidTokenError",
    "InvalidCredentialsError",
    "PasswordHashingError",
    "auth_exception_handler",
    "DatabaseError",
    "DatabaseInitializationError",
    "DuplicateEntryError",
    "RecordNotFoundError",
    "TransactionError",
    "database_exception_handler",
    "sqlalchemy_exception_handler",
    "InvalidQueryTypeError",
    "query_exception_handler",
    "validation_exception_handler",
]
