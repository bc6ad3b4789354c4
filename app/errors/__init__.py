from app.errors.auth import (
    BlogOwnershipError,
    InvalidCredentialsError,
    InvalidTokenError,
    UserAuthenticationError,
    auth_exception_handler,
)
from app.errors.base import BaseAppError, create_exception_handler, create_http_exception_handler
from app.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
    RecordNotFoundError,
    database_exception_handler,
)
from app.errors.password_hasher import (
    PasswordHashingError,
    password_hashing_exception_handler,
)
from app.errors.validation import (
    AppValidationError,
    BlogValidationError,
    MalformattedIdError,
    UserValidationError,
    app_validation_exception_handler,
    validation_exception_handler,
)

__all__ = [
    "AppValidationError",
    "BaseAppError",
    "BlogOwnershipError",
    "BlogValidationError",
    "DatabaseConnectionError",
    "DatabaseError",
    "DuplicateEntryError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "MalformattedIdError",
    "PasswordHashingError",
    "RecordNotFoundError",
    "UserAuthenticationError",
    "UserValidationError",
    "app_validation_exception_handler",
    "auth_exception_handler",
    "create_exception_handler",
    "create_http_exception_handler",
    "database_exception_handler",
    "password_hashing_exception_handler",
    "validation_exception_handler",
]
