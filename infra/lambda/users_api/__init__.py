"""CRUD service for user records stored in a DynamoDB table."""

from .errors import ErrorKind, Failure, UserServiceError
from .models import User
from .service import UserService
from .store import UserTable
from .validators import is_email

__all__ = [
    "ErrorKind",
    "Failure",
    "User",
    "UserService",
    "UserServiceError",
    "UserTable",
    "is_email",
]
