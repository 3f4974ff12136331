"""
Failure taxonomy for the users service.

``ErrorKind`` says what class of thing went wrong and is what the
boundary maps to a status code.  ``Failure`` names each concrete
failure together with the fixed message returned to clients.
"""

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    ALREADY_EXISTS = "already_exists"
    DOES_NOT_EXIST = "does_not_exist"
    SERIALIZATION_ERROR = "serialization_error"
    DESERIALIZATION_ERROR = "deserialization_error"
    STORAGE_READ_ERROR = "storage_read_error"
    STORAGE_WRITE_ERROR = "storage_write_error"
    STORAGE_DELETE_ERROR = "storage_delete_error"


class Failure(Enum):
    INVALID_USER_DATA = (ErrorKind.INVALID_INPUT, "invalid user data")
    INVALID_EMAIL = (ErrorKind.INVALID_INPUT, "invalid email")
    ALREADY_EXISTS = (ErrorKind.ALREADY_EXISTS, "user already exists")
    DOES_NOT_EXIST = (ErrorKind.DOES_NOT_EXIST, "user does not exist")
    COULD_NOT_MARSHAL = (ErrorKind.SERIALIZATION_ERROR, "could not marshal")
    FAILED_TO_UNMARSHAL = (ErrorKind.DESERIALIZATION_ERROR, "failed to unmarshal record")
    FAILED_TO_GET_USER = (ErrorKind.STORAGE_READ_ERROR, "failed to get user")
    FAILED_TO_GET_USERS = (ErrorKind.STORAGE_READ_ERROR, "failed to get users")
    COULD_NOT_PUT = (ErrorKind.STORAGE_WRITE_ERROR, "could not put")
    COULD_NOT_DELETE = (ErrorKind.STORAGE_DELETE_ERROR, "could not delete")

    def __init__(self, kind: ErrorKind, message: str):
        self.kind = kind
        self.message = message


class UserServiceError(Exception):
    """Raised by ``UserService`` operations; carries a ``Failure``."""

    def __init__(self, failure: Failure):
        super().__init__(failure.message)
        self.failure = failure

    @property
    def kind(self) -> ErrorKind:
        return self.failure.kind

    @property
    def message(self) -> str:
        return self.failure.message
