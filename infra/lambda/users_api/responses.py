"""Build API Gateway proxy responses."""

import json
from typing import Any, Dict

from .errors import ErrorKind, UserServiceError

METHOD_NOT_ALLOWED = "method not allowed"

STATUS_BY_KIND = {
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.ALREADY_EXISTS: 409,
    ErrorKind.DOES_NOT_EXIST: 409,
    ErrorKind.SERIALIZATION_ERROR: 500,
    ErrorKind.DESERIALIZATION_ERROR: 500,
    ErrorKind.STORAGE_READ_ERROR: 500,
    ErrorKind.STORAGE_WRITE_ERROR: 500,
    ErrorKind.STORAGE_DELETE_ERROR: 500,
}


def status_for(kind: ErrorKind) -> int:
    return STATUS_BY_KIND.get(kind, 500)


def api_response(status: int, body: Any) -> Dict[str, Any]:
    """Wrap ``body`` as JSON with the given status code.

    A body that cannot be serialized raises ``TypeError``; there is no
    response left to send at that point, so it is not handled here.
    """
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def error_response(status: int, message: str) -> Dict[str, Any]:
    return api_response(status, {"message": message})


def failure_response(err: UserServiceError) -> Dict[str, Any]:
    return error_response(status_for(err.kind), err.message)
