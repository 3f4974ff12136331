import base64
import binascii
import json
import logging

import boto3

from users_api.config import Settings
from users_api.errors import Failure, UserServiceError
from users_api.logging_config import setup_logging
from users_api.responses import (
    METHOD_NOT_ALLOWED,
    api_response,
    error_response,
    failure_response,
)
from users_api.service import UserService
from users_api.store import UserTable

logger = logging.getLogger(__name__)

# Built on the first invocation and reused while the container is warm.
_service = None


def get_service():
    global _service
    if _service is None:
        settings = Settings()
        setup_logging(settings.log_level)
        if not settings.table_name:
            raise RuntimeError("TABLE_NAME is not set")
        dynamodb = boto3.resource(
            "dynamodb",
            region_name=settings.aws_region,
            endpoint_url=settings.dynamodb_endpoint_url,
        )
        table = dynamodb.Table(settings.table_name)
        _service = UserService(UserTable(table))
    return _service


def lambda_handler(event, context):
    return handle(event, get_service())


def handle(event, service):
    method = request_method(event)
    logger.info("%s request", method)
    try:
        if method == "GET":
            return get_users(event, service)
        if method == "POST":
            return create_user(event, service)
        if method == "PUT":
            return update_user(event, service)
        if method == "DELETE":
            return delete_user(event, service)
    except UserServiceError as err:
        return failure_response(err)
    return error_response(405, METHOD_NOT_ALLOWED)


def request_method(event):
    """HTTP method of a REST API (v1) or HTTP API (v2) event."""
    method = event.get("httpMethod")
    if not method:
        method = event.get("requestContext", {}).get("http", {}).get("method", "")
    return method.upper()


def query_param(event, name):
    params = event.get("queryStringParameters") or {}
    return params.get(name) or None


def parse_body(event):
    """Decode the JSON object in the request body.

    Anything that is not a JSON object is rejected here, before the
    service sees it.
    """
    body = event.get("body") or ""
    try:
        if event.get("isBase64Encoded"):
            body = base64.b64decode(body).decode("utf-8")
        payload = json.loads(body)
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.warning("Request body is not valid JSON")
        raise UserServiceError(Failure.INVALID_USER_DATA) from exc
    if not isinstance(payload, dict):
        logger.warning("Request body is not a JSON object")
        raise UserServiceError(Failure.INVALID_USER_DATA)
    return payload


def get_users(event, service):
    email = query_param(event, "email")
    if email is None:
        users = service.list_users()
        return api_response(200, [user.model_dump(exclude_none=True) for user in users])

    user = service.get_user(email)
    if user is None:
        return error_response(404, Failure.DOES_NOT_EXIST.message)
    return api_response(200, user.model_dump(exclude_none=True))


def create_user(event, service):
    user = service.create_user(parse_body(event))
    return api_response(201, user.model_dump(exclude_none=True))


def update_user(event, service):
    user = service.update_user(parse_body(event))
    return api_response(200, user.model_dump(exclude_none=True))


def delete_user(event, service):
    email = query_param(event, "email")
    if email is None:
        raise UserServiceError(Failure.INVALID_EMAIL)
    service.delete_user(email)
    return api_response(200, None)
