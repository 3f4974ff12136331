"""
Business logic for users.

``UserService`` validates request payloads and performs one table
operation per call.  Every failure is raised as ``UserServiceError``
with a ``Failure`` member; the boundary turns it into a response.
"""

import logging
from typing import Any, Dict, List, Optional

from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from .errors import Failure, UserServiceError
from .models import User
from .store import UserTable
from .validators import is_email

logger = logging.getLogger(__name__)

STORE_ERRORS = (ClientError, BotoCoreError)


class UserService:
    def __init__(self, table: UserTable):
        self.table = table

    def create_user(self, payload: Dict[str, Any]) -> User:
        user = self._parse(payload)
        if not is_email(user.email):
            logger.warning("Rejected user with invalid email %r", user.email)
            raise UserServiceError(Failure.INVALID_EMAIL)

        logger.info("Creating user %s", user.email)
        if self._exists(user.email):
            logger.warning("User %s already exists", user.email)
            raise UserServiceError(Failure.ALREADY_EXISTS)

        self._save(user)
        return user

    def get_user(self, email: str) -> Optional[User]:
        """Return the user stored under ``email``, or None if there is none."""
        logger.info("Fetching user %s", email)
        try:
            item = self.table.get(email)
        except STORE_ERRORS as exc:
            logger.exception("Failed to get user %s", email)
            raise UserServiceError(Failure.FAILED_TO_GET_USER) from exc
        if item is None:
            return None
        return self._load(item)

    def list_users(self) -> List[User]:
        logger.info("Listing users")
        try:
            items = self.table.scan()
        except STORE_ERRORS as exc:
            logger.exception("Failed to scan users")
            raise UserServiceError(Failure.FAILED_TO_GET_USERS) from exc
        return [self._load(item) for item in items]

    def update_user(self, payload: Dict[str, Any]) -> User:
        """Overwrite an existing user.

        The email format is not re-checked: only a user that already
        exists can be updated, and it passed the check on creation.
        """
        user = self._parse(payload)
        logger.info("Updating user %s", user.email)
        if not self._exists(user.email):
            logger.warning("User %s does not exist", user.email)
            raise UserServiceError(Failure.DOES_NOT_EXIST)

        self._save(user)
        return user

    def delete_user(self, email: str) -> None:
        logger.info("Deleting user %s", email)
        try:
            self.table.delete(email)
        except STORE_ERRORS as exc:
            logger.exception("Failed to delete user %s", email)
            raise UserServiceError(Failure.COULD_NOT_DELETE) from exc

    def _parse(self, payload: Dict[str, Any]) -> User:
        try:
            return User.model_validate(payload)
        except ValidationError as exc:
            logger.warning("Invalid user data: %s", exc.errors(include_input=False))
            raise UserServiceError(Failure.INVALID_USER_DATA) from exc

    def _load(self, item: Dict[str, Any]) -> User:
        try:
            return User.from_item(item)
        except ValidationError as exc:
            logger.error("Stored item does not match the user schema: %s", exc.errors(include_input=False))
            raise UserServiceError(Failure.FAILED_TO_UNMARSHAL) from exc

    def _exists(self, email: str) -> bool:
        try:
            item = self.table.get(email)
        except STORE_ERRORS as exc:
            logger.exception("Failed to get user %s", email)
            raise UserServiceError(Failure.FAILED_TO_GET_USER) from exc
        return bool(item and item.get("email"))

    def _save(self, user: User) -> None:
        try:
            item = user.to_item()
        except (TypeError, ValueError) as exc:
            logger.exception("Could not marshal user %s", user.email)
            raise UserServiceError(Failure.COULD_NOT_MARSHAL) from exc
        try:
            self.table.put(item)
        except STORE_ERRORS as exc:
            logger.exception("Failed to put user %s", user.email)
            raise UserServiceError(Failure.COULD_NOT_PUT) from exc
