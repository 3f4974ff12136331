# tests/conftest.py
import pytest
from botocore.exceptions import ClientError

from users_api.service import UserService
from users_api.store import UserTable


class FakeTable:
    """In-memory stand-in for a boto3 DynamoDB ``Table`` keyed by email.

    Operation names added to ``failing`` raise ``ClientError`` the way
    boto3 does when DynamoDB rejects a call.
    """

    def __init__(self, page_size=None):
        self.items = {}
        self.failing = set()
        self.page_size = page_size
        self.calls = []

    def _call(self, operation):
        self.calls.append(operation)
        if operation in self.failing:
            raise ClientError(
                {"Error": {"Code": "InternalServerError", "Message": "boom"}},
                operation,
            )

    def get_item(self, Key):
        self._call("GetItem")
        item = self.items.get(Key["email"])
        if item is None:
            return {}
        return {"Item": dict(item)}

    def scan(self, ExclusiveStartKey=None):
        self._call("Scan")
        keys = sorted(self.items)
        if ExclusiveStartKey is not None:
            keys = [k for k in keys if k > ExclusiveStartKey["email"]]
        response = {}
        if self.page_size is not None and len(keys) > self.page_size:
            keys = keys[: self.page_size]
            response["LastEvaluatedKey"] = {"email": keys[-1]}
        response["Items"] = [dict(self.items[k]) for k in keys]
        return response

    def put_item(self, Item):
        self._call("PutItem")
        self.items[Item["email"]] = dict(Item)
        return {}

    def delete_item(self, Key):
        self._call("DeleteItem")
        self.items.pop(Key["email"], None)
        return {}


@pytest.fixture
def fake_table():
    return FakeTable()


@pytest.fixture
def service(fake_table):
    return UserService(UserTable(fake_table))
