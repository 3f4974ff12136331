"""
Thin wrapper over the boto3 DynamoDB ``Table`` holding user items.

The table is injected so the service can run against a fake in tests.
Errors raised by boto3 (``ClientError``, ``BotoCoreError``) are not
caught here; ``UserService`` decides what each one means.
"""

import logging
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

KEY = "email"


class UserTable:
    def __init__(self, table):
        self.table = table

    def get(self, email: str) -> Optional[Dict[str, Any]]:
        response = self.table.get_item(Key={KEY: email})
        return response.get("Item")

    def scan(self) -> List[Dict[str, Any]]:
        """Return every item, following ``LastEvaluatedKey`` across pages."""
        response = self.table.scan()
        items = list(response.get("Items", []))
        while "LastEvaluatedKey" in response:
            logger.debug("Scan continues from %s", response["LastEvaluatedKey"])
            response = self.table.scan(ExclusiveStartKey=response["LastEvaluatedKey"])
            items.extend(response.get("Items", []))
        return items

    def put(self, item: Dict[str, Any]) -> None:
        self.table.put_item(Item=item)

    def delete(self, email: str) -> None:
        # DynamoDB reports success for keys that are not present.
        self.table.delete_item(Key={KEY: email})
