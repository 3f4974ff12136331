"""
Pydantic model for a user record.

The same model is used for request bodies, table items and response
bodies.  Name fields that were not sent stay ``None`` and are left out
of the stored item, so an absent field and an empty string remain
distinguishable after a round trip through the table.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, StrictStr


class User(BaseModel):
    email: StrictStr = Field(..., examples=["user@example.com"])
    first_name: Optional[StrictStr] = Field(None, examples=["Ada"])
    last_name: Optional[StrictStr] = Field(None, examples=["Lovelace"])

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> "User":
        """Build a user from a DynamoDB item."""
        return cls.model_validate(item)

    def to_item(self) -> Dict[str, Any]:
        """Item for ``put_item``; absent fields are not written."""
        return self.model_dump(exclude_none=True)
