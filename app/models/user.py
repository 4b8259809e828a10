"""
app/models/user.py

Purpose: User document model

- Persisted shape: {_id: ObjectId, name: str, email: str}
- API representation with the ObjectId exposed as a hex string "id"
- Conversion from raw MongoDB documents
"""

from pydantic import BaseModel, Field
from typing import Any, Dict


class User(BaseModel):
    """
    A stored user as returned to API callers.
    """
    id: str = Field(..., description="Store-assigned identifier (ObjectId hex)")
    name: str = Field(..., description="User's display name")
    email: str = Field(..., description="User's email address")

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "User":
        """
        Builds a User from a MongoDB document.

        Args:
            document: Raw document including "_id"

        Returns:
            User with the identifier rendered as a string
        """
        return cls(
            id=str(document["_id"]),
            name=document["name"],
            email=document["email"],
        )

    class Config:
        json_schema_extra = {
            "example": {
                "id": "65f0c2a9e4b0a1b2c3d4e5f6",
                "name": "Ada Lovelace",
                "email": "ada@example.com"
            }
        }
