"""
app/schemas/user.py

Purpose: User request payload schemas

- Validates create and partial-update bodies at the HTTP boundary
- Delegates field checks to utils.validation_utils
- Produces the field set handed to the repository
"""

from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, Optional

from utils.constants import (
    ERROR_EMAIL_INVALID,
    ERROR_FIELD_NULL,
    ERROR_NAME_REQUIRED,
)
from utils.validation_utils import validate_email, validate_name


def check_name(value: str) -> str:
    """Validate a name, raising ValueError when blank. Stored as sent."""
    if not validate_name(value):
        raise ValueError(ERROR_NAME_REQUIRED)
    return value


def check_email(value: str) -> str:
    """Validate an email, raising ValueError when malformed. Stored as sent."""
    if not validate_email(value):
        raise ValueError(ERROR_EMAIL_INVALID)
    return value


class UserCreate(BaseModel):
    """
    Body of POST /user.
    """
    name: str = Field(..., description="User's display name")
    email: str = Field(..., description="User's email address")

    @field_validator("name")
    @classmethod
    def validate_name_field(cls, v):
        return check_name(v)

    @field_validator("email")
    @classmethod
    def validate_email_field(cls, v):
        return check_email(v)

    def to_document(self) -> Dict[str, Any]:
        """Fields to insert as a new document."""
        return {"name": self.name, "email": self.email}

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Ada Lovelace",
                "email": "ada@example.com"
            }
        }


class UserUpdate(BaseModel):
    """
    Body of PATCH /user/{id}. Every field is optional; omitted fields are
    left untouched.
    """
    name: Optional[str] = Field(default=None, description="New display name")
    email: Optional[str] = Field(default=None, description="New email address")

    @field_validator("name")
    @classmethod
    def validate_name_field(cls, v):
        if v is None:
            raise ValueError(ERROR_FIELD_NULL)
        return check_name(v)

    @field_validator("email")
    @classmethod
    def validate_email_field(cls, v):
        if v is None:
            raise ValueError(ERROR_FIELD_NULL)
        return check_email(v)

    def to_update(self) -> Dict[str, Any]:
        """Only the fields present in the request body."""
        return self.model_dump(exclude_unset=True)

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Ada King"
            }
        }
