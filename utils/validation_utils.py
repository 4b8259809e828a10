"""
utils/validation_utils.py

Purpose: Input validation

- User name and email shape checks
- Document identifier checks
"""

import re

from bson import ObjectId

from utils.constants import MAX_EMAIL_LENGTH

# local@domain.tld with no whitespace and a single "@"
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def validate_name(name: str) -> bool:
    """
    Validates a user's display name.

    A name must contain at least one non-whitespace character.

    Args:
        name: Name string to validate

    Returns:
        True if valid, False otherwise
    """
    return bool(name) and bool(name.strip())


def validate_email(email: str) -> bool:
    """
    Validates basic email shape (local@domain.tld).

    Deliverability is not checked.

    Args:
        email: Email string to validate

    Returns:
        True if valid, False otherwise
    """
    if not email:
        return False

    email = email.strip()

    if len(email) > MAX_EMAIL_LENGTH:
        return False

    return EMAIL_PATTERN.match(email) is not None


def validate_object_id(value: str) -> bool:
    """Check that a path identifier can name a MongoDB document."""
    return bool(value) and ObjectId.is_valid(value)

