"""
utils/constants.py

Purpose: Centralized static values

- Field limits for user records
- Error messages returned by validation
- Service metadata

(Prevents hardcoding across the codebase)
"""

# ============================================================
# SERVICE
# ============================================================

SERVICE_NAME = "User CRUD Service"
SERVICE_VERSION = "1.0.0"

# ============================================================
# USER FIELDS
# ============================================================

MAX_EMAIL_LENGTH = 254

# ============================================================
# VALIDATION MESSAGES
# ============================================================

ERROR_NAME_REQUIRED = "name must be a non-empty string"
ERROR_EMAIL_INVALID = "email must be a valid email address"
ERROR_FIELD_NULL = "field may be omitted but not set to null"
