"""
Storefront API - Custom Exception Hierarchy
============================================

What:  Application-specific exceptions raised by services and repositories.
Why:   Each exception type maps to exactly one HTTP status code in the global
       handlers registered by main.py, so routes never build error responses.
How:   Every exception carries a client-safe message and an optional context
       dict. Context is logged (or returned as `details` for client errors)
       but never used to leak internal state.

Exception Hierarchy:
    StorefrontError (base)
    ├── ValidationError  → 400 Bad Request (client can fix the payload)
    └── DatabaseError    → 500 Internal Server Error (persistence failed)
"""

from typing import Any, Dict, List, Optional


class StorefrontError(Exception):
    """
    Base exception for all Storefront application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(StorefrontError):
    """
    Raised when a product payload is missing required data.

    HTTP:    400 Bad Request

    The check runs before any persistence attempt, so a ValidationError
    guarantees no row was written.

    Example response:
        {
            "error": "validation_error",
            "message": "Product title, description, and price are required fields.",
            "details": {"missing_fields": ["title"]}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        missing_fields: Optional[List[str]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if missing_fields:
            ctx["missing_fields"] = list(missing_fields)
        super().__init__(message=message, context=ctx)
        self.missing_fields = list(missing_fields or [])


class DatabaseError(StorefrontError):
    """
    Raised when the persistence layer fails.

    When:    Connection lost, constraint violation, schema mismatch.
    HTTP:    500 Internal Server Error

    Not retried. The client always receives a generic message; the driver
    error is kept in `context` for the server log only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
