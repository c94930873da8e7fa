"""
People API · Custom Exception Hierarchy
=========================================

What:  Application-specific exceptions for the few ways a request can fail.
Why:   Routes raise, global handlers translate. Handlers return the fixed
       plain-text bodies the API promises and keep store details in the log.
How:   Each exception carries a message and an optional context dict.
       Handlers registered in main.py map them to HTTP responses.
Who:   Raised by services and models; caught by global handlers.

Exception Hierarchy:
    PeopleApiError (base)
    ├── ValidationError      → raised before any store write
    ├── NotFoundError        → 404 Not Found (plain text)
    └── StoreFailureError    → 500 Internal Server Error (plain text)
"""

from typing import Any, Dict, Optional


class PeopleApiError(Exception):
    """
    Base exception for all People API errors.

    Attributes:
        message:  Error description. Safe to return only for NotFoundError.
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(PeopleApiError):
    """
    Raised when a Person payload breaks a field constraint.

    What:    Missing name or age, negative or non-integer age, a
             favoriteFoods value that is not a list of strings.
    When:    Inside new_person(), before the store sees the document.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(PeopleApiError):
    """
    Raised when a targeted single-record operation matched nothing.

    What:    Lookup by id or findOne returned None, or a deletion removed
             zero documents.
    HTTP:    404 Not Found, body is `message` as plain text.

    List queries never raise this; they return an empty array instead.
    """

    def __init__(
        self,
        message: str = "Person not found",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class StoreFailureError(PeopleApiError):
    """
    Raised when a document store operation fails.

    What:    Connectivity loss, duplicate email, malformed ObjectId, or the
             store never having connected.
    HTTP:    500 Internal Server Error with a fixed body.

    Security Note:
        The driver error is logged with the operation name and never
        returned to the API consumer.
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
