"""
Folio Backend - Custom Exception Hierarchy
===========================================

What:  Defines application-specific exceptions for different error scenarios.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return `{"message": ...}` JSON bodies with the matching HTTP status.
Who:   Raised by services and the record store; caught by global handlers.

Exception Hierarchy:
    FolioError (base)
    ├── ValidationError          → 400 Bad Request (client can fix)
    ├── NotFoundError            → 404 Not Found
    ├── DatabaseError            → 500 Internal Server Error
    │   └── DuplicateRecordError → 500 Internal Server Error (unique conflict)
    ├── MediaUploadError         → 500 Internal Server Error
    └── NotificationError        → 500 Internal Server Error

    Clients only see three kinds of failure: validation (400), not found (404)
    and a generic "An error occurred" (500). Everything in `context` stays in
    the server log.
"""

from typing import Any, Dict, Optional


class FolioError(Exception):
    """
    Base exception for all Folio application errors.

    Attributes:
        message:  User-facing error description
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(FolioError):
    """
    Raised when client input fails validation.

    When:    Missing required fields, values outside an allowed set, oversized uploads.
    HTTP:    400 Bad Request
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


class NotFoundError(FolioError):
    """
    Raised when a requested record does not exist.

    When:    Lookup by id or slug that resolves to nothing.
    HTTP:    404 Not Found

    Example:
        NotFoundError(resource="Blog post", resource_id="hello-world")
        → message "Blog post not found"
    """

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)
        self.resource = resource


class DatabaseError(FolioError):
    """
    Raised when database operations fail unexpectedly.

    HTTP:    500 Internal Server Error
    The client always gets the generic message; the SQL error stays in the log.
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DuplicateRecordError(DatabaseError):
    """
    Raised when an insert or update violates a unique constraint
    (a second blog post whose title produces an existing slug).
    """

    def __init__(
        self,
        resource: str = "Record",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=f"{resource} conflicts with an existing record", context=context)
        self.resource = resource


class MediaUploadError(FolioError):
    """
    Raised when the media host (Cloudinary) rejects or fails an upload.

    HTTP:    500 Internal Server Error
    """

    def __init__(
        self,
        message: str = "Image upload failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotificationError(FolioError):
    """
    Raised when the contact notification email cannot be delivered.

    HTTP:    500 Internal Server Error
    The contact record is already stored when this is raised.
    """

    def __init__(
        self,
        message: str = "Notification email could not be sent",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
