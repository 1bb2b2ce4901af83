"""
Palette Picker Backend — Custom Exception Hierarchy
=====================================================

What:  Application-specific exceptions for the three failure kinds a
       handler can hit.
How:   Each exception carries a client-facing message and an optional
       context dict. Global exception handlers (registered in main.py)
       translate them into `{"error": ...}` JSON bodies.
Who:   Raised by the request validator and the services.

Exception Hierarchy:
    PalettePickerError (base)
    ├── ValidationError   → 422 Unprocessable Entity
    ├── NotFoundError     → 404 Not Found
    └── DatabaseError     → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class PalettePickerError(Exception):
    """
    Base exception for all Palette Picker application errors.

    Attributes:
        message:  Client-facing error description
        context:  Additional debug info (logged, not returned)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(PalettePickerError):
    """
    Raised when a submitted body is missing a required field or carries a
    value of the wrong type.

    HTTP:    422 Unprocessable Entity

    Example response:
        {
            "error": "Expected format: { project_name: <String> }. "
                     "You are missing a \\"project_name\\" property."
        }
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


class NotFoundError(PalettePickerError):
    """
    Raised when a lookup or delete matched no rows.

    HTTP:    404 Not Found

    The message follows the `Could not find <resource> with id <id>` form
    clients already match on.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"Could not find {resource}"
        if resource_id is not None:
            message = f"Could not find {resource} with id {resource_id}"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(PalettePickerError):
    """
    Raised when a database statement fails.

    HTTP:    500 Internal Server Error

    The response body echoes the underlying driver error (class name and
    message) under "error", as API consumers of this service expect.
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        original: Optional[BaseException] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if original is not None:
            ctx["original_error"] = type(original).__name__
        super().__init__(message=message, context=ctx)
        self.original = original

    def to_payload(self) -> Dict[str, str]:
        """Serializable description of the underlying error."""
        if self.original is None:
            return {"name": type(self).__name__, "message": self.message}
        # SQLAlchemy wraps DBAPI errors; report the driver's own error.
        source = getattr(self.original, "orig", None) or self.original
        return {"name": type(source).__name__, "message": str(source)}
