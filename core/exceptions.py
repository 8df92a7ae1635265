"""
Custom exceptions for the data access layer with structured error context.

"Not found" is never an exception here: lookups return ``None`` and the HTTP
layer turns that into a 404. The exceptions below cover statements that
actually failed, and they always chain the driver exception that caused them.

Exception Hierarchy:
    StorefrontException (base)
    └── DataAccessError
        ├── ConstraintViolationError
        └── ResultShapeError
"""

from typing import Optional, Dict, Any
from datetime import datetime


class StorefrontException(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message: Human-readable error message
        context: Additional context information (statement, parameters, etc.)
        original_exception: The original exception that was caught (if any)
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        self.message = message
        self.context = context or {}
        self.original_exception = original_exception
        self.timestamp = datetime.utcnow()

        self.context["error_timestamp"] = self.timestamp.isoformat()

        super().__init__(message)
        if original_exception:
            self.__cause__ = original_exception

    def __str__(self) -> str:
        """Format error message with context."""
        base_msg = f"{self.__class__.__name__}: {self.message}"

        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg += f" | Context: {context_str}"

        if self.original_exception:
            base_msg += f" | Caused by: {type(self.original_exception).__name__}: {str(self.original_exception)}"

        return base_msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
            "original_error": str(self.original_exception) if self.original_exception else None
        }


class DataAccessError(StorefrontException):
    """
    Raised when a SQL statement fails to execute.

    Context should include:
        - statement: The SQL text (first line, whitespace collapsed)
        - parameters: Names of the bound parameters (never their values)
    """
    pass


class ConstraintViolationError(DataAccessError):
    """
    Raised when storage rejects a write (unique email, foreign key, NOT NULL).

    Mapped to the same generic failure response as any other DataAccessError.
    """
    pass


class ResultShapeError(DataAccessError):
    """
    Raised when a result does not have the expected number of rows,
    e.g. ``single()`` on an empty result or ``optional()`` on two rows.
    """
    pass
