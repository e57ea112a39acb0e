"""
Error model for ryu.

Every failure raised by a schema is a ValidationError. Configuration conflicts
found while chaining constraints use the ConfigurationError subclass so they
can be told apart from bad input.
"""

from __future__ import annotations

import traceback
from enum import IntEnum
from typing import Any

from .types import Path


class ErrorCode(IntEnum):
    """Numeric error codes carried by ValidationError."""

    VALIDATION = 1  # Input does not satisfy the schema
    CONFIGURATION = 2  # Schema was built with contradictory constraints


class ValidationError(Exception):
    """
    Structured validation failure.

    Attributes:
        code: ErrorCode.VALIDATION or ErrorCode.CONFIGURATION
        message: Human-readable description
        path: Location of the failing value, or None until a schema attaches it
        stack: Formatted traceback, filled at the safe_parse boundary
    """

    def __init__(
        self,
        message: str,
        path: Path | None = None,
        code: ErrorCode | int = ErrorCode.VALIDATION,
        stack: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.path = path
        self.code = ErrorCode(code)
        self.stack = stack

    def __str__(self) -> str:
        if self.path:
            return f"{'.'.join(str(p) for p in self.path)}: {self.message}"
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code={int(self.code)}, "
            f"message={self.message!r}, path={self.path!r})"
        )

    def attach_path(self, path: Path) -> None:
        """Set the path unless an inner schema already did."""
        if self.path is None:
            self.path = tuple(path)

    def capture_stack(self) -> None:
        """Record the traceback text if it has not been recorded yet."""
        if self.stack is None:
            self.stack = "".join(traceback.format_exception(self))

    def to_dict(self) -> dict[str, Any]:
        """Plain payload: {code, message, path, stack}."""
        return {
            "code": int(self.code),
            "message": self.message,
            "path": list(self.path) if self.path is not None else None,
            "stack": self.stack,
        }


class ConfigurationError(ValidationError):
    """Raised while building a schema with mutually exclusive constraints."""

    def __init__(self, message: str):
        super().__init__(message, path=(), code=ErrorCode.CONFIGURATION)
