"""
Custom exceptions for the diagram creator.
"""
from typing import Optional, Dict, Any, List


class DiagramCreatorError(Exception):
    """Base exception for all diagram creator errors.

    Provides context preservation and descriptive error messages.
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        """Initialize the exception with message and optional context.

        Args:
            message: Descriptive error message
            context: Optional dictionary containing error context information
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """Return formatted error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (Context: {context_str})"
        return self.message


class InvalidDiagramDataError(DiagramCreatorError):
    """Raised when diagram data fails validation.

    The caller can fix the input and retry. All collected validation
    messages are kept on ``errors`` and joined into the message for display.
    """

    def __init__(self, errors: List[str]):
        """Initialize invalid diagram data error.

        Args:
            errors: Validation messages in the order they were collected
        """
        self.errors = list(errors)
        super().__init__(f"Invalid diagram data: {', '.join(self.errors)}")


class UnsupportedDiagramTypeError(DiagramCreatorError):
    """Raised when a declared diagram type has no definition generator.

    ``timeline`` and ``gitGraph`` are part of the type enumeration but
    cannot be generated from structured content; supply a raw definition
    for them instead.
    """

    def __init__(self, diagram_type: str):
        """Initialize unsupported diagram type error.

        Args:
            diagram_type: The diagram type tag that was requested
        """
        self.diagram_type = diagram_type
        super().__init__(
            f"Diagram type '{diagram_type}' cannot be generated from structured content",
            {"diagram_type": diagram_type},
        )
