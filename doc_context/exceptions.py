"""
Exception hierarchy for the document preparation pipeline.

Validation problems are not exceptions: they are reported as messages in a
ValidationResult. Extraction failures are raised by extractors and recovered
per file by the processor. Only invalid arguments reach the caller.
"""

from typing import Any, Dict, Optional


class DocumentContextError(Exception):
    """Base exception for all pipeline errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ExtractionError(DocumentContextError):
    """Raised when the text of a single file cannot be extracted."""

    def __init__(self, filename: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.filename = filename
        super().__init__(message, details)

    def __str__(self) -> str:
        # Shown to end users, details stay in the logs
        return self.message


class InvalidArgumentError(DocumentContextError, ValueError):
    """Raised for caller bugs such as a non-positive chunk size."""
