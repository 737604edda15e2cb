"""
Exception hierarchy for the document Q&A application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class DocQAException(Exception):
    """Base exception for all document Q&A application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
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
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(DocQAException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        self.field = field
        super().__init__(message, details)


class NotFoundError(DocQAException):
    """Raised when a document, query or embedding set cannot be found."""

    def __init__(
        self,
        resource: str,
        identifier: str,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize not found error.

        Args:
            resource: Kind of missing resource (document, query, embedding_set)
            identifier: ID that was looked up
            message: Optional override for the default message
            details: Additional context
        """
        details = details or {}
        details["resource"] = resource
        details["id"] = identifier
        self.resource = resource
        self.identifier = identifier
        super().__init__(message or f"{resource} not found: {identifier}", details)


class UpstreamProviderError(DocQAException):
    """Raised when an embedding or generation provider call fails."""

    def __init__(
        self,
        message: str,
        stage: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize provider error.

        Args:
            message: Error message
            stage: Pipeline stage that called the provider (embedding, generation)
            details: Additional context
        """
        details = details or {}
        details["stage"] = stage
        self.stage = stage
        super().__init__(message, details)


class ProviderTimeoutError(UpstreamProviderError):
    """Raised when a provider call exceeds its timeout."""

    def __init__(
        self,
        stage: str,
        timeout_seconds: float,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details["timeout_seconds"] = timeout_seconds
        self.timeout_seconds = timeout_seconds
        super().__init__(
            f"{stage} provider call timed out after {timeout_seconds}s",
            stage,
            details,
        )


class StorageError(DocQAException):
    """Raised when a store operation fails."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize storage error.

        Args:
            message: Error message
            operation: Operation that failed (insert, load, save, ...)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        self.operation = operation
        super().__init__(message, details)


class ScoringError(DocQAException):
    """Raised when similarity scoring fails for any candidate."""

    pass


class DocumentProcessingError(DocQAException):
    """Base exception for document processing errors."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document processing error.

        Args:
            message: Error message
            file_path: Path of the document that failed
            details: Additional context
        """
        details = details or {}
        if file_path:
            details["file_path"] = file_path
        self.file_path = file_path
        super().__init__(message, details)


class ParsingError(DocumentProcessingError):
    """Raised when document text extraction fails."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        file_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize parsing error.

        Args:
            message: Error message
            file_path: Path of the document
            file_type: Type of file that failed parsing
            details: Additional context
        """
        details = details or {}
        if file_type:
            details["file_type"] = file_type
        super().__init__(message, file_path, details)
