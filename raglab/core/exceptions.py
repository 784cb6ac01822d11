"""
Exception hierarchy for the raglab pipeline.

Failure kinds reaching callers of the EvaluationEngine: configuration,
embedding, storage, reranking and cancellation. All carry a message plus a details
dict for observability; the engine adds the failing stage to details.

Dependencies: None (pure domain layer)
System role: Centralized error taxonomy across the pipeline
"""

from typing import Any


class RagLabError(Exception):
    """Base exception for all raglab errors."""

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

    @property
    def stage(self) -> str | None:
        """Pipeline stage the error surfaced in, when known."""
        return self.details.get("stage")


class ConfigurationError(RagLabError):
    """Raised for invalid or incompatible configuration. Never retried."""

    def __init__(
        self,
        message: str,
        option: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            option: Configuration option that is invalid
            details: Additional context
        """
        details = details or {}
        if option:
            details["option"] = option
        super().__init__(message, details)


class EmbeddingError(RagLabError):
    """Raised when an embedding batch fails or comes back malformed."""

    def __init__(
        self,
        message: str,
        adapter: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize embedding error.

        Args:
            message: Error message
            adapter: Name of the adapter that failed
            details: Additional context
        """
        details = details or {}
        if adapter:
            details["adapter"] = adapter
        super().__init__(message, details)


class StorageError(RagLabError):
    """Raised when a storage backend is unavailable or a read/write fails."""

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
            operation: Operation that failed (put, query, scan, clear, count)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class RerankError(RagLabError):
    """Raised when a reranker call fails or its output cannot be parsed."""

    def __init__(
        self,
        message: str,
        reranker: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if reranker:
            details["reranker"] = reranker
        super().__init__(message, details)


class CancelledError(RagLabError):
    """
    Raised when a caller timeout or cancel signal stops a pipeline stage.

    Distinct from asyncio.CancelledError, which still propagates untouched
    when the surrounding task itself is cancelled.
    """

    def __init__(
        self,
        message: str,
        stage: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize cancellation error.

        Args:
            message: Error message
            stage: Stage that was interrupted
            details: Additional context
        """
        details = details or {}
        if stage:
            details["stage"] = stage
        super().__init__(message, details)
