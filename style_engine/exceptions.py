"""Custom exceptions for the style selection engine."""

from __future__ import annotations


class StyleEngineError(Exception):
    """Base exception class for selection engine errors.

    Attributes:
        code (str): Error code for identifying the error type
        message (str): Descriptive error message
        details (dict): Additional error context and details
    """

    def __init__(self, message: str, code: str = "ENGINE_ERR", details: dict | None = None):
        """Initialize the base engine error.

        Args:
            message: Human-readable error description
            code: Error code for identification and handling
            details: Additional context about the error
        """
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """Format the error message with code and details."""
        error_msg = f"[{self.code}] {self.message}"
        if self.details:
            error_msg += f"\nDetails: {self.details}"
        return error_msg


# Contract violations
class InvariantError(StyleEngineError):
    """Raised when a caller breaks a contract the engine relies on.

    These are logic bugs upstream (usually in the static definition tables),
    not recoverable runtime conditions.
    """

    def __init__(self, message: str, code: str = "INVARIANT_VIOLATION", details: dict | None = None):
        super().__init__(message, code=code, details=details)


class EmptyCandidatesError(InvariantError):
    """Raised when a draw that must return an item is given no candidates."""

    def __init__(self, operation: str, details: dict | None = None):
        """Initialize empty candidates error.

        Args:
            operation: Name of the primitive that received the empty sequence
            details: Additional context about the call
        """
        message = f"{operation} called with an empty candidate sequence"
        super().__init__(message, code="EMPTY_CANDIDATES", details=details)


class SampleSizeError(InvariantError):
    """Raised when more unique items are requested than a sequence holds."""

    def __init__(self, requested: int, available: int, details: dict | None = None):
        message = f"Requested {requested} items but only {available} are available"
        merged = {"requested": requested, "available": available}
        merged.update(details or {})
        super().__init__(message, code="SAMPLE_SIZE", details=merged)


# Static data errors
class RegistryIntegrityError(StyleEngineError):
    """Raised when two registry entries share a canonical name or alias."""

    def __init__(self, violations: list[str], details: dict | None = None):
        """Initialize registry integrity error.

        Args:
            violations: Human-readable description of each collision
            details: Additional context about the registry
        """
        self.violations = list(violations)
        preview = "; ".join(self.violations[:5])
        more = f" (+{len(self.violations) - 5} more)" if len(self.violations) > 5 else ""
        message = f"Registry integrity check failed: {preview}{more}"
        super().__init__(message, code="REGISTRY_INTEGRITY", details=details)


class DefinitionError(StyleEngineError):
    """Raised when a selection definition violates its structural invariants."""

    def __init__(self, definition: str, reason: str, details: dict | None = None):
        message = f"Invalid selection definition '{definition}': {reason}"
        super().__init__(message, code="DEFINITION_ERR", details=details)


class TableLoadError(StyleEngineError):
    """Raised by the strict table loader when external tables cannot be used.

    Attributes:
        kind (str): One of ``missing``, ``parse``, ``schema``, ``integrity``
    """

    def __init__(self, kind: str, message: str, details: dict | None = None):
        self.kind = kind
        super().__init__(message, code="TABLE_LOAD", details=details)
