# showcase/domain/core/exceptions.py
from typing import Any, Dict, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class UnsupportedOperationError(DomainException):
    """Raised when an operation is not supported by the receiver."""

    def __init__(self, operation: str, message: Optional[str] = None):
        super().__init__(
            message or f"{operation} not supported",
            "UNSUPPORTED_OPERATION",
            {"operation": operation},
        )
        self.operation = operation


class IteratorExhaustedError(DomainException):
    """Raised when a traversal is advanced past its last element."""

    def __init__(self, position: int):
        super().__init__(
            f"No element at position {position}",
            "ITERATOR_EXHAUSTED",
            {"position": position},
        )
        self.position = position


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""

    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message, "CONFIGURATION_ERROR", {"missing_fields": missing_fields or []})
        self.missing_fields = missing_fields or []


class CapacityExceededError(DomainException):
    """Raised when a fixed-capacity collection is given too many elements."""

    def __init__(self, resource_type: str, current: int, maximum: int):
        super().__init__(
            f"Cannot exceed {resource_type} capacity: {current}/{maximum}",
            "CAPACITY_EXCEEDED",
            {"resource_type": resource_type, "current": current, "maximum": maximum},
        )
        self.resource_type = resource_type
        self.current = current
        self.maximum = maximum
