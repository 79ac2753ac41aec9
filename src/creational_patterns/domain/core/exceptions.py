# src/creational_patterns/domain/core/exceptions.py
from typing import Any, Dict, Optional, Sequence


class DomainException(Exception):
    """Base exception for all domain-specific errors."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""

    def __init__(self, message: str, missing_fields: Optional[Sequence[str]] = None):
        super().__init__(message, "CONFIGURATION_ERROR",
                         {"missing_fields": list(missing_fields or [])})
        self.missing_fields = list(missing_fields or [])


class UnrecognizedVariantError(DomainException, ValueError):
    """Raised when a factory is asked for a variant it does not know."""

    def __init__(self, requested: Any, known: Sequence[str]):
        message = f"Unrecognized variant requested: {requested!r}"
        super().__init__(
            message,
            "UNRECOGNIZED_VARIANT",
            {"requested": repr(requested), "known": list(known)},
        )
        self.requested = requested
        self.known = list(known)


class UnreachableVariantError(DomainException, TypeError):
    """Raised when a value outside a closed union reaches an exhaustive match."""

    def __init__(self, union_name: str, value: Any):
        super().__init__(
            f"{value!r} is not a variant of {union_name}",
            "UNREACHABLE_VARIANT",
            {"union": union_name, "value": repr(value)},
        )
        self.union_name = union_name
        self.value = value
