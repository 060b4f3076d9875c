# pywit Error Types
# Error domain for metadata loading and payload encoding errors

from __future__ import annotations

from enum import Enum
from typing import Any


#==============================================================================
# Error Codes
#==============================================================================

class ErrorCodes(str, Enum):
    """Error code constants for pywit errors"""

    # Codec errors
    UNSUPPORTED_TYPE = "UnsupportedType"

    # Lookup errors
    UNKNOWN_FUNCTION = "UnknownFunction"

    # Validation errors
    VALIDATION_ERROR = "ValidationError"
    DUPLICATE_NAME = "DuplicateName"


#==============================================================================
# pywit Error Class
#==============================================================================

class WitError(Exception):
    """Base exception class for all pywit errors"""

    def __init__(self, code: ErrorCodes, message: str, meta: dict[str, Any] | None = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.meta = meta

    def __str__(self) -> str:
        return self.message

    def to_value(self) -> dict[str, Any]:
        """Convert to a JSON-compatible error value"""
        result: dict[str, Any] = {
            "kind": "error",
            "code": self.code.value,
        }
        if self.meta is not None:
            result["meta"] = self.meta
        return result

    #---------------------------------------------------------------------------
    # Static factory methods for common errors
    #---------------------------------------------------------------------------

    @staticmethod
    def unsupported_type(kind: str | None) -> "WitError":
        """Create an UnsupportedType error for a tag the codec cannot encode"""
        tag = kind if kind is not None else "null"
        return WitError(
            ErrorCodes.UNSUPPORTED_TYPE,
            f"Unsupported type: {tag}",
            meta={"type": tag},
        )

    @staticmethod
    def duplicate_name(container: str, name: str) -> "WitError":
        """Create a DuplicateName error"""
        return WitError(
            ErrorCodes.DUPLICATE_NAME,
            f"Duplicate name in {container}: {name}",
            meta={"name": name},
        )

    @staticmethod
    def unknown_function(name: str) -> "WitError":
        """Create an UnknownFunction error"""
        return WitError(
            ErrorCodes.UNKNOWN_FUNCTION,
            f"Unknown function: {name}",
            meta={"name": name},
        )

    @staticmethod
    def validation(path: str, message: str, value: Any | None = None) -> "WitError":
        """Create a ValidationError"""
        value_str = f" (value: {value!r})" if value is not None else ""
        return WitError(
            ErrorCodes.VALIDATION_ERROR,
            f"Validation error at {path}: {message}{value_str}",
            meta={"path": path},
        )


#==============================================================================
# Validation Error Types
#==============================================================================

class ValidationError:
    """A single validation error"""

    def __init__(self, path: str, message: str, value: Any | None = None):
        self.path = path
        self.message = message
        self.value = value

    def __repr__(self) -> str:
        return f"ValidationError({self.path!r}, {self.message!r})"


class ValidationResult:
    """Result of a validation operation"""

    def __init__(self, valid: bool, errors: list[ValidationError], value: Any | None = None):
        self.valid = valid
        self.errors = errors
        self.value = value

    def raise_for_errors(self) -> None:
        """Raise a WitError describing the first error, if any"""
        if self.errors:
            first = self.errors[0]
            raise WitError.validation(first.path, first.message, first.value)


def valid_result(value: Any) -> ValidationResult:
    """Create a successful validation result"""
    return ValidationResult(valid=True, errors=[], value=value)


def invalid_result(errors: list[ValidationError]) -> ValidationResult:
    """Create a failed validation result"""
    return ValidationResult(valid=False, errors=errors)


#==============================================================================
# Exhaustiveness Checking
#==============================================================================

def exhaustive(value: Any) -> None:
    """
    Asserts that a value is unreachable, ensuring exhaustive handling.
    Use in match default cases to ensure all variants are handled.

    Raises:
        AssertionError: If called (indicating unhandled case)
    """
    raise AssertionError(f"Unexpected value: {value!r}")
