"""
Centralized error handling and input validation helpers.
"""

import logging
import traceback
from collections.abc import Sized
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, TypeVar

from .errors import InvalidArgumentError

T = TypeVar("T")


class ErrorSeverity(Enum):
    """Enumeration of error severity levels for the roster manager."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class RosterIssue:
    """Represents a reported problem with severity, context, and optional exception."""
    message: str
    severity: ErrorSeverity
    context: dict[str, Any]
    exception: Optional[Exception] = None


class ErrorHandler:
    """Centralized error handling for the roster manager."""

    def __init__(self) -> None:
        """Initialize the ErrorHandler with a logger and empty error history."""
        self.logger = logging.getLogger("roster.errors")
        self.error_history: list[RosterIssue] = []

    def handle(
        self,
        message: str,
        severity: ErrorSeverity,
        context: Optional[dict[str, Any]] = None,
        exception: Optional[Exception] = None,
    ) -> None:
        """Handle an error based on its severity."""
        issue = RosterIssue(
            message=message,
            severity=severity,
            context=context or {},
            exception=exception,
        )
        self.error_history.append(issue)

        # Prefix context keys to avoid conflicts with logging system reserved keys
        safe_context = {f"ctx_{key}": value for key, value in issue.context.items()}

        if issue.severity == ErrorSeverity.CRITICAL:
            self.logger.critical(f"CRITICAL: {issue.message}", extra=safe_context)
            if issue.exception:
                self.logger.critical(
                    "".join(traceback.format_exception(issue.exception))
                )
        elif issue.severity == ErrorSeverity.HIGH:
            self.logger.error(f"ERROR: {issue.message}", extra=safe_context)
        elif issue.severity == ErrorSeverity.MEDIUM:
            self.logger.warning(f"WARNING: {issue.message}", extra=safe_context)
        else:
            self.logger.info(f"INFO: {issue.message}", extra=safe_context)

    def clear(self) -> None:
        """Forget every recorded issue."""
        self.error_history.clear()


# Global error handler instance
ERROR_HANDLER = ErrorHandler()


def log_info(
    message: str,
    context: Optional[dict[str, Any]] = None,
    exception: Optional[Exception] = None,
) -> None:
    """Log an info-level message."""
    ERROR_HANDLER.handle(message, ErrorSeverity.LOW, context, exception)


def log_critical(
    message: str,
    context: Optional[dict[str, Any]] = None,
    exception: Optional[Exception] = None,
) -> None:
    """Log a critical-level message."""
    ERROR_HANDLER.handle(message, ErrorSeverity.CRITICAL, context, exception)


# ==============================================================================
# VALIDATION HELPERS
# ==============================================================================
# Invalid input is reported at LOW severity: it is an expected outcome of user
# input, and the caller decides how loudly to surface it.


def require_not_none(
    value: Optional[T], param_name: str, context: Optional[dict[str, Any]] = None
) -> T:
    """
    Validates that a required value is present.

    Args:
        value: The value to validate
        param_name: Human-readable parameter name for error messages
        context: Additional context for logging

    Returns:
        The validated value

    Raises:
        InvalidArgumentError: If the value is None
    """
    if value is None:
        log_info(
            f"{param_name} cannot be None",
            {**(context or {}), "param_name": param_name},
        )
        raise InvalidArgumentError(f"{param_name} cannot be null.")
    return value


def require_non_blank(
    value: Any, param_name: str, context: Optional[dict[str, Any]] = None
) -> str:
    """
    Validates that a value is a string with at least one non-whitespace character.

    Args:
        value: The value to validate
        param_name: Human-readable parameter name for error messages
        context: Additional context for logging

    Returns:
        str: The validated string value

    Raises:
        InvalidArgumentError: If validation fails
    """
    if not isinstance(value, str) or not value.strip():
        log_info(
            f"{param_name} must be a non-blank string, got: {value!r}",
            {
                **(context or {}),
                "param_name": param_name,
                "type": type(value).__name__,
            },
        )
        raise InvalidArgumentError(f"{param_name} cannot be null or blank.")
    return value


def require_enum_member(
    value: Any, enum_class: type[Enum], param_name: str, context: Optional[dict[str, Any]] = None
) -> Any:
    """
    Validates that a value is a member of the specified enum.

    Args:
        value: The value to validate
        enum_class: The expected enum class
        param_name: Human-readable parameter name for error messages
        context: Additional context for logging

    Returns:
        The validated enum value

    Raises:
        InvalidArgumentError: If validation fails
    """
    if not isinstance(value, enum_class):
        log_info(
            f"{param_name} must be {enum_class.__name__}, got: {type(value).__name__}",
            {
                **(context or {}),
                "param_name": param_name,
                "expected_type": enum_class.__name__,
                "value": value,
            },
        )
        raise InvalidArgumentError(
            f"Invalid {param_name}: expected {enum_class.__name__}, got {value!r}."
        )
    return value


def require_count_in_range(
    value: Sized,
    param_name: str,
    min_val: int,
    max_val: int,
    context: Optional[dict[str, Any]] = None,
) -> Sized:
    """
    Validates that a collection holds between min_val and max_val items.

    Args:
        value: The collection to validate
        param_name: Human-readable parameter name for error messages
        min_val: Minimum allowed size (inclusive)
        max_val: Maximum allowed size (inclusive)
        context: Additional context for logging

    Returns:
        The validated collection

    Raises:
        InvalidArgumentError: If the collection is missing or its size is out of range
    """
    require_not_none(value, param_name, context)
    if not min_val <= len(value) <= max_val:
        log_info(
            f"{param_name} must hold between {min_val} and {max_val} items, got: {len(value)}",
            {
                **(context or {}),
                "param_name": param_name,
                "min_val": min_val,
                "max_val": max_val,
            },
        )
        raise InvalidArgumentError(
            f"{param_name} must contain between {min_val} and {max_val} entries."
        )
    return value
