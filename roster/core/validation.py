"""
Typed outcome of a validation step.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .errors import RosterError

T = TypeVar("T")


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """
    Either the validated value, or the error that made validation fail.

    Attributes:
        value (Optional[T]):
            The validated value, set only on success.
        error (Optional[RosterError]):
            The failure, set only when validation failed.

    """

    value: Optional[T] = None
    error: Optional[RosterError] = None

    @classmethod
    def success(cls, value: T) -> "ValidationResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: RosterError) -> "ValidationResult[T]":
        return cls(error=error)

    @property
    def is_valid(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        """The concrete failure message, or an empty string on success."""
        return str(self.error) if self.error else ""

    def unwrap(self) -> T:
        """
        Returns the validated value, raising the stored error on failure.

        Raises:
            RosterError: The error that made validation fail.

        """
        if self.error is not None:
            raise self.error
        assert self.value is not None
        return self.value
