# This project was developed with assistance from AI tools.
"""Tagged outcomes for mortgage operations.

Rejected input and missing rates are expected outcomes, not crashes, so the
service layer returns them as ``Result`` values and every call site checks
``result.success``. Exceptions are left for genuine faults (database errors,
bugs), which the app-level catch-all handler turns into a 500.
"""

import enum
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, enum.Enum):
    """Category of a failed mortgage operation."""

    INVALID_ARGUMENT = "invalid_argument"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class MortgageError:
    """A rejected request, with the human-readable rule that was violated."""

    kind: ErrorKind
    message: str
    field: str | None = None


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of an operation: a value on success, a ``MortgageError`` otherwise.

    Usage::

        result = check_mortgage_feasibility(rate, applicant)
        if not result.success:
            return result
        payment = result.value.monthly_cost
    """

    success: bool
    value: T | None = None
    error: MortgageError | None = None

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str, field: str | None = None) -> "Result[T]":
        return cls(success=False, error=MortgageError(kind=kind, message=message, field=field))

    def __bool__(self) -> bool:
        return self.success

    def unwrap(self) -> T:
        """Return the value, raising ``ValueError`` if the operation failed."""
        if not self.success:
            raise ValueError(f"Result unwrap failed: {self.error.message}")
        return self.value
