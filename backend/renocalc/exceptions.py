"""Custom exception hierarchy for the renocalc engine."""

from __future__ import annotations

from typing import Any


class RenoCalcError(Exception):
    """Base exception for all renocalc errors."""


class InvalidInputError(RenoCalcError):
    """Raised when a numeric field does not parse to a finite positive number."""

    def __init__(self, field: str, value: Any) -> None:
        self.field = field
        self.value = value
        super().__init__(
            f"Field '{field}' must be a positive number, got {value!r}"
        )


class RequestValidationError(RenoCalcError):
    """Raised when a calculation is attempted on a request with missing fields."""

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        fields = ", ".join(sorted(self.errors))
        super().__init__(f"Request is missing required fields: {fields}")


class RateTableError(RenoCalcError, ValueError):
    """Raised when reference rate tables are incomplete or inconsistent."""
