"""Input validation for renovation requests.

Validation only checks that each required field was supplied. Whether a
numeric field actually holds a number is decided later by
:func:`parse_numeric_field`, at calculation time.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from renocalc.exceptions import InvalidInputError

if TYPE_CHECKING:
    from renocalc.models.request import RenovationRequest

logger = logging.getLogger(__name__)

# Required field -> message shown when it is missing.
REQUIRED_FIELDS: Mapping[str, str] = MappingProxyType({
    "renovation_type": "Please select a renovation type",
    "property_type": "Please select a property type",
    "zip_code": "Please enter a zip code",
    "area_sq_ft": "Please enter the area size",
    "wall_height_ft": "Please enter wall height",
    "finish_level": "Please select a finish level",
})


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a request: a map of field name to message."""

    errors: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        return {"valid": self.is_valid, "errors": dict(self.errors)}


def is_missing(value: Any) -> bool:
    """True for None and for empty or whitespace-only strings."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def validate_request(request: RenovationRequest) -> ValidationResult:
    """Check every required field of ``request`` for presence.

    All fields are checked in the same pass so that every problem can be
    reported at once.
    """
    errors = {
        name: message
        for name, message in REQUIRED_FIELDS.items()
        if is_missing(getattr(request, name))
    }
    if errors:
        logger.debug("Request missing fields: %s", ", ".join(errors))
    return ValidationResult(errors=errors)


def parse_numeric_field(field_name: str, raw: Any) -> float:
    """Convert a raw numeric field value to a finite, positive float.

    Raises:
        InvalidInputError: If ``raw`` does not parse, is NaN or infinite,
            or is not greater than zero.
    """
    if isinstance(raw, bool):
        raise InvalidInputError(field_name, raw)
    try:
        value = float(raw.strip() if isinstance(raw, str) else raw)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(field_name, raw) from exc
    if not math.isfinite(value) or value <= 0:
        raise InvalidInputError(field_name, raw)
    return value
