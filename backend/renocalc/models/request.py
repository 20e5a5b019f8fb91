"""Renovation request model: the input to the estimation engine."""

from __future__ import annotations

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    field_validator,
)

from renocalc.models.enums import (
    EstimateType,
    FinishLevel,
    PropertyType,
    RenovationType,
    ScopeItem,
)

# Raw numeric input as typed by a user: kept unparsed until calculation so
# that a missing value and an unparsable value stay distinguishable. Numbers
# are strict so a boolean is rejected instead of read as 1 or 0.
RawNumber = str | StrictInt | StrictFloat | None

DEFAULT_WALL_HEIGHT_FT = "8"


class RenovationRequest(BaseModel):
    """Input model describing a renovation to be estimated.

    Required fields may be left unset while a caller is still filling the
    request in; :func:`renocalc.validation.validate_request` reports which
    ones are missing. Instances are immutable, use :meth:`with_changes` to
    derive an edited copy.
    """

    model_config = ConfigDict(frozen=True)

    renovation_type: RenovationType | None = None
    property_type: PropertyType | None = None
    zip_code: str | None = ""
    area_sq_ft: RawNumber = None
    wall_height_ft: RawNumber = DEFAULT_WALL_HEIGHT_FT
    finish_level: FinishLevel | None = None
    scope_items: frozenset[ScopeItem] = Field(default_factory=frozenset)
    cabinet_linear_ft: RawNumber = None
    estimate_type: EstimateType = EstimateType.AVERAGE

    @field_validator(
        "renovation_type", "property_type", "finish_level", mode="before"
    )
    @classmethod
    def blank_selection_is_unset(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def with_changes(self, **changes: Any) -> RenovationRequest:
        """Return a validated copy of this request with ``changes`` applied."""
        data = self.model_dump()
        data.update(changes)
        return type(self).model_validate(data)
