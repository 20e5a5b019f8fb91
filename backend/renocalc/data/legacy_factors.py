"""Renovation-type and finish-level factors.

Only the legacy formula weights cost by these factors; the flat-rate formula
ignores them. They also carry the display labels for both selections.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from renocalc.models.enums import FinishLevel, RenovationType


class RenovationTypeFactor(BaseModel):
    """Area weighting and labor share for a renovation type."""

    model_config = ConfigDict(frozen=True)

    label: str
    base_multiplier: float = Field(ge=0)
    wall_area_multiplier: float = Field(ge=0)
    floor_area_multiplier: float = Field(ge=0)
    labor_ratio: float = Field(ge=0, le=1)
    # Kitchen only: cabinet pricing per linear foot and wall coverage.
    cabinet_base_cost_per_lf: float | None = Field(default=None, ge=0)
    cabinet_area_ratio: float | None = Field(default=None, ge=0, le=1)


class FinishLevelFactor(BaseModel):
    """Pricing for a finish quality tier."""

    model_config = ConfigDict(frozen=True)

    label: str
    multiplier: float = Field(ge=0)
    base_cost_per_sq_ft: float = Field(ge=0)
    cabinet_multiplier: float = Field(ge=0)


RENOVATION_TYPE_FACTORS: dict[RenovationType, RenovationTypeFactor] = {
    RenovationType.KITCHEN: RenovationTypeFactor(
        label="Kitchen",
        base_multiplier=1.2,
        wall_area_multiplier=0.7,
        floor_area_multiplier=1.0,
        labor_ratio=0.4,
        cabinet_base_cost_per_lf=200.0,
        cabinet_area_ratio=0.6,
    ),
    RenovationType.BATHROOM: RenovationTypeFactor(
        label="Bathroom",
        base_multiplier=1.1,
        wall_area_multiplier=0.8,  # fixtures and tile
        floor_area_multiplier=1.0,
        labor_ratio=0.45,
    ),
    RenovationType.WHOLE_INTERIOR: RenovationTypeFactor(
        label="Whole Interior",
        base_multiplier=1.0,
        wall_area_multiplier=1.0,
        floor_area_multiplier=1.0,
        labor_ratio=0.35,
    ),
    RenovationType.FLOORING: RenovationTypeFactor(
        label="Flooring",
        base_multiplier=0.8,
        wall_area_multiplier=0.0,
        floor_area_multiplier=1.0,
        labor_ratio=0.3,
    ),
    RenovationType.PAINTING: RenovationTypeFactor(
        label="Painting",
        base_multiplier=0.6,
        wall_area_multiplier=1.0,
        floor_area_multiplier=0.0,
        labor_ratio=0.5,
    ),
    RenovationType.OTHER: RenovationTypeFactor(
        label="Other",
        base_multiplier=1.0,
        wall_area_multiplier=0.5,
        floor_area_multiplier=1.0,
        labor_ratio=0.4,
    ),
}

FINISH_LEVEL_FACTORS: dict[FinishLevel, FinishLevelFactor] = {
    FinishLevel.BUDGET: FinishLevelFactor(
        label="Budget",
        multiplier=1.0,
        base_cost_per_sq_ft=100.0,
        cabinet_multiplier=1.0,
    ),
    FinishLevel.MID_RANGE: FinishLevelFactor(
        label="Mid-range",
        multiplier=1.5,
        base_cost_per_sq_ft=200.0,
        cabinet_multiplier=1.3,
    ),
    FinishLevel.HIGH_END_LUXURY: FinishLevelFactor(
        label="High-end / Luxury",
        multiplier=2.5,
        base_cost_per_sq_ft=350.0,
        cabinet_multiplier=1.8,
    ),
}
