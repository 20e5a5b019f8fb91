"""Cost breakdown output models for the renocalc estimation engine."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from renocalc.models.enums import EstimateType, FormulaVersion, ScopeItem


class ScopeAdjustment(BaseModel):
    """Surcharge contributed by a single selected scope item."""

    model_config = ConfigDict(frozen=True)

    scope_item: ScopeItem
    multiplier: float = Field(ge=0)
    amount: float = Field(ge=0)


class CostBreakdown(BaseModel):
    """Complete output of one calculation.

    We never report a single total: the estimate is always a low/high band
    around the adjusted base cost.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    base_cost: float = Field(ge=0)
    labor_cost: float = Field(ge=0)
    material_cost: float = Field(ge=0)
    scope_adjustments: float = Field(ge=0)
    location_multiplier: float = Field(gt=0)
    total_low: float = Field(ge=0)
    total_high: float = Field(ge=0)
    floor_area_sq_ft: float = Field(ge=0)
    wall_area_sq_ft: float = Field(ge=0)

    cost_per_sq_ft: float = Field(ge=0)
    estimate_type: EstimateType
    formula_version: FormulaVersion
    scope_lines: list[ScopeAdjustment] = Field(default_factory=list)
    cabinet_linear_ft: float | None = None
    # Wall area assumes a square footprint.
    wall_area_is_estimate: bool = True

    @model_validator(mode="after")
    def low_le_high(self) -> CostBreakdown:
        if self.total_low > self.total_high:
            msg = (
                f"Must satisfy total_low <= total_high, "
                f"got {self.total_low} > {self.total_high}"
            )
            raise ValueError(msg)
        return self

    @property
    def adjusted_cost(self) -> float:
        """Base cost plus scope surcharges, before the location multiplier."""
        return self.base_cost + self.scope_adjustments

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict with display-ready strings."""
        from renocalc.formatting import (
            format_area,
            format_currency,
            format_linear_feet,
            format_surcharge,
            format_total_range,
        )

        summary: dict[str, Any] = {
            "estimate_type": self.estimate_type.value,
            "formula_version": self.formula_version.value,
            "total_range_formatted": format_total_range(
                self.total_low, self.total_high
            ),
            "base_cost_formatted": format_currency(self.base_cost),
            "labor_cost_formatted": format_currency(self.labor_cost),
            "material_cost_formatted": format_currency(self.material_cost),
            "scope_adjustments_formatted": format_currency(self.scope_adjustments),
            "cost_per_sq_ft_formatted": f"{format_currency(self.cost_per_sq_ft)} / SF",
            "floor_area_formatted": format_area(self.floor_area_sq_ft),
            "wall_area_formatted": format_area(
                self.wall_area_sq_ft, estimated=self.wall_area_is_estimate
            ),
            "location_multiplier": self.location_multiplier,
            "scope_lines": [
                {
                    "scope_item": line.scope_item.value,
                    "surcharge": format_surcharge(line.multiplier),
                    "amount_formatted": format_currency(line.amount),
                }
                for line in self.scope_lines
            ],
        }
        if self.cabinet_linear_ft is not None:
            summary["cabinet_linear_ft_formatted"] = format_linear_feet(
                self.cabinet_linear_ft
            )
        return summary
