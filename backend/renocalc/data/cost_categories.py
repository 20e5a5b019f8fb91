"""Per-square-foot cost ranges by cost category.

The flat-rate formula sums one value per category to get the aggregate
$/SF rate. Values are national placeholders, not regional data.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from renocalc.models.enums import CostCategory, EstimateType


class CostCategoryRange(BaseModel):
    """Low/high $/SF pair for a single cost category."""

    model_config = ConfigDict(frozen=True)

    label: str
    low: float = Field(ge=0)
    high: float = Field(ge=0)

    @model_validator(mode="after")
    def low_le_high(self) -> CostCategoryRange:
        if self.low > self.high:
            msg = f"Must satisfy low <= high, got {self.low} > {self.high}"
            raise ValueError(msg)
        return self

    @property
    def midpoint(self) -> float:
        return (self.low + self.high) / 2

    def rate_for(self, estimate_type: EstimateType) -> float:
        """Select the $/SF value matching ``estimate_type``."""
        if estimate_type == EstimateType.LOW:
            return self.low
        if estimate_type == EstimateType.HIGH:
            return self.high
        return self.midpoint


COST_CATEGORY_RANGES: dict[CostCategory, CostCategoryRange] = {
    CostCategory.FINISHES: CostCategoryRange(label="Finishes", low=10.0, high=30.0),
    CostCategory.DEMOLITION: CostCategoryRange(label="Demolition", low=2.0, high=7.0),
    CostCategory.ELECTRICAL: CostCategoryRange(label="Electrical", low=4.0, high=10.0),
    CostCategory.PLUMBING: CostCategoryRange(label="Plumbing", low=4.0, high=10.0),
    CostCategory.APPLIANCES: CostCategoryRange(label="Appliances", low=3.0, high=10.0),
    CostCategory.MILLWORK: CostCategoryRange(label="Millwork", low=5.0, high=20.0),
}
