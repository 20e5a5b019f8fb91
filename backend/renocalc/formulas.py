"""Base-cost formulas.

Two formulas exist side by side:

- **Flat rate** (default) — sum one $/SF value per cost category, chosen by
  the estimate type, and apply it to the floor area. Labor/material split is
  a fixed 40/60.
- **Legacy** — weight floor and wall area by renovation type, price the
  weighted area at the finish level's $/SF, add kitchen cabinets, and split
  labor/material by the renovation type's labor ratio.

Both return a :class:`BaseCost`; scope surcharges, location adjustment and the
low/high band are applied afterwards by the engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from renocalc.exceptions import RequestValidationError
from renocalc.models.enums import FormulaVersion, RenovationType
from renocalc.validation import REQUIRED_FIELDS

if TYPE_CHECKING:
    from renocalc.data.repository import RateTables
    from renocalc.geometry import RoomGeometry
    from renocalc.models.request import RenovationRequest

FLAT_RATE_LABOR_RATIO = 0.4
FLAT_RATE_MATERIAL_RATIO = 0.6


@dataclass(frozen=True)
class BaseCost:
    """Pre-adjustment cost and its labor/material split."""

    base_cost: float
    labor_cost: float
    material_cost: float
    cost_per_sq_ft: float


class CostFormula(Protocol):
    version: FormulaVersion

    def base_cost(
        self,
        request: RenovationRequest,
        room: RoomGeometry,
        tables: RateTables,
        cabinet_linear_ft: float | None,
    ) -> BaseCost: ...


class FlatRateFormula:
    """Aggregate category rate applied to floor area only."""

    version = FormulaVersion.FLAT_RATE

    def base_cost(
        self,
        request: RenovationRequest,
        room: RoomGeometry,
        tables: RateTables,
        cabinet_linear_ft: float | None,
    ) -> BaseCost:
        rate = tables.cost_per_sq_ft(request.estimate_type)
        # Wall area is informational only in this formula.
        base = room.floor_area_sq_ft * rate
        return BaseCost(
            base_cost=base,
            labor_cost=base * FLAT_RATE_LABOR_RATIO,
            material_cost=base * FLAT_RATE_MATERIAL_RATIO,
            cost_per_sq_ft=rate,
        )


class LegacyFormula:
    """Renovation-type and finish-level weighted formula."""

    version = FormulaVersion.LEGACY

    def base_cost(
        self,
        request: RenovationRequest,
        room: RoomGeometry,
        tables: RateTables,
        cabinet_linear_ft: float | None,
    ) -> BaseCost:
        missing = {
            field: REQUIRED_FIELDS[field]
            for field in ("renovation_type", "finish_level")
            if getattr(request, field) is None
        }
        if missing:
            raise RequestValidationError(missing)
        type_factor = tables.renovation_factor(request.renovation_type)
        finish = tables.finish_factor(request.finish_level)

        effective_area = (
            room.floor_area_sq_ft * type_factor.floor_area_multiplier
            + room.wall_area_sq_ft * type_factor.wall_area_multiplier
        )
        base = (
            effective_area
            * finish.base_cost_per_sq_ft
            * type_factor.base_multiplier
        )

        if (
            request.renovation_type == RenovationType.KITCHEN
            and cabinet_linear_ft is not None
            and type_factor.cabinet_base_cost_per_lf is not None
        ):
            base += (
                cabinet_linear_ft
                * type_factor.cabinet_base_cost_per_lf
                * finish.cabinet_multiplier
            )

        labor = base * type_factor.labor_ratio
        return BaseCost(
            base_cost=base,
            labor_cost=labor,
            material_cost=base - labor,
            cost_per_sq_ft=base / room.floor_area_sq_ft,
        )


FORMULAS: dict[FormulaVersion, CostFormula] = {
    FormulaVersion.FLAT_RATE: FlatRateFormula(),
    FormulaVersion.LEGACY: LegacyFormula(),
}
