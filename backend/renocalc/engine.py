"""Core estimation engine for the renocalc library.

The EstimateEngine turns a RenovationRequest into a CostBreakdown:

1. **Validation** — every required field must be present; the calculation is
   never run while a field is missing.
2. **Geometry** — floor area from the request, wall area from a square
   footprint of that area and the wall height.
3. **Base cost** — computed by the selected formula (flat rate by default,
   legacy on request), with its labor/material split.
4. **Scope adjustments** — each selected scope item adds a fixed fraction of
   the base cost.
5. **Location adjustment** — a multiplier reserved for ZIP-based pricing,
   currently always 1.0.
6. **Range generation** — low/high band at 90% and 110% of the adjusted cost.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from renocalc.exceptions import InvalidInputError, RequestValidationError
from renocalc.formulas import FORMULAS
from renocalc.geometry import default_cabinet_linear_feet, square_room
from renocalc.models.breakdown import CostBreakdown, ScopeAdjustment
from renocalc.models.enums import FormulaVersion, RenovationType, ScopeItem
from renocalc.validation import (
    ValidationResult,
    is_missing,
    parse_numeric_field,
    validate_request,
)

if TYPE_CHECKING:
    from renocalc.data.repository import RateTables
    from renocalc.models.request import RenovationRequest

logger = logging.getLogger(__name__)

DEFAULT_LOCATION_MULTIPLIER = 1.0
RANGE_LOW_FACTOR = 0.9
RANGE_HIGH_FACTOR = 1.1

ENGINE_VERSION = "0.1.0"


@dataclass(frozen=True)
class EstimateResult:
    """Validation outcome plus the breakdown, when validation passed."""

    validation: ValidationResult
    breakdown: CostBreakdown | None = None


class EstimateEngine:
    """Estimation engine bound to a set of rate tables and a default formula.

    Args:
        tables: The reference rate tables used for every calculation.
        formula_version: Formula used when ``calculate`` is not told otherwise.

    Example::

        from renocalc.data.repository import default_rate_tables

        engine = EstimateEngine(default_rate_tables())
        breakdown = engine.calculate(request)
    """

    def __init__(
        self,
        tables: RateTables,
        formula_version: FormulaVersion = FormulaVersion.FLAT_RATE,
    ) -> None:
        self._tables = tables
        self._formula_version = FormulaVersion(formula_version)

    @property
    def tables(self) -> RateTables:
        return self._tables

    @property
    def formula_version(self) -> FormulaVersion:
        return self._formula_version

    def validate(self, request: RenovationRequest) -> ValidationResult:
        return validate_request(request)

    def estimate(self, request: RenovationRequest) -> EstimateResult:
        """Validate ``request`` and calculate it only if nothing is missing.

        Missing fields come back as data on the result. Unparsable numeric
        input still raises :class:`InvalidInputError`.
        """
        validation = self.validate(request)
        if not validation.is_valid:
            return EstimateResult(validation=validation)
        return EstimateResult(
            validation=validation,
            breakdown=self._calculate(request, self._formula_version),
        )

    def calculate(
        self,
        request: RenovationRequest,
        formula_version: FormulaVersion | None = None,
    ) -> CostBreakdown:
        """Produce a cost breakdown for a complete request.

        Args:
            request: A request with every required field present.
            formula_version: Overrides the engine's default formula.

        Returns:
            A new CostBreakdown.

        Raises:
            RequestValidationError: If a required field is missing.
            InvalidInputError: If a numeric field is not a finite positive
                number.
        """
        validation = self.validate(request)
        if not validation.is_valid:
            raise RequestValidationError(dict(validation.errors))
        version = (
            self._formula_version
            if formula_version is None
            else FormulaVersion(formula_version)
        )
        return self._calculate(request, version)

    def _calculate(
        self, request: RenovationRequest, version: FormulaVersion
    ) -> CostBreakdown:
        area = parse_numeric_field("area_sq_ft", request.area_sq_ft)
        wall_height = parse_numeric_field("wall_height_ft", request.wall_height_ft)

        # 1. Geometry
        room = square_room(area, wall_height)
        if not math.isfinite(room.wall_area_sq_ft):
            raise InvalidInputError("wall_height_ft", request.wall_height_ft)
        cabinet_lf = self._cabinet_linear_feet(request, area)

        # 2. Base cost
        base = FORMULAS[version].base_cost(request, room, self._tables, cabinet_lf)

        # 3. Scope surcharges, each selected item counted once
        scope_lines: list[ScopeAdjustment] = []
        for item in ScopeItem:
            if item not in request.scope_items:
                continue
            multiplier = self._tables.scope_factor(item).multiplier
            scope_lines.append(
                ScopeAdjustment(
                    scope_item=item,
                    multiplier=multiplier,
                    amount=base.base_cost * multiplier,
                )
            )
        scope_total = sum(line.amount for line in scope_lines)

        # 4. Location adjustment
        location_multiplier = DEFAULT_LOCATION_MULTIPLIER

        # 5. Range
        adjusted = (base.base_cost + scope_total) * location_multiplier
        if not (
            math.isfinite(base.base_cost)
            and math.isfinite(adjusted * RANGE_HIGH_FACTOR)
        ):
            # Parsed inputs are finite but large enough to overflow the totals
            raise InvalidInputError("area_sq_ft", request.area_sq_ft)
        breakdown = CostBreakdown(
            base_cost=base.base_cost,
            labor_cost=base.labor_cost,
            material_cost=base.material_cost,
            scope_adjustments=scope_total,
            location_multiplier=location_multiplier,
            total_low=adjusted * RANGE_LOW_FACTOR,
            total_high=adjusted * RANGE_HIGH_FACTOR,
            floor_area_sq_ft=room.floor_area_sq_ft,
            wall_area_sq_ft=room.wall_area_sq_ft,
            cost_per_sq_ft=base.cost_per_sq_ft,
            estimate_type=request.estimate_type,
            formula_version=version,
            scope_lines=scope_lines,
            cabinet_linear_ft=cabinet_lf,
        )
        logger.debug(
            "Calculated %s estimate (%s): %.2f - %.2f",
            version.value,
            request.estimate_type.value,
            breakdown.total_low,
            breakdown.total_high,
        )
        return breakdown

    @staticmethod
    def _cabinet_linear_feet(
        request: RenovationRequest, area: float
    ) -> float | None:
        """Cabinet run for kitchens: the supplied value or a derived default."""
        if request.renovation_type != RenovationType.KITCHEN:
            return None
        if is_missing(request.cabinet_linear_ft):
            return default_cabinet_linear_feet(area)
        return parse_numeric_field("cabinet_linear_ft", request.cabinet_linear_ft)
