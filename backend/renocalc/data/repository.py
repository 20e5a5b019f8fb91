"""Rate table bundle injected into the estimation engine."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Any

from renocalc.data.cost_categories import COST_CATEGORY_RANGES, CostCategoryRange
from renocalc.data.legacy_factors import (
    FINISH_LEVEL_FACTORS,
    RENOVATION_TYPE_FACTORS,
    FinishLevelFactor,
    RenovationTypeFactor,
)
from renocalc.data.property_types import PROPERTY_TYPE_LABELS
from renocalc.data.scope_items import SCOPE_ITEM_FACTORS, ScopeItemFactor
from renocalc.exceptions import RateTableError
from renocalc.models.enums import (
    CostCategory,
    EstimateType,
    FinishLevel,
    PropertyType,
    RenovationType,
    ScopeItem,
)


def _require_total(
    name: str, table: Mapping[Any, Any], keys: type[StrEnum]
) -> Mapping[Any, Any]:
    missing = [k.value for k in keys if k not in table]
    if missing:
        msg = f"Rate table '{name}' has no entry for: {', '.join(missing)}"
        raise RateTableError(msg)
    return MappingProxyType(dict(table))


@dataclass(frozen=True)
class RateTables:
    """Immutable set of reference tables used by a calculation.

    Every table must cover every member of the enum it is keyed by, so
    lookups through the accessor methods cannot miss once constructed.

    Raises:
        RateTableError: If any table is missing an enum member.
    """

    cost_categories: Mapping[CostCategory, CostCategoryRange]
    scope_items: Mapping[ScopeItem, ScopeItemFactor]
    renovation_types: Mapping[RenovationType, RenovationTypeFactor]
    finish_levels: Mapping[FinishLevel, FinishLevelFactor]
    property_labels: Mapping[PropertyType, str] = field(
        default_factory=lambda: dict(PROPERTY_TYPE_LABELS)
    )

    def __post_init__(self) -> None:
        for attr, keys in (
            ("cost_categories", CostCategory),
            ("scope_items", ScopeItem),
            ("renovation_types", RenovationType),
            ("finish_levels", FinishLevel),
            ("property_labels", PropertyType),
        ):
            frozen = _require_total(attr, getattr(self, attr), keys)
            object.__setattr__(self, attr, frozen)

    def cost_per_sq_ft(self, estimate_type: EstimateType) -> float:
        """Sum the selected $/SF value across all cost categories."""
        return sum(
            category.rate_for(estimate_type)
            for category in self.cost_categories.values()
        )

    def scope_factor(self, item: ScopeItem) -> ScopeItemFactor:
        return self.scope_items[item]

    def renovation_factor(self, renovation_type: RenovationType) -> RenovationTypeFactor:
        return self.renovation_types[renovation_type]

    def finish_factor(self, finish_level: FinishLevel) -> FinishLevelFactor:
        return self.finish_levels[finish_level]

    def to_reference_dict(self) -> dict[str, Any]:
        """Labels, descriptions and rates for populating selection widgets."""
        return {
            "renovation_types": {
                k.value: f.label for k, f in self.renovation_types.items()
            },
            "property_types": {k.value: v for k, v in self.property_labels.items()},
            "finish_levels": {k.value: f.label for k, f in self.finish_levels.items()},
            "estimate_types": [e.value for e in EstimateType],
            "scope_items": {
                k.value: {
                    "label": f.label,
                    "description": f.description,
                    "surcharge_percent": round(f.multiplier * 100),
                }
                for k, f in self.scope_items.items()
            },
            "cost_categories": {
                k.value: {"label": c.label, "low": c.low, "high": c.high}
                for k, c in self.cost_categories.items()
            },
        }


def default_rate_tables() -> RateTables:
    """Build a RateTables instance from the built-in reference data."""
    return RateTables(
        cost_categories=COST_CATEGORY_RANGES,
        scope_items=SCOPE_ITEM_FACTORS,
        renovation_types=RENOVATION_TYPE_FACTORS,
        finish_levels=FINISH_LEVEL_FACTORS,
    )
