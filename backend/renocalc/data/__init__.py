"""Reference data layer for the renocalc estimation engine."""

from renocalc.data.cost_categories import COST_CATEGORY_RANGES, CostCategoryRange
from renocalc.data.legacy_factors import (
    FINISH_LEVEL_FACTORS,
    RENOVATION_TYPE_FACTORS,
    FinishLevelFactor,
    RenovationTypeFactor,
)
from renocalc.data.property_types import PROPERTY_TYPE_LABELS
from renocalc.data.repository import RateTables, default_rate_tables
from renocalc.data.scope_items import SCOPE_ITEM_FACTORS, ScopeItemFactor

__all__ = [
    "COST_CATEGORY_RANGES",
    "FINISH_LEVEL_FACTORS",
    "PROPERTY_TYPE_LABELS",
    "RENOVATION_TYPE_FACTORS",
    "SCOPE_ITEM_FACTORS",
    "CostCategoryRange",
    "FinishLevelFactor",
    "RateTables",
    "RenovationTypeFactor",
    "ScopeItemFactor",
    "default_rate_tables",
]
