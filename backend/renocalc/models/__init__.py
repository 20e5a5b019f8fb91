"""Domain models for the renocalc estimation engine."""

from renocalc.models.breakdown import CostBreakdown, ScopeAdjustment
from renocalc.models.enums import (
    CostCategory,
    EstimateType,
    FinishLevel,
    FormulaVersion,
    PropertyType,
    RenovationType,
    ScopeItem,
)
from renocalc.models.request import RenovationRequest

__all__ = [
    "CostBreakdown",
    "CostCategory",
    "EstimateType",
    "FinishLevel",
    "FormulaVersion",
    "PropertyType",
    "RenovationRequest",
    "RenovationType",
    "ScopeAdjustment",
    "ScopeItem",
]
