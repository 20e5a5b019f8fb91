"""renocalc renovation cost estimation engine.

Usage::

    from renocalc import create_default_engine, RenovationRequest

    engine = create_default_engine()
    result = engine.estimate(request)
    if result.breakdown is not None:
        print(result.breakdown.total_low, result.breakdown.total_high)
"""

from renocalc.data.repository import RateTables, default_rate_tables
from renocalc.engine import EstimateEngine, EstimateResult
from renocalc.exceptions import (
    InvalidInputError,
    RateTableError,
    RenoCalcError,
    RequestValidationError,
)
from renocalc.factory import create_default_engine
from renocalc.form import EstimateForm
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
from renocalc.validation import ValidationResult, validate_request

__all__ = [
    "CostBreakdown",
    "CostCategory",
    "EstimateEngine",
    "EstimateForm",
    "EstimateResult",
    "EstimateType",
    "FinishLevel",
    "FormulaVersion",
    "InvalidInputError",
    "PropertyType",
    "RateTableError",
    "RateTables",
    "RenoCalcError",
    "RenovationRequest",
    "RenovationType",
    "RequestValidationError",
    "ScopeAdjustment",
    "ScopeItem",
    "ValidationResult",
    "create_default_engine",
    "default_rate_tables",
    "validate_request",
]
