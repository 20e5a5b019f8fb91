"""Tests for the public API surface of the renocalc package.

Verifies that consumers can import everything they need from the top-level
``renocalc`` package, use ``create_default_engine`` for quick setup, and
round-trip breakdowns through JSON serialization.
"""

from __future__ import annotations

import json

import pytest

from renocalc import (
    CostBreakdown,
    EstimateEngine,
    EstimateForm,
    EstimateResult,
    EstimateType,
    FinishLevel,
    FormulaVersion,
    InvalidInputError,
    PropertyType,
    RenoCalcError,
    RenovationRequest,
    RenovationType,
    RequestValidationError,
    ScopeItem,
    create_default_engine,
    validate_request,
)
from renocalc.config import Settings


def _sample_request() -> RenovationRequest:
    return RenovationRequest(
        renovation_type=RenovationType.WHOLE_INTERIOR,
        property_type=PropertyType.SINGLE_FAMILY_HOME,
        zip_code="78701",
        area_sq_ft="1200",
        wall_height_ft="9",
        finish_level=FinishLevel.MID_RANGE,
        scope_items=[ScopeItem.DEMOLITION, ScopeItem.PERMITS_DESIGN],
        estimate_type=EstimateType.HIGH,
    )


class TestPublicImports:
    def test_exceptions_share_base(self) -> None:
        assert issubclass(InvalidInputError, RenoCalcError)
        assert issubclass(RequestValidationError, RenoCalcError)

    def test_callables(self) -> None:
        assert callable(create_default_engine)
        assert callable(validate_request)
        assert EstimateForm is not None


class TestCreateDefaultEngine:
    def test_engine_can_estimate(self) -> None:
        engine = create_default_engine(Settings())
        assert isinstance(engine, EstimateEngine)
        result = engine.estimate(_sample_request())
        assert isinstance(result, EstimateResult)
        assert isinstance(result.breakdown, CostBreakdown)
        assert result.breakdown.formula_version == FormulaVersion.FLAT_RATE
        # 1200 SF * 87 $/SF * (1 + 0.10 + 0.08)
        assert result.breakdown.total_high == pytest.approx(1200 * 87 * 1.18 * 1.1)


class TestJsonRoundTrip:
    def test_breakdown_round_trip(self) -> None:
        engine = create_default_engine(Settings())
        breakdown = engine.calculate(_sample_request())
        payload = json.loads(breakdown.model_dump_json())
        restored = CostBreakdown.model_validate(payload)
        assert restored == breakdown
