"""Tests for the reference data layer."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from renocalc.data.cost_categories import COST_CATEGORY_RANGES, CostCategoryRange
from renocalc.data.legacy_factors import FINISH_LEVEL_FACTORS, RENOVATION_TYPE_FACTORS
from renocalc.data.repository import RateTables, default_rate_tables
from renocalc.data.scope_items import SCOPE_ITEM_FACTORS
from renocalc.exceptions import RateTableError
from renocalc.models.enums import (
    CostCategory,
    EstimateType,
    FinishLevel,
    RenovationType,
    ScopeItem,
)

# ---------------------------------------------------------------------------
# Table integrity
# ---------------------------------------------------------------------------


class TestTableIntegrity:
    def test_cost_categories_cover_enum(self) -> None:
        assert set(COST_CATEGORY_RANGES) == set(CostCategory)

    def test_cost_ranges_are_ordered(self) -> None:
        for cat in COST_CATEGORY_RANGES.values():
            assert 0 <= cat.low <= cat.high

    def test_scope_items_cover_enum(self) -> None:
        assert set(SCOPE_ITEM_FACTORS) == set(ScopeItem)

    def test_scope_multipliers(self) -> None:
        assert SCOPE_ITEM_FACTORS[ScopeItem.DEMOLITION].multiplier == 0.10
        assert SCOPE_ITEM_FACTORS[ScopeItem.PLUMBING].multiplier == 0.15
        assert SCOPE_ITEM_FACTORS[ScopeItem.ELECTRICAL].multiplier == 0.12
        assert SCOPE_ITEM_FACTORS[ScopeItem.MILLWORK].multiplier == 0.20
        assert SCOPE_ITEM_FACTORS[ScopeItem.APPLIANCE_INSTALL].multiplier == 0.10
        assert SCOPE_ITEM_FACTORS[ScopeItem.PERMITS_DESIGN].multiplier == 0.08

    def test_scope_items_have_descriptions(self) -> None:
        for factor in SCOPE_ITEM_FACTORS.values():
            assert factor.description
            assert factor.label

    def test_legacy_tables_cover_enums(self) -> None:
        assert set(RENOVATION_TYPE_FACTORS) == set(RenovationType)
        assert set(FINISH_LEVEL_FACTORS) == set(FinishLevel)

    def test_only_kitchen_has_cabinet_pricing(self) -> None:
        for rtype, factor in RENOVATION_TYPE_FACTORS.items():
            has_cabinets = factor.cabinet_base_cost_per_lf is not None
            assert has_cabinets == (rtype == RenovationType.KITCHEN)

    def test_finish_levels_ascend(self) -> None:
        budget = FINISH_LEVEL_FACTORS[FinishLevel.BUDGET]
        mid = FINISH_LEVEL_FACTORS[FinishLevel.MID_RANGE]
        lux = FINISH_LEVEL_FACTORS[FinishLevel.HIGH_END_LUXURY]
        assert budget.base_cost_per_sq_ft < mid.base_cost_per_sq_ft < lux.base_cost_per_sq_ft


# ---------------------------------------------------------------------------
# CostCategoryRange
# ---------------------------------------------------------------------------


class TestCostCategoryRange:
    def test_rate_for(self) -> None:
        cat = CostCategoryRange(label="Finishes", low=10.0, high=30.0)
        assert cat.rate_for(EstimateType.LOW) == 10.0
        assert cat.rate_for(EstimateType.HIGH) == 30.0
        assert cat.rate_for(EstimateType.AVERAGE) == 20.0

    def test_low_above_high_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CostCategoryRange(label="Bad", low=5.0, high=2.0)

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CostCategoryRange(label="Bad", low=-1.0, high=2.0)


# ---------------------------------------------------------------------------
# RateTables
# ---------------------------------------------------------------------------


class TestRateTables:
    def test_cost_per_sq_ft(self) -> None:
        tables = default_rate_tables()
        assert tables.cost_per_sq_ft(EstimateType.LOW) == pytest.approx(28.0)
        assert tables.cost_per_sq_ft(EstimateType.AVERAGE) == pytest.approx(57.5)
        assert tables.cost_per_sq_ft(EstimateType.HIGH) == pytest.approx(87.0)

    def test_incomplete_table_rejected(self) -> None:
        partial = dict(SCOPE_ITEM_FACTORS)
        del partial[ScopeItem.MILLWORK]
        with pytest.raises(RateTableError, match="millwork"):
            RateTables(
                cost_categories=COST_CATEGORY_RANGES,
                scope_items=partial,
                renovation_types=RENOVATION_TYPE_FACTORS,
                finish_levels=FINISH_LEVEL_FACTORS,
            )

    def test_tables_are_read_only(self) -> None:
        tables = default_rate_tables()
        with pytest.raises(TypeError):
            tables.scope_items[ScopeItem.MILLWORK] = SCOPE_ITEM_FACTORS[  # type: ignore[index]
                ScopeItem.DEMOLITION
            ]

    def test_custom_rates_flow_through(self) -> None:
        cheap = {
            cat: CostCategoryRange(label=cat.value, low=1.0, high=1.0)
            for cat in CostCategory
        }
        tables = RateTables(
            cost_categories=cheap,
            scope_items=SCOPE_ITEM_FACTORS,
            renovation_types=RENOVATION_TYPE_FACTORS,
            finish_levels=FINISH_LEVEL_FACTORS,
        )
        assert tables.cost_per_sq_ft(EstimateType.AVERAGE) == pytest.approx(6.0)

    def test_reference_dict(self) -> None:
        ref = default_rate_tables().to_reference_dict()
        assert ref["renovation_types"]["whole_interior"] == "Whole Interior"
        assert ref["property_types"]["single_family_home"] == "Single-family home"
        assert ref["finish_levels"]["high_end_luxury"] == "High-end / Luxury"
        assert ref["estimate_types"] == ["low", "average", "high"]
        assert ref["scope_items"]["millwork"]["surcharge_percent"] == 20
        assert ref["cost_categories"]["finishes"] == {
            "label": "Finishes",
            "low": 10.0,
            "high": 30.0,
        }
