"""Enums for the renocalc domain models.

These enums are the closed vocabularies a caller picks from when filling in
a renovation request. Every reference table is keyed by one of them.
"""

from enum import StrEnum


class RenovationType(StrEnum):
    """Kind of renovation being estimated."""

    KITCHEN = "kitchen"
    BATHROOM = "bathroom"
    WHOLE_INTERIOR = "whole_interior"
    FLOORING = "flooring"
    PAINTING = "painting"
    OTHER = "other"


class PropertyType(StrEnum):
    """Type of property the renovation takes place in."""

    APARTMENT = "apartment"
    CONDO = "condo"
    SINGLE_FAMILY_HOME = "single_family_home"
    MULTI_FAMILY = "multi_family"


class FinishLevel(StrEnum):
    """Quality tier of the finishes."""

    BUDGET = "budget"
    MID_RANGE = "mid_range"
    HIGH_END_LUXURY = "high_end_luxury"


class ScopeItem(StrEnum):
    """Optional categories of work that add a surcharge to the base cost."""

    DEMOLITION = "demolition"
    PLUMBING = "plumbing"
    ELECTRICAL = "electrical"
    MILLWORK = "millwork"
    APPLIANCE_INSTALL = "appliance_install"
    PERMITS_DESIGN = "permits_design"


class CostCategory(StrEnum):
    """Cost categories that make up the flat per-square-foot rate."""

    FINISHES = "finishes"
    DEMOLITION = "demolition"
    ELECTRICAL = "electrical"
    PLUMBING = "plumbing"
    APPLIANCES = "appliances"
    MILLWORK = "millwork"


class EstimateType(StrEnum):
    """Which bound of each cost category range feeds the rate."""

    LOW = "low"
    AVERAGE = "average"
    HIGH = "high"


class FormulaVersion(StrEnum):
    """Base-cost formula used by the engine."""

    FLAT_RATE = "flat_rate"
    LEGACY = "legacy"
