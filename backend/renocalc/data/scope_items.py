"""Scope-of-work surcharges.

Each selected scope item adds ``multiplier`` times the base cost to the
estimate. Descriptions are shown next to the item when a user picks scope.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from renocalc.models.enums import ScopeItem


class ScopeItemFactor(BaseModel):
    """Surcharge multiplier and display text for a scope item."""

    model_config = ConfigDict(frozen=True)

    label: str
    multiplier: float = Field(ge=0)
    description: str


SCOPE_ITEM_FACTORS: dict[ScopeItem, ScopeItemFactor] = {
    ScopeItem.DEMOLITION: ScopeItemFactor(
        label="Demolition",
        multiplier=0.10,
        description=(
            "Removal of existing cabinetry, wall removal or openings, "
            "electrical outlets, plumbing lines, and lights."
        ),
    ),
    ScopeItem.PLUMBING: ScopeItemFactor(
        label="Plumbing",
        multiplier=0.15,
        description="Water lines, sink relocation, and gas line modifications.",
    ),
    ScopeItem.ELECTRICAL: ScopeItemFactor(
        label="Electrical",
        multiplier=0.12,
        description=(
            "Electrical work including lighting, electrical outlets, "
            "and panels (if required)."
        ),
    ),
    ScopeItem.MILLWORK: ScopeItemFactor(
        label="Millwork",
        multiplier=0.20,
        description="Cabinetry and built-ins, including custom or off-the-shelf options.",
    ),
    ScopeItem.APPLIANCE_INSTALL: ScopeItemFactor(
        label="Appliance Install",
        multiplier=0.10,
        description=(
            "Installation of new appliances including refrigerator, range, "
            "dishwasher, and other kitchen equipment."
        ),
    ),
    ScopeItem.PERMITS_DESIGN: ScopeItemFactor(
        label="Permits/Design",
        multiplier=0.08,
        description=(
            "Permits required by local jurisdiction/building codes. "
            "Check with your architect before beginning work."
        ),
    ),
}
