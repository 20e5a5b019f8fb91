"""Display labels for property types.

Property type is collected for categorization only and carries no rate.
"""

from __future__ import annotations

from renocalc.models.enums import PropertyType

PROPERTY_TYPE_LABELS: dict[PropertyType, str] = {
    PropertyType.APARTMENT: "Apartment",
    PropertyType.CONDO: "Condo",
    PropertyType.SINGLE_FAMILY_HOME: "Single-family home",
    PropertyType.MULTI_FAMILY: "Multi-family",
}
