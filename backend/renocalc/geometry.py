"""Room geometry derived from floor area and wall height.

The footprint is modelled as a square: perimeter = 4 * sqrt(area). Rooms
that are not square will have a different true wall area, so the figure is
always reported as an estimate.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

# Default cabinet run for a kitchen when the user gives none: two walls.
_CABINET_WALLS = 2


@dataclass(frozen=True)
class RoomGeometry:
    """Floor and wall measurements of a room."""

    floor_area_sq_ft: float
    perimeter_ft: float
    wall_height_ft: float

    @property
    def wall_area_sq_ft(self) -> float:
        return self.perimeter_ft * self.wall_height_ft


def square_room(floor_area_sq_ft: float, wall_height_ft: float) -> RoomGeometry:
    """Model a room with the given area as a square footprint."""
    side = math.sqrt(floor_area_sq_ft)
    return RoomGeometry(
        floor_area_sq_ft=floor_area_sq_ft,
        perimeter_ft=4 * side,
        wall_height_ft=wall_height_ft,
    )


def default_cabinet_linear_feet(floor_area_sq_ft: float) -> float:
    """Cabinet run along two walls of a square kitchen."""
    return math.sqrt(floor_area_sq_ft) * _CABINET_WALLS
