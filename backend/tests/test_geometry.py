"""Tests for square-room geometry helpers."""

from __future__ import annotations

import math

import pytest

from renocalc.geometry import default_cabinet_linear_feet, square_room


class TestSquareRoom:
    def test_perfect_square(self) -> None:
        room = square_room(100.0, 8.0)
        assert room.perimeter_ft == pytest.approx(40.0)
        assert room.wall_area_sq_ft == pytest.approx(320.0)
        assert room.floor_area_sq_ft == 100.0

    def test_wall_area_formula(self) -> None:
        room = square_room(200.0, 8.0)
        assert room.wall_area_sq_ft == pytest.approx(4 * math.sqrt(200.0) * 8.0)

    def test_taller_walls_scale_linearly(self) -> None:
        assert square_room(144.0, 10.0).wall_area_sq_ft == pytest.approx(
            square_room(144.0, 5.0).wall_area_sq_ft * 2
        )


class TestCabinetRun:
    def test_two_walls(self) -> None:
        assert default_cabinet_linear_feet(144.0) == pytest.approx(24.0)
