"""
Test suite for the grid topology builder.

Tests cover:
- Size / density validation
- Density roll semantics (rounded divisor)
- Seeded determinism
- Neighbor linking, border handling and symmetry
- Explicit blocked layouts
- Default starting position
"""
from __future__ import annotations

import dataclasses
import random

import pytest

from moverange.errors import ConfigError
from moverange.world.grid import (
    EAST, NORTH, OPPOSITE, SOUTH, WEST,
    build_grid, grid_from_blocked, shade_divisor,
)


class TestBuildValidation:
    @pytest.mark.parametrize("size", [0, -1, -12])
    def test_non_positive_size_raises(self, size: int) -> None:
        with pytest.raises(ConfigError):
            build_grid(size, 0.15, random.Random(1))

    def test_non_int_size_raises(self) -> None:
        with pytest.raises(ConfigError):
            build_grid(4.0, 0.15, random.Random(1))  # type: ignore[arg-type]

    @pytest.mark.parametrize("density", [-0.1, 1.01, 2.0])
    def test_density_outside_unit_interval_raises(self, density: float) -> None:
        with pytest.raises(ConfigError):
            build_grid(4, density, random.Random(1))

    def test_config_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            build_grid(0, 0.5)


class TestDensityRoll:
    @pytest.mark.parametrize(
        "density,divisor",
        [(0.0, 0), (1.0, 1), (0.5, 2), (0.15, 7), (0.3, 3), (0.25, 4)],
    )
    def test_divisor_is_rounded_reciprocal(self, density: float, divisor: int) -> None:
        assert shade_divisor(density) == divisor

    def test_zero_density_blocks_nothing(self) -> None:
        grid = build_grid(12, 0.0, random.Random(3))
        assert grid.blocked == frozenset()

    def test_full_density_blocks_everything(self) -> None:
        grid = build_grid(5, 1.0, random.Random(3))
        assert len(grid.blocked) == 25

    def test_reference_density_blocks_some_but_not_most(self) -> None:
        grid = build_grid(40, 0.15, random.Random(11))
        share = len(grid.blocked) / 1600
        # expected 1/7
        assert 0.08 < share < 0.22


class TestDeterminism:
    def test_same_seed_same_grid(self) -> None:
        a = build_grid(12, 0.15, random.Random(42))
        b = build_grid(12, 0.15, random.Random(42))
        assert a.blocked == b.blocked

    def test_different_seed_differs(self) -> None:
        layouts = {build_grid(12, 0.15, random.Random(s)).blocked for s in range(5)}
        assert len(layouts) > 1


class TestNeighbors:
    def test_interior_cell_has_four_neighbors_in_canonical_order(self) -> None:
        grid = grid_from_blocked(4)
        nbs = grid.cell(1, 1).neighbors
        assert [n.coordinate for n in nbs] == [(2, 1), (0, 1), (1, 2), (1, 0)]

    def test_origin_corner_has_no_south_or_west(self) -> None:
        grid = grid_from_blocked(4)
        nbs = grid.cell(0, 0).neighbors
        assert nbs[SOUTH] is None
        assert nbs[WEST] is None
        assert nbs[NORTH].coordinate == (1, 0)
        assert nbs[EAST].coordinate == (0, 1)

    def test_far_corner_has_no_north_or_east(self) -> None:
        grid = grid_from_blocked(4)
        nbs = grid.cell(3, 3).neighbors
        assert nbs[NORTH] is None
        assert nbs[EAST] is None

    def test_single_cell_grid_has_no_neighbors(self) -> None:
        grid = grid_from_blocked(1)
        assert grid.cell(0, 0).neighbors == (None, None, None, None)

    def test_links_are_symmetric(self) -> None:
        grid = build_grid(12, 0.15, random.Random(7))
        for col, row in grid.coords():
            cell = grid.cell(col, row)
            for d, nb in enumerate(cell.neighbors):
                if nb is not None:
                    assert nb.neighbors[OPPOSITE[d]] is cell

    def test_neighbors_are_one_step_away(self) -> None:
        grid = build_grid(6, 0.3, random.Random(2))
        for col, row in grid.coords():
            for nb in grid.cell(col, row).neighbors:
                if nb is not None:
                    nc, nr = nb.coordinate
                    assert abs(nc - col) + abs(nr - row) == 1

    def test_open_neighbors_skip_blocked(self) -> None:
        grid = grid_from_blocked(3, {(2, 1), (1, 0)})
        opened = [n.coordinate for n in grid.cell(1, 1).open_neighbors()]
        assert opened == [(0, 1), (1, 2)]


class TestGridAccess:
    def test_blocked_layout(self) -> None:
        grid = grid_from_blocked(3, [(0, 0), (2, 1)])
        assert grid.blocked == frozenset({(0, 0), (2, 1)})
        assert grid.is_blocked(0, 0)
        assert not grid.is_passable(2, 1)
        assert grid.is_passable(1, 1)

    def test_is_passable_false_out_of_bounds(self) -> None:
        grid = grid_from_blocked(3)
        assert not grid.is_passable(3, 0)
        assert not grid.is_passable(0, -1)

    def test_cell_out_of_bounds_raises(self) -> None:
        grid = grid_from_blocked(3)
        with pytest.raises(IndexError):
            grid.cell(3, 0)

    def test_blocked_outside_board_raises(self) -> None:
        with pytest.raises(ConfigError):
            grid_from_blocked(3, [(3, 3)])

    def test_coords_cover_board(self) -> None:
        grid = grid_from_blocked(3)
        assert len(set(grid.coords())) == 9

    def test_grid_is_frozen(self) -> None:
        grid = grid_from_blocked(3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            grid.size = 4  # type: ignore[misc]


class TestDefaultOrigin:
    def test_middle_when_open(self) -> None:
        assert grid_from_blocked(12).default_origin() == (6, 6)

    def test_scans_rows_above_middle_first(self) -> None:
        grid = grid_from_blocked(12, {(6, 6)})
        assert grid.default_origin() == (6, 7)

    def test_moves_to_next_column_when_column_is_shut(self) -> None:
        grid = grid_from_blocked(12, {(6, r) for r in range(6, 12)})
        assert grid.default_origin() == (7, 6)

    def test_falls_back_to_whole_board(self) -> None:
        grid = grid_from_blocked(2, {(1, 1)})
        assert grid.default_origin() == (0, 0)

    def test_no_open_cell_raises(self) -> None:
        grid = build_grid(3, 1.0, random.Random(0))
        with pytest.raises(ConfigError):
            grid.default_origin()
