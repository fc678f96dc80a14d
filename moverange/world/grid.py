# moverange/world/grid.py
from __future__ import annotations
import logging
import random
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from moverange import settings
from moverange.errors import ConfigError

logger = logging.getLogger(__name__)

Coord = tuple[int, int]

# Canonical neighbor order. North/south step along the column axis,
# east/west along the row axis.
NORTH, SOUTH, EAST, WEST = 0, 1, 2, 3
DIRECTIONS: tuple[tuple[str, Coord], ...] = (
    ("north", (1, 0)),
    ("south", (-1, 0)),
    ("east", (0, 1)),
    ("west", (0, -1)),
)
OPPOSITE: tuple[int, ...] = (SOUTH, NORTH, WEST, EAST)


@dataclass(slots=True, eq=False)
class Cell:
    coordinate: Coord
    blocked: bool = False
    # north, south, east, west; None past the border
    neighbors: tuple[Optional["Cell"], ...] = field(default=(None, None, None, None), repr=False)

    def open_neighbors(self) -> Iterator["Cell"]:
        for nb in self.neighbors:
            if nb is not None and not nb.blocked:
                yield nb


@dataclass(slots=True, frozen=True)
class Grid:
    """N x N board, addressed as cells[col][row]. Read-only once built."""
    size: int
    cells: tuple[tuple[Cell, ...], ...] = field(repr=False)

    # --- lookup ---
    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.size and 0 <= row < self.size

    def cell(self, col: int, row: int) -> Cell:
        if not self.in_bounds(col, row):
            raise IndexError(f"({col}, {row}) out of bounds for {self.size}x{self.size} grid")
        return self.cells[col][row]

    def is_blocked(self, col: int, row: int) -> bool:
        return self.cells[col][row].blocked

    def is_passable(self, col: int, row: int) -> bool:
        return self.in_bounds(col, row) and not self.cells[col][row].blocked

    @property
    def blocked(self) -> frozenset[Coord]:
        return frozenset(c.coordinate for column in self.cells for c in column if c.blocked)

    def coords(self) -> Iterator[Coord]:
        for col in range(self.size):
            for row in range(self.size):
                yield (col, row)

    # --- starting spot ---
    def default_origin(self) -> Coord:
        """Middle of the board, else the first open cell up and to the right of it."""
        mid = self.size // 2
        if not self.cells[mid][mid].blocked:
            return (mid, mid)
        for col in range(mid, self.size):
            for row in range(mid, self.size):
                if not self.cells[col][row].blocked:
                    return (col, row)
        for col, row in self.coords():
            if not self.cells[col][row].blocked:
                return (col, row)
        raise ConfigError(f"no open cell on a {self.size}x{self.size} grid")


def _check_size(size: int) -> None:
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise ConfigError(f"grid size must be a positive int, got {size!r}")


def _link(cells: list[list[Cell]], size: int) -> None:
    # second pass: every cell exists, so neighbors are plain arena lookups
    for col in range(size):
        for row in range(size):
            nbs: list[Optional[Cell]] = []
            for _, (dc, dr) in DIRECTIONS:
                nc, nr = col + dc, row + dr
                nbs.append(cells[nc][nr] if 0 <= nc < size and 0 <= nr < size else None)
            cells[col][row].neighbors = tuple(nbs)


def _freeze(cells: list[list[Cell]], size: int) -> Grid:
    return Grid(size=size, cells=tuple(tuple(column) for column in cells))


def shade_divisor(density: float) -> int:
    """Modulus used by the density roll; 0 means nothing is shaded.

    A cell is blocked iff its draw is divisible by round(1 / density), so the
    real probability is 1 / round(1 / density) (0.15 gives 1/7, not 0.15).
    """
    if isinstance(density, bool) or not isinstance(density, (int, float)) or not 0.0 <= density <= 1.0:
        raise ConfigError(f"density must be within [0, 1], got {density!r}")
    if density == 0:
        return 0
    return round(1 / density)


def build_grid(
    size: int = settings.GRID_SIZE,
    density: float = settings.SHADED_DENSITY,
    rng: random.Random | None = None,
) -> Grid:
    _check_size(size)
    divisor = shade_divisor(density)
    rng = rng if rng is not None else random.Random()

    cells: list[list[Cell]] = []
    for col in range(size):
        column: list[Cell] = []
        for row in range(size):
            roll = rng.randrange(settings.DENSITY_ROLL_RANGE)
            shaded = divisor > 0 and roll % divisor == 0
            column.append(Cell((col, row), shaded))
        cells.append(column)

    _link(cells, size)
    grid = _freeze(cells, size)
    logger.debug("built %dx%d grid (density=%s, 1/%d), %d blocked",
                 size, size, density, divisor, len(grid.blocked))
    return grid


def grid_from_blocked(size: int, blocked: Iterable[Coord] = ()) -> Grid:
    """Same topology as build_grid, with an explicit set of blocked cells."""
    _check_size(size)
    shut = set(blocked)
    for col, row in shut:
        if not (0 <= col < size and 0 <= row < size):
            raise ConfigError(f"blocked cell ({col}, {row}) outside {size}x{size} grid")

    cells = [[Cell((col, row), (col, row) in shut) for row in range(size)] for col in range(size)]
    _link(cells, size)
    return _freeze(cells, size)
