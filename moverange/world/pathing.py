# moverange/world/pathing.py
from __future__ import annotations
import logging

from moverange.errors import InvalidOriginError
from moverange.world.grid import Cell, Grid
from moverange.world.path import Path

logger = logging.getLogger(__name__)

Coord = tuple[int, int]


def check_origin(grid: Grid, origin: Coord) -> Cell:
    col, row = origin
    if not grid.in_bounds(col, row):
        raise InvalidOriginError(origin, "out of bounds")
    cell = grid.cell(col, row)
    if cell.blocked:
        raise InvalidOriginError(origin, "cell is blocked")
    return cell


def compute_range(grid: Grid, origin: Coord, budget: int) -> dict[Coord, Path]:
    """
    Exhaustive 4-way DFS from origin, spending one point per step.
    Returns {coord: best Path} for every cell reachable within budget.
    The origin itself is never a key.
    """
    start = check_origin(grid, origin)
    best: dict[Coord, Path] = {}
    visits = 0

    def visit(cell: Cell, path: Path, remaining: int) -> None:
        nonlocal visits
        visits += 1
        here = cell.coordinate

        if remaining <= 0:
            # out of points: an earlier branch got here at least as cheaply.
            # cost 0 only happens for a zero budget, where nothing is recorded.
            if here not in best and path.cost > 0:
                best[here] = path
            return

        known = best.get(here)
        if known is not None:
            if path.cost < known.cost:
                best[here] = path
        elif path.cost > 0:
            best[here] = path

        for nb in cell.open_neighbors():
            step = nb.coordinate
            # no backtracking within a branch
            if step == origin or step in path:
                continue
            visit(nb, path.extend(step), remaining - 1)

    visit(start, Path.origin(), budget)
    logger.debug("range from %s (budget %d): %d cells, %d visits", origin, budget, len(best), visits)
    return best


def range_costs(reachable: dict[Coord, Path]) -> dict[Coord, int]:
    return {coord: path.cost for coord, path in reachable.items()}
