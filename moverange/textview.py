# moverange/textview.py
from __future__ import annotations
from typing import Mapping, Optional

from moverange import settings
from moverange.world.grid import Grid
from moverange.world.path import Path

Coord = tuple[int, int]


def cell_label(grid: Grid, coord: Coord, origin: Optional[Coord], reachable: Mapping[Coord, Path]) -> str:
    if coord == origin:
        return settings.PLAYER_CELL_TEXT
    path = reachable.get(coord)
    if path is not None:
        return str(path.cost)
    if grid.is_blocked(*coord):
        return settings.SHADED_CELL_TEXT
    return settings.EMPTY_CELL_TEXT


def render_board(grid: Grid, origin: Optional[Coord] = None, reachable: Mapping[Coord, Path] | None = None) -> str:
    """Plain-text board, row size-1 on top (the board's origin is bottom-left)."""
    reachable = reachable or {}
    labels = {c: cell_label(grid, c, origin, reachable) for c in grid.coords()}
    width = max(len(s) for s in labels.values())
    lines = []
    for row in reversed(range(grid.size)):
        lines.append(" ".join(labels[(col, row)].rjust(width) for col in range(grid.size)))
    return "\n".join(lines)


def render_path(path: Path, origin: Optional[Coord] = None) -> str:
    steps = ([origin] if origin is not None else []) + list(path.moves)
    return " -> ".join(f"({c}, {r})" for c, r in steps)
