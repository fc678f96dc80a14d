# moverange/session.py
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Optional

from moverange import settings
from moverange.errors import InvalidOriginError
from moverange.world.grid import Grid
from moverange.world.path import Path
from moverange.world.pathing import check_origin, compute_range

logger = logging.getLogger(__name__)

Coord = tuple[int, int]


@dataclass(slots=True)
class RangeSession:
    """
    Current origin + the one Reachable-Set computed from it.
    - first set_origin(): any open, in-bounds cell
    - after that: only a cell that was in the previous range
    A rejected move leaves origin and range untouched.
    """
    grid: Grid
    budget: int = settings.MAX_MOVEMENT_POINTS
    _origin: Optional[Coord] = field(default=None, init=False)
    _reachable: dict[Coord, Path] = field(default_factory=dict, init=False)

    @property
    def origin(self) -> Optional[Coord]:
        return self._origin

    @property
    def reachable(self) -> dict[Coord, Path]:
        return self._reachable

    @property
    def started(self) -> bool:
        return self._origin is not None

    def start(self) -> dict[Coord, Path]:
        return self.set_origin(self.grid.default_origin())

    def set_origin(self, coord: Coord) -> dict[Coord, Path]:
        coord = (int(coord[0]), int(coord[1]))
        if self._origin is None:
            check_origin(self.grid, coord)
        elif coord not in self._reachable:
            raise InvalidOriginError(coord, f"not reachable from {self._origin}")

        reachable = compute_range(self.grid, coord, self.budget)
        # origin and range are replaced together
        self._origin, self._reachable = coord, reachable
        logger.info("origin -> %s, %d reachable cells", coord, len(reachable))
        return reachable

    def path_to(self, coord: Coord) -> Optional[Path]:
        return self._reachable.get(coord)

    def cost_to(self, coord: Coord) -> Optional[int]:
        path = self._reachable.get(coord)
        return path.cost if path is not None else None
