# moverange/entities/token.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, List

from moverange import settings

Coord = tuple[int, int]

@dataclass(slots=True)
class Token:
    """The agent's marker on the board. Walks a stored path one tile at a time."""
    col: int
    row: int

    move_speed_tiles: float = settings.TOKEN_MOVE_SPEED_TPS
    _move_queue: List[Coord] = field(default_factory=list, init=False)   # remaining tiles (excluding current)
    _move_from: Optional[Coord] = field(default=None, init=False)
    _move_to: Optional[Coord] = field(default=None, init=False)
    _move_t: float = field(default=0.0, init=False)  # 0..1 along current segment

    @property
    def coord(self) -> Coord:
        return (self.col, self.row)

    # -------- movement control --------
    def is_moving(self) -> bool:
        return self._move_to is not None

    def start_move(self, moves: List[Coord] | tuple[Coord, ...]) -> None:
        """moves excludes the tile the token stands on (same as Path.moves)."""
        self._move_queue = list(moves)
        self._prime_next_segment()

    def _prime_next_segment(self) -> None:
        if not self._move_queue:
            self._move_from = None
            self._move_to = None
            self._move_t = 0.0
            return
        self._move_from = (self.col, self.row)
        self._move_to = self._move_queue.pop(0)
        self._move_t = 0.0

    def update(self, dt: float) -> None:
        if self._move_to is None or self._move_from is None:
            return
        self._move_t += self.move_speed_tiles * dt
        if self._move_t >= 1.0:
            # arrive at next tile
            self.col, self.row = self._move_to
            self._prime_next_segment()

    def position(self) -> tuple[float, float]:
        """Fractional (col, row) for drawing mid-step."""
        if self._move_to is not None and self._move_from is not None:
            (fc, fr), (tc, tr) = self._move_from, self._move_to
            t = self._move_t
            return (fc + (tc - fc) * t, fr + (tr - fr) * t)
        return (float(self.col), float(self.row))
