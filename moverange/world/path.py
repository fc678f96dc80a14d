# moverange/world/path.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, Optional

Coord = tuple[int, int]


@dataclass(slots=True, frozen=True)
class Path:
    """
    Immutable list of coordinates stepped through after the origin.
    Each extend() links to its parent instead of copying, so sibling
    branches share their common prefix. cost == len(moves).
    """
    cost: int = 0
    step: Optional[Coord] = None
    parent: Optional["Path"] = field(default=None, repr=False)

    @classmethod
    def origin(cls) -> "Path":
        return cls()

    def extend(self, coord: Coord) -> "Path":
        return Path(cost=self.cost + 1, step=coord, parent=self)

    def _walk_back(self) -> Iterator[Coord]:
        node: Optional[Path] = self
        while node is not None and node.step is not None:
            yield node.step
            node = node.parent

    @property
    def moves(self) -> tuple[Coord, ...]:
        return tuple(reversed(tuple(self._walk_back())))

    @property
    def destination(self) -> Optional[Coord]:
        return self.step

    def contains(self, coord: Coord) -> bool:
        # linear; paths never outgrow the movement budget
        for c in self._walk_back():
            if c == coord:
                return True
        return False

    def __contains__(self, coord: object) -> bool:
        return self.contains(coord)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"Path(cost={self.cost}, moves={list(self.moves)})"
