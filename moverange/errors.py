# moverange/errors.py
from __future__ import annotations

Coord = tuple[int, int]


class MoveRangeError(Exception):
    """Base exception for the movement-range core."""


class ConfigError(MoveRangeError, ValueError):
    """Raised when a board cannot be built from the given size/density."""


class InvalidOriginError(MoveRangeError, ValueError):
    """Raised when an origin is off the board, blocked, or not reachable."""

    def __init__(self, coordinate: Coord, reason: str) -> None:
        super().__init__(f"invalid origin {coordinate}: {reason}")
        self.coordinate = coordinate
        self.reason = reason
