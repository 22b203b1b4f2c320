"""Grid geometry: integer points and compass orientations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


@dataclass(frozen=True)
class Point:
    """Integer grid coordinate.

    Points are values: equality and hashing are structural. A point may
    temporarily lie outside the grid (a candidate move), it is the mission
    that decides whether it is on the grid.

    Attributes:
        x: Column, growing east.
        y: Row, growing north.
    """

    x: int
    y: int

    def __add__(self, other: Union["Point", "Orientation"]) -> "Point":
        if isinstance(other, Orientation):
            other = other.vector
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)


ORIGIN = Point(0, 0)


class TurnDirection(Enum):
    LEFT = "L"
    RIGHT = "R"


class Orientation(Enum):
    """One of the four compass directions a robot can face."""

    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def vector(self) -> Point:
        """Unit displacement of a single step in this direction."""
        return _VECTORS[self]

    def turn(self, direction: TurnDirection) -> "Orientation":
        """Rotate a quarter turn; LEFT is counter-clockwise."""
        step = -1 if direction is TurnDirection.LEFT else 1
        return _CLOCKWISE[(_CLOCKWISE.index(self) + step) % len(_CLOCKWISE)]

    @classmethod
    def from_symbol(cls, symbol: str) -> "Orientation":
        try:
            return cls(symbol)
        except ValueError:
            raise ValueError(f"Unknown orientation: {symbol!r}") from None


_CLOCKWISE = (Orientation.NORTH, Orientation.EAST, Orientation.SOUTH, Orientation.WEST)

_VECTORS = {
    Orientation.NORTH: Point(0, 1),
    Orientation.EAST: Point(1, 0),
    Orientation.SOUTH: Point(0, -1),
    Orientation.WEST: Point(-1, 0),
}
