"""Robot state and the commands that transform it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .geo import Orientation, Point, TurnDirection


class Command(Enum):
    """A single instruction from a robot's command script."""

    LEFT = "L"
    RIGHT = "R"
    FORWARD = "F"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> "Command":
        try:
            return cls(symbol)
        except ValueError:
            raise ValueError(f"Unknown command: {symbol!r}") from None


@dataclass(frozen=True)
class Robot:
    """Position and facing of one robot.

    Robots are immutable; every transition produces a new value.
    """

    position: Point
    facing: Orientation

    def advance(self, command: Command) -> "Robot":
        """Return the robot after applying ``command``.

        Turns rotate the facing in place; FORWARD moves one cell in the
        current facing. The result is not bounds-checked.
        """
        if command is Command.LEFT:
            return Robot(self.position, self.facing.turn(TurnDirection.LEFT))
        if command is Command.RIGHT:
            return Robot(self.position, self.facing.turn(TurnDirection.RIGHT))
        return Robot(self.position + self.facing, self.facing)
