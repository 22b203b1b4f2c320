"""Dispatch engine: runs robots over a bounded grid with scent memory.

A robot that steps off the grid is lost, but it leaves a scent at the
point it departed from. Any later robot on the same mission that tries to
leave from that point with the same facing ignores the move instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Sequence, Set, Tuple

from .geo import ORIGIN, Orientation, Point
from .robot import Command, Robot


@dataclass(frozen=True)
class Outcome:
    """Terminal result of dispatching one robot."""

    robot: Robot

    @property
    def is_lost(self) -> bool:
        return isinstance(self, Lost)


@dataclass(frozen=True)
class Success(Outcome):
    """The robot finished its script on the grid."""


@dataclass(frozen=True)
class Lost(Outcome):
    """The robot fell off; ``robot`` is its last on-grid state."""


class Mission:
    """One simulation run over a fixed grid.

    The mission owns the scent table shared by every robot dispatched to
    it, so the order robots are dispatched in is significant.

    Args:
        upper_right: Inclusive upper-right corner of the grid. The lower-left
            corner is always the origin.
    """

    def __init__(self, upper_right: Point) -> None:
        self.upper_right = upper_right
        self._scents: Dict[Point, Set[Orientation]] = {}

    @classmethod
    def run(
        cls,
        upper_right: Point,
        source: Iterable[Tuple[Robot, Sequence[Command]]],
    ) -> Iterator[Outcome]:
        """Lazily dispatch every ``(robot, commands)`` pair on one new mission."""
        mission = cls(upper_right)
        for robot, commands in source:
            yield mission.dispatch(robot, commands)

    def contains(self, point: Point) -> bool:
        return (
            ORIGIN.x <= point.x <= self.upper_right.x
            and ORIGIN.y <= point.y <= self.upper_right.y
        )

    def dispatch(self, robot: Robot, commands: Sequence[Command]) -> Outcome:
        """Execute ``commands`` for ``robot`` and report where it ended up.

        Each command is applied to the last on-grid state. A move that would
        leave the grid is dropped if a scent for the attempted facing exists
        at the departure point; otherwise the scent is recorded and the robot
        is lost at the departure point.
        """
        last_good = robot
        for command in commands:
            candidate = last_good.advance(command)
            if self.contains(candidate.position):
                last_good = candidate
                continue

            scent = self._scents.setdefault(last_good.position, set())
            if candidate.facing in scent:
                continue
            scent.add(candidate.facing)
            return Lost(last_good)

        return Success(last_good)
