"""Text rendering of plans and outcomes, and the outcome verification report."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from rich.console import Console
from rich.text import Text

from .geo import Point
from .mission import Outcome
from .robot import Command, Robot

LOST_SUFFIX = "LOST"


def format_point(point: Point) -> str:
    return f"{point.x} {point.y}"


def format_robot(robot: Robot) -> str:
    return f"{format_point(robot.position)} {robot.facing.symbol}"


def format_commands(commands: Sequence[Command]) -> str:
    return "".join(command.symbol for command in commands)


def format_outcome(outcome: Outcome) -> str:
    """Render ``"x y O"``, with a trailing ``LOST`` for lost robots."""
    text = format_robot(outcome.robot)
    return f"{text} {LOST_SUFFIX}" if outcome.is_lost else text


def iter_plan(
    upper_right: Point, stream: Iterable[Tuple[Robot, Sequence[Command]]]
) -> Iterator[str]:
    """Yield a plan piece by piece; ``stream`` may be endless."""
    yield f"{format_point(upper_right)}\n"
    for robot, commands in stream:
        yield f"{format_robot(robot)}\n{format_commands(commands)}\n\n"


def render_plan(upper_right: Point, stream: Iterable[Tuple[Robot, Sequence[Command]]]) -> str:
    return "".join(iter_plan(upper_right, stream))


def render_outcomes(outcomes: Iterable[Outcome]) -> str:
    return "".join(f"{format_outcome(outcome)}\n" for outcome in outcomes)


@dataclass(frozen=True)
class Check:
    """Engine outcome paired with the outcome reported for the same robot.

    Either side is None when one sequence is shorter than the other.
    """

    expected: Optional[Outcome]
    actual: Optional[Outcome]

    @property
    def matched(self) -> bool:
        return self.expected is not None and self.expected == self.actual


def check_outcomes(expected: Iterable[Outcome], reported: Iterable[Outcome]) -> Iterator[Check]:
    """Pair outcomes in order.

    Both sequences are consumed lazily; a :class:`~martian.parser.ParseError`
    raised by ``reported`` propagates to the caller.
    """
    for expected_outcome, actual in itertools.zip_longest(expected, reported):
        yield Check(expected_outcome, actual)


def _describe(outcome: Optional[Outcome]) -> str:
    return "nothing" if outcome is None else format_outcome(outcome)


def print_checks(checks: Iterable[Check], console: Console) -> int:
    """Print one line per check and return the number of mismatches."""
    mismatches = 0
    for check in checks:
        if check.matched:
            console.print(Text(f"✓ {_describe(check.actual)}", style="green"))
        else:
            mismatches += 1
            console.print(
                Text(
                    f"⨯ Expected: {_describe(check.expected)}, got: {_describe(check.actual)}",
                    style="red",
                )
            )
    return mismatches
