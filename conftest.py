# conftest.py
import pytest

from martian.geo import Orientation, Point
from martian.robot import Command, Robot

CANONICAL_PLAN = b"""5 3
1 1 E
RFRFRFRF

3 2 N
FRRFLLFFRRFLL

0 3 W
LLFFFLFLFL
"""

CANONICAL_OUTCOMES = b"""1 1 E
3 3 N LOST
2 3 S
"""


def _commands(text):
    return [Command.from_symbol(symbol) for symbol in text]


@pytest.fixture
def canonical_plan():
    return CANONICAL_PLAN


@pytest.fixture
def canonical_outcomes():
    return CANONICAL_OUTCOMES


@pytest.fixture
def canonical_robots():
    return [
        (Robot(Point(1, 1), Orientation.EAST), _commands("RFRFRFRF")),
        (Robot(Point(3, 2), Orientation.NORTH), _commands("FRRFLLFFRRFLL")),
        (Robot(Point(0, 3), Orientation.WEST), _commands("LLFFFLFLFL")),
    ]
