"""Dispatch engine: fold semantics, scent protection, and dispatch order."""

import pytest

from martian.generator import Generator
from martian.geo import Orientation, Point
from martian.mission import Lost, Mission, Success
from martian.robot import Command, Robot

N, E, S, W = Orientation.NORTH, Orientation.EAST, Orientation.SOUTH, Orientation.WEST


def _commands(text):
    return [Command.from_symbol(symbol) for symbol in text]


def test_simple_robot():
    mission = Mission(Point(5, 3))
    outcome = mission.dispatch(Robot(Point(1, 1), E), _commands("RFRFRFRF"))
    assert outcome == Success(Robot(Point(1, 1), E))
    assert not outcome.is_lost


def test_robot_is_lost():
    mission = Mission(Point(5, 3))
    outcome = mission.dispatch(Robot(Point(3, 2), N), _commands("FRRFLLFFRRFLL"))
    assert outcome == Lost(Robot(Point(3, 3), N))
    assert outcome.is_lost


def test_robots_are_clever(canonical_robots):
    expected = [
        Success(Robot(Point(1, 1), E)),
        Lost(Robot(Point(3, 3), N)),
        Success(Robot(Point(2, 3), S)),
    ]
    assert list(Mission.run(Point(5, 3), canonical_robots)) == expected


def test_success_and_lost_with_same_robot_differ():
    robot = Robot(Point(1, 1), E)
    assert Success(robot) != Lost(robot)


@pytest.mark.parametrize("facing", list(Orientation))
def test_empty_command_list_leaves_robot_unchanged(facing):
    robot = Robot(Point(0, 0), facing)
    assert Mission(Point(5, 3)).dispatch(robot, []) == Success(robot)


def test_dispatch_is_deterministic(canonical_robots):
    for robot, commands in canonical_robots:
        first = Mission(Point(5, 3)).dispatch(robot, commands)
        second = Mission(Point(5, 3)).dispatch(robot, commands)
        assert first == second


def test_scent_protects_same_point_and_facing():
    mission = Mission(Point(5, 3))
    assert mission.dispatch(Robot(Point(3, 3), N), _commands("F")) == Lost(Robot(Point(3, 3), N))
    # The second robot's forward move is dropped, the turn still applies.
    assert mission.dispatch(Robot(Point(3, 3), N), _commands("FL")) == Success(Robot(Point(3, 3), W))


def test_scent_does_not_protect_other_facing():
    mission = Mission(Point(5, 3))
    assert mission.dispatch(Robot(Point(5, 3), N), _commands("F")) == Lost(Robot(Point(5, 3), N))
    assert mission.dispatch(Robot(Point(5, 3), E), _commands("F")) == Lost(Robot(Point(5, 3), E))
    # Both facings are now scented at the corner.
    assert mission.dispatch(Robot(Point(5, 3), E), _commands("FLF")) == Success(Robot(Point(5, 3), N))


def test_scent_is_keyed_by_departure_point():
    mission = Mission(Point(5, 3))
    assert mission.dispatch(Robot(Point(0, 0), W), _commands("F")) == Lost(Robot(Point(0, 0), W))
    # Same destination column, different departure point: not protected.
    assert mission.dispatch(Robot(Point(0, 1), W), _commands("F")) == Lost(Robot(Point(0, 1), W))


def test_scents_are_shared_only_within_a_mission():
    first = Mission(Point(5, 3))
    first.dispatch(Robot(Point(3, 3), N), _commands("F"))
    second = Mission(Point(5, 3))
    assert second.dispatch(Robot(Point(3, 3), N), _commands("F")) == Lost(Robot(Point(3, 3), N))


def test_dispatch_order_is_observable():
    walker = (Robot(Point(3, 2), N), _commands("FF"))
    turner = (Robot(Point(3, 3), N), _commands("FL"))

    assert list(Mission.run(Point(5, 3), [walker, turner])) == [
        Lost(Robot(Point(3, 3), N)),
        Success(Robot(Point(3, 3), W)),
    ]
    assert list(Mission.run(Point(5, 3), [turner, walker])) == [
        Lost(Robot(Point(3, 3), N)),
        Success(Robot(Point(3, 3), N)),
    ]


def test_single_cell_grid():
    mission = Mission(Point(0, 0))
    for facing in Orientation:
        assert mission.dispatch(Robot(Point(0, 0), facing), _commands("F")) == Lost(
            Robot(Point(0, 0), facing)
        )
    assert mission.dispatch(Robot(Point(0, 0), N), _commands("FRFRFRF")) == Success(
        Robot(Point(0, 0), W)
    )


def test_lost_robots_are_reported_on_the_grid():
    generator = Generator(seed=7)
    mission = Mission(generator.upper_right)
    for robot, commands in generator.take(200):
        outcome = mission.dispatch(robot, commands)
        assert mission.contains(outcome.robot.position)


def test_contains_is_inclusive():
    mission = Mission(Point(5, 3))
    assert mission.contains(Point(0, 0))
    assert mission.contains(Point(5, 3))
    assert not mission.contains(Point(6, 3))
    assert not mission.contains(Point(5, 4))
    assert not mission.contains(Point(-1, 0))
    assert not mission.contains(Point(0, -1))
