"""Martian robots: grid missions where lost robots leave a scent behind."""

from .geo import Orientation, Point, TurnDirection
from .robot import Command, Robot
from .mission import Lost, Mission, Outcome, Success
from .parser import MissionOutcomes, MissionPlan, ParseError

__all__ = [
    "Command",
    "Lost",
    "Mission",
    "MissionOutcomes",
    "MissionPlan",
    "Orientation",
    "Outcome",
    "ParseError",
    "Point",
    "Robot",
    "Success",
    "TurnDirection",
]
