"""Seed-deterministic producer of random missions for fixtures and checks."""

from __future__ import annotations

import itertools
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .config import MissionConfig
from .geo import Orientation, Point
from .robot import Command, Robot

_ORIENTATIONS = tuple(Orientation)
_COMMANDS = tuple(Command)


class Generator:
    """Pseudo-random mission: a grid corner plus an endless robot sequence.

    Every robot is drawn from its own random stream derived from
    ``(seed, index)``, so any robot can be recomputed on its own without
    replaying the ones before it.

    Args:
        seed: Non-negative seed; defaults to ``config.seed``.
        config: Bounds on the grid and on command script length.
    """

    def __init__(self, seed: Optional[int] = None, config: Optional[MissionConfig] = None):
        self.config = config or MissionConfig()
        self.seed = self.config.seed if seed is None else seed
        if self.seed < 0:
            raise ValueError(f"seed must be non-negative, got {self.seed}")

        rng = np.random.default_rng(np.random.SeedSequence(self.seed))
        x, y = rng.integers(1, self.config.max_grid + 1, size=2)
        self.upper_right = Point(int(x), int(y))

    def _rng(self, index: int) -> np.random.Generator:
        return np.random.default_rng(np.random.SeedSequence(self.seed, spawn_key=(index,)))

    def robot_at(self, index: int) -> Tuple[Robot, List[Command]]:
        """Return the ``index``-th robot and its command script."""
        if index < 0:
            raise IndexError(f"robot index must be non-negative, got {index}")
        rng = self._rng(index)
        position = Point(
            int(rng.integers(0, self.upper_right.x)),
            int(rng.integers(0, self.upper_right.y)),
        )
        facing = _ORIENTATIONS[int(rng.integers(0, len(_ORIENTATIONS)))]
        count = int(rng.integers(1, self.config.max_commands))
        commands = [_COMMANDS[i] for i in rng.integers(0, len(_COMMANDS), size=count)]
        return Robot(position, facing), commands

    def __iter__(self) -> Iterator[Tuple[Robot, List[Command]]]:
        return (self.robot_at(index) for index in itertools.count())

    def take(self, n: int) -> List[Tuple[Robot, List[Command]]]:
        return list(itertools.islice(self, n))
