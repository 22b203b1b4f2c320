"""Runtime configuration for mission generation.

Defaults can be overridden through environment variables, read by
:meth:`MissionConfig.from_env`:

- ``MARTIAN_SEED``: seed of the pseudo-random mission generator
- ``MARTIAN_MAX_GRID``: largest coordinate of a generated grid corner
- ``MARTIAN_MAX_COMMANDS``: exclusive upper bound on generated script length
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_SEED = 12345
DEFAULT_MAX_GRID = 50
DEFAULT_MAX_COMMANDS = 100


def _env_int(name: str, default: int, env: Mapping[str, str]) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class MissionConfig:
    """Parameters of the pseudo-random mission generator."""

    seed: int = DEFAULT_SEED
    max_grid: int = DEFAULT_MAX_GRID
    max_commands: int = DEFAULT_MAX_COMMANDS

    def __post_init__(self) -> None:
        if self.seed < 0:
            raise ValueError(f"seed must be non-negative, got {self.seed}")
        if self.max_grid < 1:
            raise ValueError(f"max_grid must be at least 1, got {self.max_grid}")
        if self.max_commands < 2:
            raise ValueError(f"max_commands must be at least 2, got {self.max_commands}")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "MissionConfig":
        """Build a configuration from ``env`` (the process environment by default).

        Raises:
            ValueError: If a variable is not an integer or is out of range.
        """
        env = os.environ if env is None else env
        return cls(
            seed=_env_int("MARTIAN_SEED", DEFAULT_SEED, env),
            max_grid=_env_int("MARTIAN_MAX_GRID", DEFAULT_MAX_GRID, env),
            max_commands=_env_int("MARTIAN_MAX_COMMANDS", DEFAULT_MAX_COMMANDS, env),
        )
