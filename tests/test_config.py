import pytest

from martian.config import MissionConfig


def test_from_env_reads_overrides():
    config = MissionConfig.from_env(
        {"MARTIAN_SEED": "7", "MARTIAN_MAX_GRID": "10", "MARTIAN_MAX_COMMANDS": "20"}
    )
    assert config == MissionConfig(seed=7, max_grid=10, max_commands=20)


def test_from_env_defaults():
    assert MissionConfig.from_env({}) == MissionConfig(seed=12345, max_grid=50, max_commands=100)
    assert MissionConfig.from_env({"MARTIAN_SEED": "  "}).seed == 12345


def test_non_integer_environment_value():
    with pytest.raises(ValueError, match="MARTIAN_MAX_GRID must be an integer"):
        MissionConfig.from_env({"MARTIAN_MAX_GRID": "big"})


@pytest.mark.parametrize("kwargs", [{"seed": -1}, {"max_grid": 0}, {"max_commands": 1}])
def test_invalid_bounds(kwargs):
    with pytest.raises(ValueError):
        MissionConfig(**kwargs)


def test_negative_seed_from_environment():
    with pytest.raises(ValueError, match="seed must be non-negative"):
        MissionConfig.from_env({"MARTIAN_SEED": "-1"})
