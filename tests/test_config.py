import pytest

from gridsnake.config import Config, tick_interval_ms
from gridsnake.errors import ConfigError


@pytest.mark.parametrize("score,expected", [(0, 150), (1, 148), (25, 100), (50, 50), (60, 50), (1000, 50)])
def test_tick_interval(score, expected):
    assert tick_interval_ms(score) == expected


def test_tick_interval_non_increasing():
    intervals = [tick_interval_ms(s) for s in range(200)]
    assert all(a >= b for a, b in zip(intervals, intervals[1:]))
    assert min(intervals) == 50


@pytest.mark.parametrize("length", [0, 2, 4])
def test_rejects_bad_snake_length(length):
    with pytest.raises(ConfigError):
        Config(initial_snake_length=length)


def test_rejects_unknown_theme():
    with pytest.raises(ConfigError):
        Config(theme="neon")


def test_rejects_food_off_grid():
    with pytest.raises(ConfigError):
        Config(initial_food=(20, 3))


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        Config(seed="abc")


@pytest.mark.parametrize("food", [(1, 2, 3), (4,), 7, "ab", (1.5, 2), (True, 3)])
def test_rejects_malformed_food(food):
    with pytest.raises(ConfigError):
        Config(initial_food=food)


def test_accepts_food_as_list():
    assert Config(initial_food=[3, 4]).initial_food == (3, 4)
