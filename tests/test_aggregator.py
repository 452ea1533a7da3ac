import math

import pytest

from trackman.aggregator import mean, median, population_stddev, summarize_shots
from trackman.models import ShotRecord


def make_shot(carry, total=None, **metrics):
    return ShotRecord(carry=carry, total=total if total is not None else carry + 10, **metrics)


def test_median_odd_and_even():
    assert median([140, 100, 120]) == 120
    assert median([160, 100, 140, 120]) == 130


def test_population_stddev():
    assert population_stddev([100, 110, 120]) == pytest.approx(math.sqrt(200 / 3))
    assert mean([1, 2, 3, 4]) == 2.5


def test_summary_uses_median_for_distance_and_mean_for_speeds():
    shots = [
        make_shot(100, ball_speed=120.0, club_speed=85.0, launch=18.24, spin=6000.0, smash=1.41, height=25.0),
        make_shot(110, ball_speed=122.0, club_speed=86.0, launch=18.36, spin=6200.0, smash=1.42, height=27.0),
        make_shot(120, ball_speed=125.0, club_speed=88.0, launch=18.0, spin=6400.0, smash=1.42, height=29.0),
    ]

    stats = summarize_shots(shots)

    assert stats.shot_count == 3
    assert stats.carry == 110
    assert stats.total == 120
    assert stats.ball_speed == 122
    assert stats.club_speed == 86
    assert stats.launch == pytest.approx(18.2)
    assert stats.spin == 6200
    assert stats.smash == pytest.approx(1.42)
    assert stats.height == 27
    assert stats.dispersion == 8


def test_unknown_values_are_left_out_not_counted_as_zero():
    shots = [
        make_shot(150, ball_speed=140.0, smash=None),
        make_shot(160, ball_speed=None, smash=1.40),
    ]

    stats = summarize_shots(shots)

    assert stats.ball_speed == 140
    assert stats.smash == pytest.approx(1.4)
    assert stats.launch is None
    assert stats.height is None


def test_integer_rounding_goes_half_up():
    stats = summarize_shots([make_shot(100, height=2.0), make_shot(101, height=3.0)])

    assert stats.carry == 101
    assert stats.height == 3
    assert isinstance(stats.carry, int)


def test_empty_shot_list_is_rejected():
    with pytest.raises(ValueError):
        summarize_shots([])
