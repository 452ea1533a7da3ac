"""Aggregation helpers for shot statistics."""
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Iterable, List, Optional, Sequence

from .models import ShotRecord, SummaryStats


def mean(values: Sequence[float]) -> float:
    return sum(values) / len(values)


def median(values: Sequence[float]) -> float:
    ordered = sorted(values)
    middle = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[middle]
    return (ordered[middle - 1] + ordered[middle]) / 2


def population_stddev(values: Sequence[float]) -> float:
    centre = mean(values)
    return math.sqrt(mean([(value - centre) ** 2 for value in values]))


def _round_int(value: Optional[float]) -> Optional[int]:
    if value is None:
        return None
    return math.floor(value + 0.5)


def _round_places(value: Optional[float], places: int) -> Optional[float]:
    if value is None:
        return None
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def _known(shots: Iterable[ShotRecord], attribute: str) -> List[float]:
    values = (getattr(shot, attribute) for shot in shots)
    return [value for value in values if value is not None]


def _summarise(
    shots: Sequence[ShotRecord], attribute: str, reducer: Callable[[Sequence[float]], float]
) -> Optional[float]:
    values = _known(shots, attribute)
    if not values:
        return None
    return reducer(values)


def summarize_shots(shots: Sequence[ShotRecord]) -> SummaryStats:
    """Compute session statistics over *shots*.

    Distances use the median, speeds and angles the mean, and dispersion is the
    population standard deviation of carry. Unknown values are left out of each
    metric instead of counting as zero.
    """

    if not shots:
        raise ValueError("Cannot summarise an empty shot list")

    return SummaryStats(
        shot_count=len(shots),
        carry=_round_int(_summarise(shots, "carry", median)),
        total=_round_int(_summarise(shots, "total", median)),
        ball_speed=_round_int(_summarise(shots, "ball_speed", mean)),
        club_speed=_round_int(_summarise(shots, "club_speed", mean)),
        launch=_round_places(_summarise(shots, "launch", mean), 1),
        spin=_round_int(_summarise(shots, "spin", mean)),
        smash=_round_places(_summarise(shots, "smash", mean), 2),
        height=_round_int(_summarise(shots, "height", mean)),
        dispersion=_round_int(_summarise(shots, "carry", population_stddev)),
    )
