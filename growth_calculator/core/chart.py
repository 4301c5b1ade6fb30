"""Yearly downsampling of NAV history for the growth chart."""

from __future__ import annotations

import datetime
import math
from typing import Dict, List, Sequence

from pydantic import BaseModel

from growth_calculator.domain.series import NavObservation

MAX_INTERIOR_TICKS = 4
DENSE_SERIES_THRESHOLD = 4


class ChartPoint(BaseModel):
    year: str
    value: float


def reduce_to_yearly(
    nav_series: Sequence[NavObservation],
    start_date: datetime.date,
    end_date: datetime.date,
) -> List[ChartPoint]:
    """One point per calendar year inside [start_date, end_date].

    The latest observation of each year is that year's value.
    """
    by_year: Dict[str, NavObservation] = {}
    for entry in sorted(nav_series, key=lambda e: e.date):
        if start_date <= entry.date <= end_date:
            by_year[entry.date.isoformat()[:4]] = entry

    return [ChartPoint(year=year, value=by_year[year].nav) for year in sorted(by_year)]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def select_tick_years(series: Sequence[ChartPoint]) -> List[str]:
    """
    Axis labels for a yearly series.

    Short series (four years or fewer) label every year. Longer ones keep the
    first and last year plus up to four evenly spaced years in between.
    """
    years: List[str] = []
    for point in series:
        if point.year not in years:
            years.append(point.year)

    n = len(years)
    if n <= DENSE_SERIES_THRESHOLD:
        return years

    ticks = [years[0]]
    steps = min(MAX_INTERIOR_TICKS, n - 2)
    for i in range(1, steps + 1):
        year = years[_round_half_up(i * (n - 1) / (steps + 1))]
        if year not in ticks:
            ticks.append(year)
    if years[-1] not in ticks:
        ticks.append(years[-1])
    return ticks


__all__ = ["ChartPoint", "reduce_to_yearly", "select_tick_years"]
