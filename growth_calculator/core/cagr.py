from __future__ import annotations

import datetime
from enum import Enum
from typing import List, Optional, Sequence

from pydantic import BaseModel

from growth_calculator.domain.series import NavObservation

DAYS_PER_YEAR = 365.25
LOOKBACK_YEARS = (1, 3, 5, 10)


class LookbackPeriod(str, Enum):
    ONE_YEAR = "1Y"
    THREE_YEARS = "3Y"
    FIVE_YEARS = "5Y"
    TEN_YEARS = "10Y"
    INCEPTION = "Inception"

    @classmethod
    def for_years(cls, years: int) -> "LookbackPeriod":
        return cls(f"{years}Y")


class CagrResult(BaseModel):
    period: LookbackPeriod
    start_date: datetime.date
    end_date: datetime.date
    start_nav: float
    end_nav: float
    years: float
    cagr: float


def calculate_cagr(start_nav: float, end_nav: float, years: float) -> float:
    """Constant annual rate growing start_nav into end_nav over `years`.

    Degenerate inputs (non-positive start value or span) give 0.0 rather
    than NaN/inf.
    """
    if start_nav <= 0 or years <= 0:
        return 0.0
    return (end_nav / start_nav) ** (1.0 / years) - 1.0


def subtract_years(day: datetime.date, years: int) -> datetime.date:
    """Same month/day `years` earlier; Feb 29 falls back to Feb 28."""
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        return day.replace(year=day.year - years, day=28)


def compute_periods(nav_series: Sequence[NavObservation]) -> List[CagrResult]:
    """
    CAGR for Inception plus each standard lookback window ending at the
    latest observation.

    Order: Inception, then 1Y, 3Y, 5Y, 10Y. A window is the first observation
    on or after (end date - n years); windows that start before the first
    observation are left out. Window results use exactly n years, while
    Inception uses the actual day count.
    """
    if not nav_series:
        return []

    ordered = sorted(nav_series, key=lambda entry: entry.date)
    end = ordered[-1]
    inception = ordered[0]

    inception_years = (end.date - inception.date).days / DAYS_PER_YEAR
    results: List[CagrResult] = [
        CagrResult(
            period=LookbackPeriod.INCEPTION,
            start_date=inception.date,
            end_date=end.date,
            start_nav=inception.nav,
            end_nav=end.nav,
            years=inception_years,
            cagr=calculate_cagr(inception.nav, end.nav, inception_years),
        )
    ]

    for years in LOOKBACK_YEARS:
        target = subtract_years(end.date, years)
        if inception.date > target:
            # history does not reach back this far
            continue
        start = next(entry for entry in ordered if entry.date >= target)
        results.append(
            CagrResult(
                period=LookbackPeriod.for_years(years),
                start_date=start.date,
                end_date=end.date,
                start_nav=start.nav,
                end_nav=end.nav,
                years=float(years),
                cagr=calculate_cagr(start.nav, end.nav, years),
            )
        )

    return results


def find_period(results: Sequence[CagrResult], period: LookbackPeriod) -> Optional[CagrResult]:
    for result in results:
        if result.period == period:
            return result
    return None


__all__ = [
    "DAYS_PER_YEAR",
    "LookbackPeriod",
    "CagrResult",
    "calculate_cagr",
    "subtract_years",
    "compute_periods",
    "find_period",
]
