from __future__ import annotations

import datetime
import logging
from enum import Enum
from typing import Iterable, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from growth_calculator import config
from growth_calculator.core.cagr import LookbackPeriod, compute_periods, find_period
from growth_calculator.core.chart import ChartPoint, reduce_to_yearly, select_tick_years
from growth_calculator.core.projection import project_value
from growth_calculator.domain.series import (
    DividendObservation,
    NavObservation,
    sum_dividends,
)

logger = logging.getLogger(__name__)


class CalculatorInput(BaseModel):
    """User selection; omitted fields fall back to the configured defaults."""

    model_config = ConfigDict(extra="forbid", validate_default=True)

    deposit: float = Field(
        default_factory=lambda: config.settings.default_deposit,
        gt=0,
        allow_inf_nan=False,
    )
    timeframe: LookbackPeriod = Field(default_factory=lambda: config.settings.default_timeframe)


class CalculatorStatus(str, Enum):
    READY = "ready"
    INSUFFICIENT_HISTORY = "insufficient_history"
    NO_DATA = "no_data"


class CalculatorOutput(BaseModel):
    period: LookbackPeriod
    period_label: str
    start_date: datetime.date
    end_date: datetime.date
    years: float

    cagr: float
    projected_value: float
    total_gain: float
    total_return: float
    dividend_sum: float

    chart_series: List[ChartPoint]
    tick_years: List[str]


class CalculatorState(BaseModel):
    """Everything the UI needs for one (deposit, timeframe) selection.

    `output` is only set when status is READY; other statuses carry a
    human-readable `message` instead of leftover numbers.
    """

    input: CalculatorInput
    status: CalculatorStatus
    output: Optional[CalculatorOutput] = None
    message: Optional[str] = None
    available_periods: List[LookbackPeriod] = []


def period_label(period: LookbackPeriod) -> str:
    if period == LookbackPeriod.INCEPTION:
        return "since inception"
    return period.value


def compute_output(
    nav_series: Sequence[NavObservation],
    dividend_series: Sequence[DividendObservation],
    calculator_input: CalculatorInput,
) -> CalculatorState:
    """
    Recompute the full calculator state from scratch.

    Steps:
      1) CAGR for every lookback period over the whole NAV history.
      2) Pick the period matching the selected timeframe.
      3) Project the deposit at that CAGR for the period's years.
      4) Sum dividends and downsample the NAV chart over the same window.
    """
    periods = compute_periods(nav_series)
    available = [result.period for result in periods]

    if not periods:
        return CalculatorState(
            input=calculator_input,
            status=CalculatorStatus.NO_DATA,
            message="No NAV history is available",
            available_periods=available,
        )

    selected = find_period(periods, calculator_input.timeframe)
    if selected is None:
        logger.warning(
            "Timeframe %s unavailable; NAV history resolves only %s",
            calculator_input.timeframe.value,
            ", ".join(period.value for period in available),
        )
        return CalculatorState(
            input=calculator_input,
            status=CalculatorStatus.INSUFFICIENT_HISTORY,
            message=f"Not enough NAV history to compute a {calculator_input.timeframe.value} return",
            available_periods=available,
        )

    deposit = calculator_input.deposit
    projected = project_value(deposit, selected.cagr, selected.years)
    chart_series = reduce_to_yearly(nav_series, selected.start_date, selected.end_date)
    total_gain = projected - deposit

    output = CalculatorOutput(
        period=selected.period,
        period_label=period_label(selected.period),
        start_date=selected.start_date,
        end_date=selected.end_date,
        years=selected.years,
        cagr=selected.cagr,
        projected_value=projected,
        total_gain=total_gain,
        total_return=total_gain / deposit,
        dividend_sum=sum_dividends(dividend_series, selected.start_date, selected.end_date),
        chart_series=chart_series,
        tick_years=select_tick_years(chart_series),
    )
    logger.debug(
        "Recomputed %s: cagr=%.6f projected=%.2f points=%d",
        selected.period.value,
        output.cagr,
        output.projected_value,
        len(chart_series),
    )
    return CalculatorState(
        input=calculator_input,
        status=CalculatorStatus.READY,
        output=output,
        available_periods=available,
    )


class GrowthCalculator:
    """Holds the user's current selection and republishes state on every edit."""

    def __init__(
        self,
        nav_series: Iterable[NavObservation],
        dividend_series: Iterable[DividendObservation] = (),
        deposit: Optional[float] = None,
        timeframe: Optional[LookbackPeriod] = None,
    ):
        self._navs = tuple(nav_series)
        self._dividends = tuple(dividend_series)

        values = {}
        if deposit is not None:
            values["deposit"] = deposit
        if timeframe is not None:
            values["timeframe"] = timeframe
        self._input = CalculatorInput.model_validate(values)
        self._state = compute_output(self._navs, self._dividends, self._input)

    @property
    def input(self) -> CalculatorInput:
        return self._input

    @property
    def state(self) -> CalculatorState:
        return self._state

    def set_deposit(self, value: float) -> CalculatorState:
        return self._update(deposit=value)

    def set_timeframe(self, period: LookbackPeriod) -> CalculatorState:
        return self._update(timeframe=period)

    def _update(self, **changes) -> CalculatorState:
        # validate before touching state so a bad edit keeps the last good one
        updated = CalculatorInput.model_validate({**self._input.model_dump(), **changes})
        self._input = updated
        self._state = compute_output(self._navs, self._dividends, updated)
        return self._state


__all__ = [
    "CalculatorInput",
    "CalculatorStatus",
    "CalculatorOutput",
    "CalculatorState",
    "period_label",
    "compute_output",
    "GrowthCalculator",
]
