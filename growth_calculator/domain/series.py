"""Static NAV and dividend time series backing the calculator."""

from __future__ import annotations

import datetime
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)


class SeriesValidationError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


class NavObservation(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    date: datetime.date
    nav: float = Field(gt=0)


class DividendObservation(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    date: datetime.date
    amount: float = Field(ge=0)


NavSeries = Tuple[NavObservation, ...]
DividendSeries = Tuple[DividendObservation, ...]

RowLike = Union[dict, BaseModel]


def _coerce_rows(rows: Iterable[RowLike], model: type, label: str) -> tuple[list, List[str]]:
    parsed = []
    errors: List[str] = []
    for index, row in enumerate(rows):
        if isinstance(row, model):
            parsed.append(row)
            continue
        raw = row.model_dump() if isinstance(row, BaseModel) else row
        try:
            parsed.append(model.model_validate(raw))
        except ValidationError as exc:
            for err in exc.errors():
                field = ".".join(str(part) for part in err["loc"])
                errors.append(f"{label} row {index} {field}: {err['msg']}")
    return parsed, errors


def validate_nav_series(rows: Iterable[RowLike]) -> NavSeries:
    """Coerce raw rows into a NavSeries.

    The series must be non-empty, every nav positive and the dates strictly
    increasing. All problems are collected before raising.
    """
    observations, errors = _coerce_rows(rows, NavObservation, "nav")
    if not observations and not errors:
        errors.append("nav series is empty")

    for previous, current in zip(observations, observations[1:]):
        if current.date <= previous.date:
            errors.append(
                f"nav dates not strictly increasing at {previous.date.isoformat()} -> {current.date.isoformat()}"
            )

    if errors:
        raise SeriesValidationError(errors)
    return tuple(observations)


def validate_dividend_series(rows: Iterable[RowLike]) -> DividendSeries:
    """Coerce raw rows into a DividendSeries (ascending dates, repeats allowed)."""
    observations, errors = _coerce_rows(rows, DividendObservation, "dividend")

    for previous, current in zip(observations, observations[1:]):
        if current.date < previous.date:
            errors.append(
                f"dividend dates out of order at {previous.date.isoformat()} -> {current.date.isoformat()}"
            )

    if errors:
        raise SeriesValidationError(errors)
    return tuple(observations)


def _read_json_rows(path: Path) -> list:
    with path.open(encoding="utf-8") as handle:
        payload = json.load(handle)
    if not isinstance(payload, list):
        raise SeriesValidationError([f"{path.name}: expected a JSON array"])
    return payload


def load_nav_series(path: Union[str, Path]) -> NavSeries:
    path = Path(path)
    series = validate_nav_series(_read_json_rows(path))
    logger.info(
        "Loaded %d NAV observations from %s (%s to %s)",
        len(series),
        path,
        series[0].date.isoformat(),
        series[-1].date.isoformat(),
    )
    return series


def load_dividend_series(path: Union[str, Path]) -> DividendSeries:
    path = Path(path)
    series = validate_dividend_series(_read_json_rows(path))
    logger.info("Loaded %d dividend observations from %s", len(series), path)
    return series


def sum_dividends(series: Sequence[DividendObservation], start_date: datetime.date, end_date: datetime.date) -> float:
    """Sum distributions paid inside [start_date, end_date]."""
    return sum(
        (entry.amount for entry in series if start_date <= entry.date <= end_date),
        0.0,
    )


@dataclass(frozen=True)
class SeriesStore:
    """Both series, loaded once and shared read-only."""

    navs: NavSeries
    dividends: DividendSeries

    @classmethod
    def from_paths(cls, nav_path: Union[str, Path], dividend_path: Union[str, Path]) -> "SeriesStore":
        return cls(navs=load_nav_series(nav_path), dividends=load_dividend_series(dividend_path))
