from __future__ import annotations

from datetime import date

import pytest
from flask import Flask
from flask.testing import FlaskClient

from growth_calculator.app import create_app
from growth_calculator.config import Settings
from growth_calculator.domain.series import (
    DividendObservation,
    NavObservation,
    SeriesStore,
)


def make_navs(*rows: tuple) -> tuple:
    return tuple(NavObservation(date=date.fromisoformat(day), nav=nav) for day, nav in rows)


@pytest.fixture()
def decade_navs() -> tuple:
    """Sparse ten-year history: 100 -> 150 -> 200."""
    return make_navs(("2015-01-01", 100.0), ("2020-01-01", 150.0), ("2025-01-01", 200.0))


@pytest.fixture()
def two_dividends() -> tuple:
    return (
        DividendObservation(date=date(2019, 6, 1), amount=5.0),
        DividendObservation(date=date(2021, 6, 1), amount=7.0),
    )


@pytest.fixture()
def app() -> Flask:
    return create_app(Settings())


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def short_history_client() -> FlaskClient:
    store = SeriesStore(
        navs=make_navs(("2023-01-01", 10.0), ("2024-01-01", 11.0), ("2025-01-01", 12.1)),
        dividends=(),
    )
    with create_app(Settings(), store=store).test_client() as test_client:
        yield test_client
