"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict, Tuple

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from growth_calculator.config import Settings
from growth_calculator.core.cagr import compute_periods
from growth_calculator.core.calculator import GrowthCalculator
from growth_calculator.core.ping import build_ping_response
from growth_calculator.domain.series import SeriesStore
from growth_calculator.schemas.calculator import CalculateRequest, PeriodsResponse

api_bp = Blueprint("api", __name__)


def _context() -> Tuple[Settings, SeriesStore]:
    context = current_app.extensions["growth_calculator"]
    return context["settings"], context["store"]


def _default_calculator() -> GrowthCalculator:
    settings, store = _context()
    return GrowthCalculator(
        store.navs,
        store.dividends,
        deposit=settings.default_deposit,
        timeframe=settings.default_timeframe,
    )


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    settings, store = _context()
    response = build_ping_response(settings.app_name, store)
    return jsonify(response.model_dump())


@api_bp.get("/calculator/periods")
def periods() -> Any:
    """Historical CAGR for each lookback window."""
    _, store = _context()
    response = PeriodsResponse(periods=compute_periods(store.navs))
    return jsonify(response.model_dump(mode="json"))


@api_bp.get("/calculator")
def calculator_defaults() -> Any:
    """Calculator state for the configured default deposit and timeframe."""
    state = _default_calculator().state
    return jsonify(state.model_dump(mode="json"))


@api_bp.post("/calculator")
def calculate() -> Any:
    """Apply the user's deposit/timeframe edits and return the recomputed state."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False) or {}
    payload = CalculateRequest.model_validate(raw_payload)

    calculator = _default_calculator()
    if payload.deposit is not None:
        calculator.set_deposit(payload.deposit)
    if payload.timeframe is not None:
        calculator.set_timeframe(payload.timeframe)

    return jsonify(calculator.state.model_dump(mode="json"))
