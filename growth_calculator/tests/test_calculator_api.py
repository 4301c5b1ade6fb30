from __future__ import annotations

from math import isclose

from flask.testing import FlaskClient

from growth_calculator.core.projection import project_value


def test_periods_endpoint_lists_all_windows(client: FlaskClient):
    resp = client.get("/api/calculator/periods")

    assert resp.status_code == 200
    periods = resp.get_json()["periods"]
    assert [row["period"] for row in periods] == ["Inception", "1Y", "3Y", "5Y", "10Y"]
    inception = periods[0]
    assert all(row["end_date"] == inception["end_date"] for row in periods)
    assert len(inception["start_date"]) == 10


def test_default_state(client: FlaskClient):
    resp = client.get("/api/calculator")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["status"] == "ready"
    assert body["input"] == {"deposit": 50000.0, "timeframe": "10Y"}
    output = body["output"]
    assert output["projected_value"] > 0
    assert len(output["chart_series"]) in (10, 11)
    assert len(output["tick_years"]) <= 6


def test_calculate_applies_edits(client: FlaskClient):
    resp = client.post("/api/calculator", json={"deposit": 100000, "timeframe": "5Y"})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["input"] == {"deposit": 100000.0, "timeframe": "5Y"}
    output = body["output"]
    assert output["period"] == "5Y"
    assert output["years"] == 5
    assert isclose(output["projected_value"], project_value(100000.0, output["cagr"], 5))
    assert output["dividend_sum"] > 0


def test_calculate_with_empty_body_uses_defaults(client: FlaskClient):
    resp = client.post("/api/calculator", json={})

    assert resp.status_code == 200
    assert resp.get_json()["input"]["timeframe"] == "10Y"


def test_invalid_deposit_returns_422(client: FlaskClient):
    resp = client.post("/api/calculator", json={"deposit": -5})

    assert resp.status_code == 422
    body = resp.get_json()
    assert "detail" in body
    assert body["detail"][0]["loc"] == ["deposit"]


def test_unknown_timeframe_returns_422(client: FlaskClient):
    resp = client.post("/api/calculator", json={"timeframe": "7Y"})
    assert resp.status_code == 422


def test_unknown_field_returns_422(client: FlaskClient):
    resp = client.post("/api/calculator", json={"deposit": 1000, "currency": "SAR"})
    assert resp.status_code == 422


def test_insufficient_history_is_not_an_error(short_history_client: FlaskClient):
    resp = short_history_client.post("/api/calculator", json={"timeframe": "10Y"})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["status"] == "insufficient_history"
    assert body["output"] is None
    assert body["available_periods"] == ["Inception", "1Y"]


def test_cors_header_for_frontend_origin(client: FlaskClient):
    resp = client.get("/api/ping", headers={"Origin": "http://localhost:5173"})
    assert resp.headers.get("Access-Control-Allow-Origin") == "http://localhost:5173"
