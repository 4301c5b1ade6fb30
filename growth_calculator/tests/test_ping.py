from flask.testing import FlaskClient


def test_ping_returns_pong(client: FlaskClient):
    response = client.get("/api/ping")

    assert response.status_code == 200
    body = response.json
    assert body["message"] == "pong"
    assert body["service"] == "Investment Growth Calculator"
    assert body["nav_observations"] > 0
