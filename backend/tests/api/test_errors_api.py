"""Tests for the JSON error envelope on non-validation failures."""

from __future__ import annotations

import logging


def test_unknown_route(client):
    response = client.get("/nope")

    assert response.status_code == 404
    assert response.get_json() == {"error": "Not Found", "message": "Route '/nope' not found"}


def test_wrong_method(client):
    response = client.get("/users")

    assert response.status_code == 405
    assert response.get_json() == {
        "error": "Method Not Allowed",
        "message": "Method GET not allowed on '/users'",
    }
    assert "POST" in response.headers["Allow"]


def test_identity_failure_is_a_500(app, client, valid_payload, caplog):
    class BrokenIds:
        def fresh_id(self) -> str:
            raise RuntimeError("entropy source unavailable")

    app.extensions["id_provider"] = BrokenIds()

    with caplog.at_level(logging.ERROR, logger="signup.core.errors"):
        response = client.post("/users", json=valid_payload)

    assert response.status_code == 500
    assert response.get_json() == {"error": "Internal Server Error", "message": "Unexpected error"}
    assert any(r.exc_info for r in caplog.records if r.name == "signup.core.errors")


def test_validation_failure_logged_as_warning(client, caplog):
    with caplog.at_level(logging.WARNING, logger="signup.core.errors"):
        client.post("/users", json={})

    records = [r for r in caplog.records if r.name == "signup.core.errors"]
    assert [r.levelno for r in records] == [logging.WARNING]
    assert records[0].status == 400
