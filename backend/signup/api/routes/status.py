"""Liveness probe endpoint."""

from __future__ import annotations

from flask import Blueprint

from signup.api.deps import json_response, timing

bp = Blueprint("status", __name__)

STATUS_MESSAGE = "Backend is running"


@bp.get("/status")
@timing
def status():
    """Report that the process is up. Always 200."""

    return json_response({"status": "ok", "message": STATUS_MESSAGE})
