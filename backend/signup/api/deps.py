"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar

from flask import Response, current_app, jsonify, request

from signup.core.logger import ensure_request_id
from signup.services._shared.base import ServiceContext
from signup.services.registration.service import RegistrationService

F = TypeVar("F", bound=Callable[..., Any])


def json_body() -> dict[str, Any]:
    """Return the request JSON object, or ``{}`` when absent or not an object."""

    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def service_context() -> ServiceContext:
    """Build the request-scoped context handed to services."""

    return ServiceContext(request_id=ensure_request_id(), remote_addr=request.remote_addr)


def registration_service() -> RegistrationService:
    """Return a service wired to the identity collaborators of the app.

    ``app.extensions["id_provider"]`` and ``app.extensions["clock"]`` override
    the UUID4 and UTC defaults (tests install deterministic stubs there).
    """

    return RegistrationService(
        ctx=service_context(),
        id_provider=current_app.extensions.get("id_provider"),
        clock=current_app.extensions.get("clock"),
    )


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
