"""Centralized JSON error handling for the API.

Every error leaves the service with the same envelope::

    {"error": "<short title>", "message": "<human readable detail>"}

Validation failures use ``error="Validation failed"`` and status ``400``;
other HTTP errors use the standard reason phrase as the title.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import HTTPException

from signup.core.logger import ensure_request_id

log = logging.getLogger(__name__)


def _as_error_body(*, error: str, message: str) -> dict[str, Any]:
    """
    Build the JSON error envelope.

    :param error: Short, stable error title.
    :param message: Human-readable error detail (safe for clients).
    :returns: Error body dictionary.
    :rtype: dict
    """
    return {"error": error, "message": message}


def _error_response(body: dict[str, Any], status: int) -> tuple[Response, int]:
    """Return a JSON response tuple for ``body`` with ``status``."""
    return jsonify(body), status


class APIError(Exception):
    """
    Represent a JSON-serializable API error.

    Parameters
    ----------
    message : str
        Human-readable description presented to clients.
    status_code : int, optional
        HTTP status code to return. Defaults to ``400``.
    error : str | None, optional
        Short title placed in the ``error`` member. Defaults to the reason
        phrase of ``status_code``.
    details : dict[str, Any] | None, optional
        Structured context kept for logging only; never serialized.

    Attributes
    ----------
    message : str
        Error summary stored for serialization.
    status_code : int
        HTTP status code returned to the client.
    error : str
        Title placed in the ``error`` member.
    details : dict[str, Any]
        Arbitrary context specific to the error instance.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 400,
        error: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = int(status_code)
        self.error = error or HTTPStatus(self.status_code).phrase
        self.details = details or {}

    def to_body(self) -> dict[str, Any]:
        """
        Serialize error metadata into the JSON envelope.

        :returns: Error body dictionary.
        :rtype: dict
        """
        return _as_error_body(error=self.error, message=self.message)


class ValidationFailed(APIError):
    """400 carrying the joined list of violated field rules."""

    TITLE = "Validation failed"

    def __init__(self, messages: list[str] | tuple[str, ...]) -> None:
        super().__init__(
            ", ".join(messages),
            status_code=HTTPStatus.BAD_REQUEST,
            error=self.TITLE,
            details={"errors": list(messages)},
        )


def init_app(app: Flask) -> None:
    """
    Attach JSON error handlers to the Flask app.

    Notes
    -----
    - Guarantees the ``{error, message}`` envelope for all handled errors.
    - Emits 5xx with ``exc_info`` for traceability; 4xx as warnings.
    """

    @app.errorhandler(APIError)
    def handle_api_error(err: APIError):
        level = log.error if err.status_code >= 500 else log.warning
        level(
            "APIError: status=%s error=%s msg=%s request_id=%s",
            err.status_code,
            err.error,
            err.message,
            ensure_request_id(),
            extra={"status": err.status_code, **err.details},
        )
        return _error_response(err.to_body(), err.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        status = int(err.code or HTTPStatus.INTERNAL_SERVER_ERROR)
        title = HTTPStatus(status).phrase
        # Werkzeug descriptions are HTML-ish prose; keep them short for clients
        message = (err.description or title).strip()
        if status == HTTPStatus.NOT_FOUND and request:
            message = f"Route '{request.path}' not found"
        elif status == HTTPStatus.METHOD_NOT_ALLOWED and request:
            message = f"Method {request.method} not allowed on '{request.path}'"
        level = log.error if status >= 500 else log.warning
        level(
            "HTTPException: status=%s detail=%s request_id=%s",
            status,
            message,
            ensure_request_id(),
        )
        response, status = _error_response(_as_error_body(error=title, message=message), status)
        if status == HTTPStatus.METHOD_NOT_ALLOWED:
            allowed = getattr(err, "valid_methods", None)
            if allowed:
                response.headers["Allow"] = ", ".join(allowed)
        return response, status

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        # Unexpected server-side error; never leak internal details
        log.error(
            "Unhandled exception: request_id=%s",
            ensure_request_id(),
            exc_info=True,
        )
        body = _as_error_body(
            error=HTTPStatus.INTERNAL_SERVER_ERROR.phrase,
            message="Unexpected error",
        )
        return _error_response(body, HTTPStatus.INTERNAL_SERVER_ERROR)


__all__ = ["APIError", "ValidationFailed", "init_app"]
