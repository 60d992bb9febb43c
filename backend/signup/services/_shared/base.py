"""Shared base class and request context for application services."""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from dataclasses import asdict, dataclass
from typing import Any

from signup.core import errors as api_errors
from signup.services._shared.errors import ServiceError, ValidationFailure


@dataclass(slots=True)
class ServiceContext:
    """
    Carry cross-cutting request-scoped data.

    Both values are attached to every record the service logs.

    :param request_id: Correlation id for logging/tracing.
    :param remote_addr: Client address as seen after proxy handling.
    """

    request_id: str | None = None
    remote_addr: str | None = None


class ContextAdapter(logging.LoggerAdapter):
    """Logger adapter merging the service context into each record's ``extra``.

    Call-site ``extra`` keys win over context keys.
    """

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**self.extra, **(kwargs.get("extra") or {})}
        return msg, kwargs


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Hold the request-scoped :class:`ServiceContext`.
    * Centralize error translation and logging.
    * Keep services thin, orchestration-only, no web leakage.
    """

    def __init__(self, *, ctx: ServiceContext | None = None) -> None:
        """
        Initialize the base service.

        :param ctx: Optional request-scoped context (tracing).
        :type ctx: ServiceContext | None
        """
        self.ctx = ctx or ServiceContext()
        self.log = ContextAdapter(logging.getLogger(type(self).__module__), asdict(self.ctx))

    # -------------------------- Error handling ------------------------------

    def translate_exceptions(self, exc: Exception) -> Exception:
        """
        Map domain/service-level errors to API-level (HTTP) errors.

        :param exc: Exception raised within the service.
        :type exc: Exception
        :returns: Translated exception ready to be re-raised.
        :rtype: Exception
        """
        if isinstance(exc, ValidationFailure):
            # → 400 {"error": "Validation failed", ...}
            return api_errors.ValidationFailed(exc.messages)

        # Any other ServiceError subclass → 400 Bad Request
        if isinstance(exc, ServiceError):
            return api_errors.APIError(message=str(exc), status_code=400)

        # Fallback: return untouched (will bubble up to Flask handler)
        return exc
