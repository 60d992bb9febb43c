"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and never import Flask or HTTP
helpers. They serve as stable contracts between the registration rules and
the application services.

The translation to HTTP responses is handled by ``signup/core/errors.py`` via
``BaseService.translate_exceptions()``.
"""

from __future__ import annotations

from dataclasses import dataclass

# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - The API layer or BaseService translates them to ``APIError``.
    """

    pass


# --------------------------------------------------------------------------- #
# Specific domain-level errors
# --------------------------------------------------------------------------- #


@dataclass(slots=True)
class ValidationFailure(ServiceError):
    """
    Raised when one or more registration field rules are violated.

    :param messages: Violated rule messages in rule order (never empty).
    :type messages: tuple[str, ...]
    """

    messages: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.messages:
            raise ValueError("ValidationFailure requires at least one message")
        self.messages = tuple(self.messages)

    def __str__(self) -> str:
        return ", ".join(self.messages)
