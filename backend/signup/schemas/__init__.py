"""Marshmallow schemas for request parsing and response shaping."""

from __future__ import annotations

from .registration import RegisteredUserSchema, RegistrationInputSchema

__all__ = ["RegisteredUserSchema", "RegistrationInputSchema"]
