"""Registration resource schemas."""

from __future__ import annotations

from typing import Any

from marshmallow import EXCLUDE, Schema, fields, post_load

from signup.services.registration.dto import RegistrationIn


class RegistrationInputSchema(Schema):
    """Narrow a request body to the four registration fields.

    Values are loaded untouched (any JSON type, ``None`` when absent); the
    field rules in :mod:`signup.services.registration.rules` judge them.
    """

    class Meta:
        unknown = EXCLUDE

    name = fields.Raw(load_default=None, allow_none=True)
    email = fields.Raw(load_default=None, allow_none=True)
    document = fields.Raw(load_default=None, allow_none=True)
    password = fields.Raw(load_default=None, allow_none=True, load_only=True)

    @post_load
    def make_dto(self, data: dict[str, Any], **_: Any) -> RegistrationIn:
        return RegistrationIn(**data)


class RegisteredUserSchema(Schema):
    """Public representation of an accepted registration."""

    id = fields.String(required=True)
    name = fields.String(required=True)
    email = fields.String(required=True)
    created_at = fields.String(required=True)
