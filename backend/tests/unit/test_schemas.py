"""Unit tests for the registration Marshmallow schemas."""

from __future__ import annotations

from signup.schemas import RegisteredUserSchema, RegistrationInputSchema
from signup.services.registration.dto import RegisteredUserOut, RegistrationIn


def test_input_schema_drops_unknown_keys(valid_payload):
    dto = RegistrationInputSchema().load({**valid_payload, "extraField": "x", "admin": True})

    assert isinstance(dto, RegistrationIn)
    assert dto == RegistrationIn(**valid_payload)


def test_input_schema_keeps_raw_types():
    dto = RegistrationInputSchema().load({"name": 123, "email": None, "password": ["x"]})

    assert dto.name == 123
    assert dto.email is None
    assert dto.password == ["x"]
    assert dto.document is None


def test_input_schema_empty_body():
    assert RegistrationInputSchema().load({}) == RegistrationIn()


def test_output_schema_field_order():
    user = RegisteredUserOut(id="i", name="Jo", email="jo@example.com", created_at="t")

    dumped = RegisteredUserSchema().dump(user)

    assert list(dumped) == ["id", "name", "email", "created_at"]
