"""User registration endpoint."""

from __future__ import annotations

from flask import Blueprint

from signup.api.deps import json_body, json_response, registration_service, timing
from signup.schemas import RegisteredUserSchema, RegistrationInputSchema
from signup.services._shared.errors import ServiceError

bp = Blueprint("users", __name__)

registration_input_schema = RegistrationInputSchema()
registered_user_schema = RegisteredUserSchema()


@bp.post("")
@timing
def create_user():
    """Validate a signup request and return the assigned identity."""

    dto = registration_input_schema.load(json_body())
    service = registration_service()
    try:
        user = service.register(dto)
    except ServiceError as exc:
        raise service.translate_exceptions(exc) from exc
    return json_response(registered_user_schema.dump(user), status=201)
