"""Pure registration validator: raw input in, record or messages out."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from signup.services._shared.ports import Clock, IdProvider, UTCClock, UUID4Provider
from signup.services.registration.dto import RegisteredUserOut, RegistrationIn, ValidationResult
from signup.services.registration.rules import collect_violations

_DEFAULT_IDS = UUID4Provider()
_DEFAULT_CLOCK = UTCClock()


def validate(
    data: RegistrationIn | Mapping[str, Any] | None,
    *,
    id_provider: IdProvider | None = None,
    clock: Clock | None = None,
) -> ValidationResult:
    """
    Validate a registration request.

    :param data: DTO or parsed JSON object. Unknown keys are ignored.
    :param id_provider: Source of the new identifier (UUID4 by default).
    :param clock: Source of ``created_at`` (UTC wall clock by default).
    :returns: Success with a :class:`RegisteredUserOut`, or the ordered list of
        violated rule messages. Never raises for malformed field values.
    :rtype: :class:`ValidationResult`
    """
    dto = data if isinstance(data, RegistrationIn) else RegistrationIn.from_mapping(data)

    errors = collect_violations(dto)
    if errors:
        return ValidationResult.failure(errors)

    ids = id_provider or _DEFAULT_IDS
    now = clock or _DEFAULT_CLOCK
    user = RegisteredUserOut(
        id=ids.fresh_id(),
        name=dto.name,
        email=dto.email,
        created_at=now.now(),
    )
    return ValidationResult.success(user)
