"""
RegistrationService
===================

Process-level service for self-registration:

- Runs the field rules over the submitted payload.
- Assigns a fresh identifier and timestamp to accepted requests.
- Raises :class:`ValidationFailure` with every violated rule otherwise.

The record is not stored anywhere.
"""

from __future__ import annotations

from signup.services._shared.base import BaseService, ServiceContext
from signup.services._shared.errors import ValidationFailure
from signup.services._shared.ports import Clock, IdProvider, UTCClock, UUID4Provider
from signup.services.registration.dto import RegisteredUserOut, RegistrationIn
from signup.services.registration.validator import validate


class RegistrationService(BaseService):
    """
    Orchestrates the registration process (validate, then assign identity).
    """

    def __init__(
        self,
        *,
        ctx: ServiceContext | None = None,
        id_provider: IdProvider | None = None,
        clock: Clock | None = None,
    ) -> None:
        super().__init__(ctx=ctx)
        self.id_provider = id_provider or UUID4Provider()
        self.clock = clock or UTCClock()

    def register(self, dto: RegistrationIn) -> RegisteredUserOut:
        """
        Validate ``dto`` and return the newly assigned identity record.

        :param dto: Registration input.
        :type dto: :class:`RegistrationIn`
        :returns: Accepted registration.
        :rtype: :class:`RegisteredUserOut`
        :raises ValidationFailure: When at least one field rule is violated.
        """
        result = validate(dto, id_provider=self.id_provider, clock=self.clock)
        if result.user is None:
            # Field values stay out of the logs; only rule messages are recorded
            self.log.warning(
                "registration.rejected",
                extra={"errors": list(result.errors)},
            )
            raise ValidationFailure(result.errors)

        self.log.info("registration.accepted", extra={"user_id": result.user.id})
        return result.user
