import logging
from datetime import datetime, timezone

import pytest

from signup.core import errors as api_errors
from signup.services._shared.base import ServiceContext
from signup.services._shared.errors import ServiceError, ValidationFailure
from signup.services._shared.ports import FixedClock, SequentialIdProvider
from signup.services.registration import rules
from signup.services.registration.dto import RegistrationIn
from signup.services.registration.service import RegistrationService

LOGGER_NAME = "signup.services.registration.service"


class TestRegistrationService:
    """Validate the registration process: accept, reject and log."""

    @pytest.fixture()
    def service(self) -> RegistrationService:
        return RegistrationService(
            ctx=ServiceContext(request_id="req-1"),
            id_provider=SequentialIdProvider(start=7),
            clock=FixedClock(datetime(2024, 1, 1, tzinfo=timezone.utc)),
        )

    # -------------------------- Happy path -------------------------------- #

    def test_register_returns_record(self, service):
        dto = RegistrationIn(
            name="Maria Silva",
            email="maria@example.com",
            document="12345678901",
            password="Password123",
        )

        out = service.register(dto)

        assert out.id == "00000000-0000-4000-8000-000000000007"
        assert out.name == "Maria Silva"
        assert out.email == "maria@example.com"
        assert out.created_at == "2024-01-01T00:00:00.000Z"

    def test_register_with_faker_email(self, service, faker):
        email = faker.email()

        out = service.register(RegistrationIn(name="Maria", email=email, password="Password123"))

        assert out.email == email

    def test_register_logs_acceptance_with_id(self, service, caplog):
        dto = RegistrationIn(name="Maria", email="maria@example.com", password="Password123")

        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            out = service.register(dto)

        records = [r for r in caplog.records if r.name == LOGGER_NAME]
        assert [r.getMessage() for r in records] == ["registration.accepted"]
        assert records[0].user_id == out.id

    def test_default_collaborators(self):
        out = RegistrationService().register(
            RegistrationIn(name="Maria", email="maria@example.com", password="Password123")
        )

        assert len(out.id) == 36
        assert out.created_at.endswith("Z")

    # -------------------------- Rejections -------------------------------- #

    def test_register_raises_validation_failure(self, service):
        with pytest.raises(ValidationFailure) as info:
            service.register(RegistrationIn(name="J", email="invalid", password="weak"))

        assert info.value.messages == (
            rules.NAME_LENGTH,
            rules.EMAIL_FORMAT,
            rules.PASSWORD_STRENGTH,
        )
        assert str(info.value) == ", ".join(info.value.messages)

    def test_rejection_logs_messages_but_not_values(self, service, caplog):
        dto = RegistrationIn(name="J", email="secret@example.com", password="weakpass")

        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            with pytest.raises(ValidationFailure):
                service.register(dto)

        records = [r for r in caplog.records if r.name == LOGGER_NAME]
        assert [r.levelno for r in records] == [logging.WARNING]
        assert records[0].errors == [rules.NAME_LENGTH, rules.PASSWORD_STRENGTH]
        assert "weakpass" not in caplog.text
        assert "secret@example.com" not in caplog.text

    # -------------------------- Translation ------------------------------- #

    def test_translate_validation_failure(self, service):
        translated = service.translate_exceptions(ValidationFailure(("a", "b")))

        assert isinstance(translated, api_errors.ValidationFailed)
        assert translated.status_code == 400
        assert translated.to_body() == {"error": "Validation failed", "message": "a, b"}

    def test_translate_generic_service_error(self, service):
        translated = service.translate_exceptions(ServiceError("nope"))

        assert isinstance(translated, api_errors.APIError)
        assert translated.to_body() == {"error": "Bad Request", "message": "nope"}

    def test_translate_leaves_unknown_errors_untouched(self, service):
        exc = RuntimeError("boom")
        assert service.translate_exceptions(exc) is exc


def test_validation_failure_requires_messages():
    with pytest.raises(ValueError):
        ValidationFailure(())


def test_service_logs_carry_context(caplog):
    service = RegistrationService(ctx=ServiceContext(request_id="req-9", remote_addr="198.51.100.1"))

    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        service.register(RegistrationIn(name="Ana", email="ana@example.com", password="Password123"))

    records = [r for r in caplog.records if r.name == LOGGER_NAME]
    assert records[0].request_id == "req-9"
    assert records[0].remote_addr == "198.51.100.1"
    assert records[0].user_id
