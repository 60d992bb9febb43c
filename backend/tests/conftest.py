"""Global pytest fixtures for the signup API."""

from __future__ import annotations

from collections.abc import Callable, Generator
from datetime import datetime, timezone
from typing import Any

import pytest
from flask import Flask
from flask.testing import FlaskClient, FlaskCliRunner

from signup import create_app
from signup.services._shared.ports import FixedClock, SequentialIdProvider

FROZEN_AT = datetime(2024, 1, 1, 12, 30, 45, 123000, tzinfo=timezone.utc)


@pytest.fixture()
def app() -> Generator[Flask, None, None]:
    """Create and configure a Flask application for tests.

    Returns
    -------
    Generator[Flask, None, None]
        Application built from :class:`signup.core.config.TestingConfig`.
    """

    application = create_app("testing", instance_relative_config=False)
    with application.app_context():
        yield application


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Return a Flask test client."""

    return app.test_client()


@pytest.fixture()
def runner(app: Flask) -> FlaskCliRunner:
    """Return a runner for the app's Click commands."""

    return app.test_cli_runner()


@pytest.fixture()
def deterministic_identity(app: Flask) -> Generator[dict[str, Any], None, None]:
    """Install sequential ids and a frozen clock on ``app.extensions``."""

    ids = SequentialIdProvider()
    clock = FixedClock(FROZEN_AT)
    app.extensions["id_provider"] = ids
    app.extensions["clock"] = clock
    yield {"id_provider": ids, "clock": clock}
    app.extensions.pop("id_provider", None)
    app.extensions.pop("clock", None)


@pytest.fixture()
def valid_payload() -> dict[str, Any]:
    """A registration body that satisfies every field rule."""

    return {
        "name": "John Doe",
        "email": "john.doe@example.com",
        "document": "12345678901",
        "password": "Password123",
    }


@pytest.fixture(scope="session")
def faker():
    """Provide a :class:`faker.Faker` instance seeded for deterministic tests."""
    from faker import Faker

    fk = Faker()
    Faker.seed(1337)
    return fk


@pytest.fixture()
def freeze_time() -> Callable[[str | None], Any]:
    """Factory returning :func:`freezegun.freeze_time`.

    Examples
    --------
    >>> def test_with_frozen_time(freeze_time):
    ...     with freeze_time("2024-01-01"):
    ...         ...
    """

    from freezegun import freeze_time as _freeze_time

    def _factory(target: str | None = None) -> Any:
        return _freeze_time(target or "2024-01-01")

    return _factory
