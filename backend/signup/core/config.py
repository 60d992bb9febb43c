"""Application settings with environment-based simple classes."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Final

from dotenv import load_dotenv

# Public selector env var (keep neutral name to avoid collisions)
ENV_VAR: Final[str] = "APP_ENV"  # 'development' | 'testing' | 'production'


# Load .env during development (no-op when the file is missing)
load_dotenv()


def env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean flag from an environment variable.

    Parameters
    ----------
    name: str
        Environment variable to inspect.
    default: bool, optional
        Value returned when the variable is unset. Defaults to ``False``.

    Returns
    -------
    bool
        ``True`` if the value resembles ``{"1", "true", "yes", "y", "on"}``
        ignoring case; otherwise ``False`` or ``default`` when missing.
    """
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


class BaseConfig:
    """Base configuration shared across environments.

    Attributes
    ----------
    API_BASE_PREFIX: str
        Root path for registering the API blueprints. Empty by default so the
        routes live at ``/users`` and ``/status``.
    SECRET_KEY: str
        Flask secret. Nothing is signed today but Flask extensions expect it.
    JSON_SORT_KEYS: bool
        Keeps JSON output order stable when ``False``.
    JSON_ENSURE_ASCII: bool
        Escape non-ASCII characters in JSON bodies. Disabled so validation
        messages stay human readable.
    PROPAGATE_EXCEPTIONS: bool
        Controls Flask error propagation.
    LOG_LEVEL: str
        Root logging verbosity (``INFO`` by default).
    CORS_ORIGINS: str
        Comma-separated list of allowed origins for CORS, ``*`` for any.
    CORS_MAX_AGE: int
        Seconds browsers may cache preflight responses.
    USE_PROXYFIX: bool
        Trust ``X-Forwarded-*`` headers from a reverse proxy.
    PROXY_FIX_HOPS: int
        Number of proxies in front of the app (load balancer, CDN, ...).
    DEBUG: bool
        Toggles Flask debug mode.
    TESTING: bool
        Enables Flask testing mode when ``True``.

    Notes
    -----
    Values are primarily sourced from environment variables, enabling
    configuration without code changes.
    """

    API_BASE_PREFIX = os.getenv("API_BASE_PREFIX", "")

    SECRET_KEY = os.getenv("SECRET_KEY", "CHANGE_ME")

    # Flask & JSON
    JSON_SORT_KEYS = False
    JSON_ENSURE_ASCII = False
    PROPAGATE_EXCEPTIONS = False

    # Logging, CORS & proxy
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
    CORS_MAX_AGE = int(os.getenv("CORS_MAX_AGE", "600"))
    USE_PROXYFIX = env_bool("USE_PROXYFIX", True)
    PROXY_FIX_HOPS = int(os.getenv("PROXY_FIX_HOPS", "1"))

    # Flask built-ins
    DEBUG = False
    TESTING = False


class DevelopmentConfig(BaseConfig):
    """Configuration tailored for local development.

    Notes
    -----
    Enables debug mode by default and lets any origin call the API so the
    signup form can run from a local dev server.
    """

    DEBUG = env_bool("FLASK_DEBUG", True)
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")


class TestingConfig(BaseConfig):
    """Configuration for automated test runs.

    Notes
    -----
    - Forces ``TESTING`` mode and disables debug logs.
    - Keeps ``PROPAGATE_EXCEPTIONS`` off so the JSON error handlers are
      exercised exactly as in production.
    """

    TESTING = True
    DEBUG = False
    LOG_LEVEL = "WARNING"
    PROPAGATE_EXCEPTIONS = False


class ProductionConfig(BaseConfig):
    """Configuration defaults for production deployments.

    Notes
    -----
    Keeps debug disabled while relying on WSGI-level log configuration for
    noise control.
    """

    DEBUG = False
    PROPAGATE_EXCEPTIONS = False


# Map names -> classes (simple, explicit)
CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config(name: str | None = None) -> type[BaseConfig]:
    """Return the configuration class for ``name`` or ``APP_ENV``.

    Parameters
    ----------
    name: str | None
        Explicit environment name. When ``None`` the ``APP_ENV`` variable is
        consulted.

    Returns
    -------
    type[BaseConfig]
        Class to pass to :meth:`flask.Config.from_object`.

    Notes
    -----
    Falls back to :class:`DevelopmentConfig` when the name is unset or
    unknown.
    """
    if name is None:
        name = os.getenv(ENV_VAR, "development")
    return CONFIG_MAP.get(name.strip().lower(), DevelopmentConfig)
