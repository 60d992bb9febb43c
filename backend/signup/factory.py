"""Application factory wiring Flask extensions and blueprints."""

from __future__ import annotations

from flask import Flask

from signup.core.config import BaseConfig, get_config
from signup.core.json_provider import SignupJSONProvider
from signup.core.logger import configure_logging, init_app as init_logging


def create_app(
    config: str | type[BaseConfig] | object | None = None,
    *,
    instance_relative_config: bool = True,
    instance_config_filename: str = "config.py",
) -> Flask:
    """Build and configure the Flask application.

    ``config`` may be an environment name (``"testing"``), a config class or
    any object accepted by :meth:`flask.Config.from_object`. When omitted the
    class is inferred from ``APP_ENV``.
    """

    app = Flask(__name__, instance_relative_config=instance_relative_config)

    if isinstance(config, str):
        config = get_config(config)
    app.config.from_object(get_config() if config is None else config)
    if instance_relative_config and instance_config_filename:
        app.config.from_pyfile(instance_config_filename, silent=True)

    app.json = SignupJSONProvider(app)
    app.json.ensure_ascii = app.config.get("JSON_ENSURE_ASCII", False)
    app.json.sort_keys = app.config.get("JSON_SORT_KEYS", False)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    # Proxy headers if running behind a reverse proxy
    from signup.core import proxy

    proxy.init_app(app)

    init_logging(app)

    from signup.core import cors

    cors.init_app(app)

    from signup.api import init_app as init_api

    init_api(app)

    from signup.core import errors

    errors.init_app(app)

    from signup import cli as app_cli

    app_cli.init_app(app)

    return app
