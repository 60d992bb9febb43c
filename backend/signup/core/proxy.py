"""Reverse-proxy awareness for the signup API.

The signup form is served from a static frontend and calls this API through
a reverse proxy, so the socket peer is the proxy rather than the browser.
Trusting ``X-Forwarded-*`` restores the client address logged with each
registration and the scheme and host seen by ``url_for``.
"""

from __future__ import annotations

from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix


def init_app(app: Flask) -> None:
    """Wrap ``app.wsgi_app`` in :class:`~werkzeug.middleware.proxy_fix.ProxyFix`.

    Skipped when ``USE_PROXYFIX`` is off. ``PROXY_FIX_HOPS`` sets how many
    forwarding proxies are trusted (one by default); ``0`` trusts none.
    """
    if not app.config.get("USE_PROXYFIX", True):
        return
    hops = max(int(app.config.get("PROXY_FIX_HOPS", 1)), 0)
    if hops == 0:
        return
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=hops, x_proto=hops, x_host=hops, x_prefix=hops)
