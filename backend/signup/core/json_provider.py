"""JSON provider keeping non-ASCII readable while always producing UTF-8-safe text."""

from __future__ import annotations

import re
from typing import Any

from flask.json.provider import DefaultJSONProvider

# A str decoded from JSON may hold unpaired surrogates (``"\ud800"``); they
# cannot be encoded as UTF-8 and must leave as ``\uXXXX`` escapes
_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def escape_lone_surrogates(text: str) -> str:
    """Replace every surrogate code point in ``text`` with a JSON ``\\uXXXX`` escape.

    Only valid on serialized JSON: surrogates can only occur inside string
    literals there, where the escape decodes back to the same code point.

    >>> escape_lone_surrogates('"a\\ud800b"') == '"a\\\\ud800b"'
    True
    """
    return _LONE_SURROGATE.sub(lambda m: f"\\u{ord(m.group()):04x}", text)


class SignupJSONProvider(DefaultJSONProvider):
    """:class:`DefaultJSONProvider` whose output always encodes as UTF-8.

    ``ensure_ascii`` stays off so accented names and validation messages are
    written verbatim.
    """

    ensure_ascii = False
    sort_keys = False

    def dumps(self, obj: Any, **kwargs: Any) -> str:
        return escape_lone_surrogates(super().dumps(obj, **kwargs))


__all__ = ["SignupJSONProvider", "escape_lone_surrogates"]
