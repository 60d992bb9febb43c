from __future__ import annotations

import itertools
import threading
from typing import Protocol
from uuid import UUID, uuid4


class IdProvider(Protocol):
    """Port returning a fresh unique identifier in text form."""

    def fresh_id(self) -> str: ...


class UUID4Provider(IdProvider):
    """Random UUID4 identifiers (``xxxxxxxx-xxxx-4xxx-yxxx-xxxxxxxxxxxx``)."""

    def fresh_id(self) -> str:
        return str(uuid4())


class SequentialIdProvider(IdProvider):
    """Deterministic UUID4-shaped identifiers used in unit tests.

    The n-th call returns a version 4 UUID whose low bits encode ``n``, so the
    values stay distinct and still match the UUID4 textual shape.
    """

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def fresh_id(self) -> str:
        with self._lock:
            n = next(self._counter)
        return str(UUID(int=n, version=4))
