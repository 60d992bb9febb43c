"""
signup.services._shared.ports
=============================

*Ports* (hexagonal interfaces) for the non-pure collaborators of the
registration flow: identifier generation and the wall clock.

Modules
-------
- :mod:`id_provider`:
    Defines :class:`~.IdProvider` with the default :class:`~.UUID4Provider`
    and the deterministic :class:`~.SequentialIdProvider`.

- :mod:`clock`:
    Defines :class:`~.Clock` with the default :class:`~.UTCClock` and the
    deterministic :class:`~.FixedClock`.
"""

from __future__ import annotations

from .clock import Clock, FixedClock, UTCClock, isoformat_utc
from .id_provider import IdProvider, SequentialIdProvider, UUID4Provider

__all__ = [
    "Clock",
    "FixedClock",
    "UTCClock",
    "isoformat_utc",
    "IdProvider",
    "SequentialIdProvider",
    "UUID4Provider",
]
