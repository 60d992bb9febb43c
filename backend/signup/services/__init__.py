"""Service layer public API.

This package exposes the building blocks of the service layer so that
callers can import from :mod:`signup.services` without knowing its internal
structure.

Re-exports
----------
- Base primitives (from ``signup.services._shared.base``)
    * :class:`BaseService`
    * :class:`ServiceContext`

- Errors (from ``signup.services._shared.errors``)
    * :class:`ServiceError`
    * :class:`ValidationFailure`

- Registration (from ``signup.services.registration``)
    * :class:`RegistrationService`
    * :func:`validate`
    * DTOs: :class:`RegistrationIn`, :class:`RegisteredUserOut`,
      :class:`ValidationResult`
"""

from __future__ import annotations

from ._shared.base import BaseService, ServiceContext
from ._shared.errors import ServiceError, ValidationFailure
from .registration.dto import RegisteredUserOut, RegistrationIn, ValidationResult
from .registration.service import RegistrationService
from .registration.validator import validate

__all__ = [
    "BaseService",
    "ServiceContext",
    "ServiceError",
    "ValidationFailure",
    "RegistrationService",
    "validate",
    "RegistrationIn",
    "RegisteredUserOut",
    "ValidationResult",
]
