"""
DTOs for the registration flow.

Contracts for validating a self-registration request and describing the
identity record assigned on success. Nothing here is persisted.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any

# --------------------------------------------------------------------------- #
# Input
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class RegistrationIn:
    """
    Raw registration payload as delivered by the boundary.

    Values keep whatever JSON type the client sent; the field rules decide
    what is acceptable.

    :param name: Display name.
    :type name: Any
    :param email: Contact email, kept verbatim.
    :type email: Any
    :param document: Identity document number. Accepted but not validated.
    :type document: Any
    :param password: Raw password.
    :type password: Any
    """

    name: Any = None
    email: Any = None
    document: Any = field(default=None, repr=False)
    password: Any = field(default=None, repr=False)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> RegistrationIn:
        """
        Build the DTO from a parsed JSON object, ignoring unknown keys.

        :param data: Parsed request body. Anything that is not a mapping is
            treated as an empty payload.
        :returns: Registration input.
        :rtype: :class:`RegistrationIn`
        """
        if not isinstance(data, Mapping):
            return cls()
        return cls(**{f.name: data.get(f.name) for f in fields(cls)})


# --------------------------------------------------------------------------- #
# Output
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class RegisteredUserOut:
    """
    Identity record returned for an accepted registration.

    :param id: Fresh UUID4 in text form.
    :type id: str
    :param name: Submitted name, unmodified.
    :type name: str
    :param email: Submitted email, unmodified.
    :type email: str
    :param created_at: ISO-8601 UTC timestamp.
    :type created_at: str
    """

    id: str
    name: str
    email: str
    created_at: str


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """
    Outcome of validating one registration request.

    Exactly one of ``user`` and ``errors`` is populated.

    :param user: Assigned record on success.
    :type user: :class:`RegisteredUserOut` | None
    :param errors: Violated rule messages on failure.
    :type errors: tuple[str, ...]
    """

    user: RegisteredUserOut | None = None
    errors: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if (self.user is None) == (not self.errors):
            raise ValueError("ValidationResult needs either a user or errors, not both")

    @property
    def ok(self) -> bool:
        return self.user is not None

    @classmethod
    def success(cls, user: RegisteredUserOut) -> ValidationResult:
        return cls(user=user)

    @classmethod
    def failure(cls, errors: list[str] | tuple[str, ...]) -> ValidationResult:
        return cls(errors=tuple(errors))
