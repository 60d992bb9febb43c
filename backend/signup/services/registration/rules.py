"""
Field rules for the signup form.

Each field owns an ordered tuple of :class:`FieldRule` objects. Evaluation is
short-circuited *per field* (only the first failing rule is reported) and
exhaustive *across fields* (every invalid field contributes one message).

A field whose value is absent, ``None``, an empty string or not a string at
all only ever reports its "required" message; the remaining rules are never
applied to such values.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Final

# --------------------------------------------------------------------------- #
# Messages (client-facing, kept byte-for-byte)
# --------------------------------------------------------------------------- #

NAME_REQUIRED: Final[str] = "Nome é obrigatório"
NAME_LENGTH: Final[str] = "Nome deve ter entre 2 e 100 caracteres"
NAME_FORMAT: Final[str] = "Nome deve conter apenas letras e espaços"

EMAIL_REQUIRED: Final[str] = "Email é obrigatório"
EMAIL_FORMAT: Final[str] = "Email inválido"
EMAIL_LENGTH: Final[str] = "Email deve ter no máximo 255 caracteres"

PASSWORD_REQUIRED: Final[str] = "Senha é obrigatória"
PASSWORD_STRENGTH: Final[str] = (
    "Senha deve ter no mínimo 8 caracteres, pelo menos 1 maiúscula, 1 minúscula e 1 número"
)

# --------------------------------------------------------------------------- #
# Limits & patterns
# --------------------------------------------------------------------------- #

NAME_MIN_LENGTH: Final[int] = 2
NAME_MAX_LENGTH: Final[int] = 100
EMAIL_MAX_LENGTH: Final[int] = 255
PASSWORD_MIN_LENGTH: Final[int] = 8

# ASCII letters, the Latin-1 range U+00C0..U+00FF, and whitespace
NAME_PATTERN: Final[re.Pattern[str]] = re.compile(r"[a-zA-ZÀ-ÿ\s]+")
# local@domain.tld with exactly one "@" and no whitespace anywhere
EMAIL_PATTERN: Final[re.Pattern[str]] = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PASSWORD_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9]).{%d,}" % PASSWORD_MIN_LENGTH
)


# --------------------------------------------------------------------------- #
# Rule types
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class FieldRule:
    """
    A predicate over a non-empty string plus the message reported on failure.

    :param key: Short rule identifier (``"length"``, ``"format"``...).
    :type key: str
    :param message: Message reported when ``check`` returns ``False``.
    :type message: str
    :param check: Predicate returning ``True`` for acceptable values.
    :type check: Callable[[str], bool]
    """

    key: str
    message: str
    check: Callable[[str], bool]


@dataclass(frozen=True, slots=True)
class FieldRules:
    """
    Ordered rule set for a single input field.

    :param field: Input field name.
    :type field: str
    :param required_message: Message reported for missing or non-string values.
    :type required_message: str
    :param rules: Remaining rules, evaluated in declaration order.
    :type rules: tuple[FieldRule, ...]
    """

    field: str
    required_message: str
    rules: tuple[FieldRule, ...]

    def first_violation(self, value: Any) -> str | None:
        """
        Return the message of the first rule ``value`` breaks, if any.

        :param value: Raw field value of any type.
        :returns: A single message, or ``None`` when every rule passes.
        :rtype: str | None
        """
        if not is_present(value):
            return self.required_message
        for rule in self.rules:
            if not rule.check(value):
                return rule.message
        return None


def is_present(value: Any) -> bool:
    """Return ``True`` only for non-empty strings."""
    return isinstance(value, str) and value != ""


def _length_between(low: int | None, high: int | None) -> Callable[[str], bool]:
    def check(value: str) -> bool:
        size = len(value)
        if low is not None and size < low:
            return False
        return high is None or size <= high

    return check


def _matches(pattern: re.Pattern[str]) -> Callable[[str], bool]:
    def check(value: str) -> bool:
        return pattern.fullmatch(value) is not None

    return check


# --------------------------------------------------------------------------- #
# Rulebook (field order == message order)
# --------------------------------------------------------------------------- #

RULEBOOK: Final[tuple[FieldRules, ...]] = (
    FieldRules(
        field="name",
        required_message=NAME_REQUIRED,
        rules=(
            FieldRule("length", NAME_LENGTH, _length_between(NAME_MIN_LENGTH, NAME_MAX_LENGTH)),
            FieldRule("format", NAME_FORMAT, _matches(NAME_PATTERN)),
        ),
    ),
    FieldRules(
        field="email",
        required_message=EMAIL_REQUIRED,
        rules=(
            FieldRule("format", EMAIL_FORMAT, _matches(EMAIL_PATTERN)),
            FieldRule("length", EMAIL_LENGTH, _length_between(None, EMAIL_MAX_LENGTH)),
        ),
    ),
    FieldRules(
        field="password",
        required_message=PASSWORD_REQUIRED,
        rules=(FieldRule("strength", PASSWORD_STRENGTH, _matches(PASSWORD_PATTERN)),),
    ),
)


def collect_violations(values: Any) -> list[str]:
    """
    Run every field's rules against ``values`` and gather the messages.

    :param values: Object exposing ``name``, ``email`` and ``password``
        attributes (missing attributes count as absent).
    :returns: At most one message per field, in field order.
    :rtype: list[str]
    """
    violations: list[str] = []
    for field_rules in RULEBOOK:
        message = field_rules.first_violation(getattr(values, field_rules.field, None))
        if message is not None:
            violations.append(message)
    return violations
