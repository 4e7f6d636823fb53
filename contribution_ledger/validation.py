"""Pure validation functions for the configuration and contribution forms.

Each validator returns a :class:`ValidationResult` instead of raising, so
the caller decides how to surface the rejection reason.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional

from . import config
from .models import ContributionForm

CENT = Decimal("0.01")
# Grouped phone numbers are 14 characters: ten digits and four spaces
PHONE_PATTERN = re.compile(r"^[0-9\s]{14}$")


@dataclass(frozen=True)
class ValidationResult:
    accepted: bool
    value: Any = None
    reason: Optional[str] = None

    @classmethod
    def accept(cls, value: Any) -> "ValidationResult":
        return cls(accepted=True, value=value)

    @classmethod
    def reject(cls, reason: str) -> "ValidationResult":
        return cls(accepted=False, reason=reason)


def parse_amount(value: Any) -> Optional[Decimal]:
    """Convert user input to a Decimal rounded to cents.

    ``None`` and blank strings yield ``None``. Floats go through ``str`` so
    ``30.1`` becomes ``Decimal("30.10")`` rather than its binary expansion.

    Raises:
        ValueError: If the value is not a finite number.
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
        if not value:
            return None
    if isinstance(value, bool):
        raise ValueError(f"Not an amount: {value!r}")
    try:
        amount = Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"Not an amount: {value!r}") from exc
    if not amount.is_finite():
        raise ValueError(f"Not an amount: {value!r}")
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def validate_initial_budget(value: Any) -> ValidationResult:
    """Accept a strictly positive budget, rounded to cents."""
    try:
        amount = parse_amount(value)
    except ValueError:
        return ValidationResult.reject(config.INITIAL_BUDGET_MESSAGE)
    if amount is None or amount <= 0:
        return ValidationResult.reject(config.INITIAL_BUDGET_MESSAGE)
    return ValidationResult.accept(amount)


def validate_amount(value: Any) -> ValidationResult:
    """Accept a supplied, non-negative amount.

    Zero counts as not supplied: the form shows an empty amount field for
    zero, so a zero contribution cannot be submitted.
    """
    try:
        amount = parse_amount(value)
    except ValueError:
        return ValidationResult.reject(config.AMOUNT_INVALID_MESSAGE)
    if amount is None or amount == 0:
        return ValidationResult.reject(config.AMOUNT_REQUIRED_MESSAGE)
    if amount < 0:
        return ValidationResult.reject(config.AMOUNT_NEGATIVE_MESSAGE)
    return ValidationResult.accept(amount)


def validate_phone(value: str) -> ValidationResult:
    phone = (value or "").strip()
    if not phone:
        return ValidationResult.reject(config.PHONE_REQUIRED_MESSAGE)
    if not PHONE_PATTERN.match(phone):
        return ValidationResult.reject(config.PHONE_FORMAT_MESSAGE)
    return ValidationResult.accept(phone)


def validate_contribution(form: ContributionForm) -> ValidationResult:
    """Check the required fields of the contribution form.

    The budget limit is not checked here; it depends on ledger state and is
    enforced by :meth:`Ledger.add`.

    Returns:
        On success, ``value`` is a dict with cleaned ``surname``,
        ``given_name``, ``phone`` and ``amount`` (Decimal).
    """
    surname = (form.surname or "").strip()
    if not surname:
        return ValidationResult.reject(config.SURNAME_REQUIRED_MESSAGE)
    given_name = (form.given_name or "").strip()
    if not given_name:
        return ValidationResult.reject(config.GIVEN_NAME_REQUIRED_MESSAGE)

    phone = validate_phone(form.phone)
    if not phone.accepted:
        return phone
    amount = validate_amount(form.amount)
    if not amount.accepted:
        return amount

    return ValidationResult.accept({
        'surname': surname,
        'given_name': given_name,
        'phone': phone.value,
        'amount': amount.value,
    })
