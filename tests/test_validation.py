"""Unit tests for contribution_ledger.validation."""

from __future__ import annotations

from decimal import Decimal

import pytest

from contribution_ledger import config
from contribution_ledger.models import ContributionForm
from contribution_ledger.validation import (
    parse_amount,
    validate_amount,
    validate_contribution,
    validate_initial_budget,
)


def _form(**overrides) -> ContributionForm:
    values = {
        'surname': 'Dupont',
        'given_name': 'Jean',
        'phone': '06 12 34 56 78',
        'amount': 30.0,
    }
    values.update(overrides)
    return ContributionForm(**values)


def test_parse_amount_rounds_floats_to_cents() -> None:
    assert parse_amount(30.1) == Decimal("30.10")
    assert parse_amount("12,5") == Decimal("12.50")
    assert parse_amount(Decimal("1.005")) == Decimal("1.01")


def test_parse_amount_blank_is_none() -> None:
    assert parse_amount(None) is None
    assert parse_amount("  ") is None


@pytest.mark.parametrize("value", ["abc", "nan", float("inf"), True])
def test_parse_amount_rejects_non_numbers(value) -> None:
    with pytest.raises(ValueError):
        parse_amount(value)


@pytest.mark.parametrize("value", [0, -1, "0.00", None, "abc"])
def test_initial_budget_must_be_positive(value) -> None:
    result = validate_initial_budget(value)
    assert not result.accepted
    assert result.reason == config.INITIAL_BUDGET_MESSAGE


def test_initial_budget_accepted() -> None:
    result = validate_initial_budget(100)
    assert result.accepted
    assert result.value == Decimal("100.00")


def test_amount_rules() -> None:
    assert validate_amount(None).reason == config.AMOUNT_REQUIRED_MESSAGE
    assert validate_amount(0).reason == config.AMOUNT_REQUIRED_MESSAGE
    assert validate_amount(-5).reason == config.AMOUNT_NEGATIVE_MESSAGE
    assert validate_amount("x").reason == config.AMOUNT_INVALID_MESSAGE
    assert validate_amount("50").value == Decimal("50.00")


def test_valid_form_is_cleaned() -> None:
    result = validate_contribution(_form(surname='  Dupont ', amount='30'))
    assert result.accepted
    assert result.value == {
        'surname': 'Dupont',
        'given_name': 'Jean',
        'phone': '06 12 34 56 78',
        'amount': Decimal('30.00'),
    }


@pytest.mark.parametrize(
    "overrides, reason",
    [
        ({'surname': ''}, config.SURNAME_REQUIRED_MESSAGE),
        ({'given_name': '   '}, config.GIVEN_NAME_REQUIRED_MESSAGE),
        ({'phone': ''}, config.PHONE_REQUIRED_MESSAGE),
        ({'phone': '06 12'}, config.PHONE_FORMAT_MESSAGE),
        ({'amount': None}, config.AMOUNT_REQUIRED_MESSAGE),
    ],
)
def test_invalid_form_reports_reason(overrides, reason) -> None:
    result = validate_contribution(_form(**overrides))
    assert not result.accepted
    assert result.reason == reason
