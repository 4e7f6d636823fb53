"""Unit tests for contribution_ledger.formatting."""

from __future__ import annotations

from decimal import Decimal

from contribution_ledger.formatting import format_currency, format_phone_number


def test_groups_ten_digits() -> None:
    assert format_phone_number("0612345678") == "06 12 34 56 78"


def test_ignores_separators_when_counting_digits() -> None:
    assert format_phone_number("06.12-34/56 78") == "06 12 34 56 78"


def test_already_grouped_number_is_unchanged() -> None:
    grouped = "06 12 34 56 78"
    assert format_phone_number(grouped) == grouped
    assert format_phone_number(format_phone_number(grouped)) == grouped


def test_partial_input_is_passed_through() -> None:
    assert format_phone_number("06 12") == "06 12"
    assert format_phone_number("061234567") == "061234567"
    assert format_phone_number("") == ""


def test_too_many_digits_is_passed_through() -> None:
    assert format_phone_number("06123456789") == "06123456789"


def test_format_currency() -> None:
    assert format_currency(Decimal("70")) == "70.00 €"
    assert format_currency(1234.5) == "1,234.50 €"
    assert format_currency(Decimal("0.5"), include_symbol=False) == "0.50"
