"""Formatting utilities for phone numbers and currency display."""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Union

from . import config

_NON_DIGITS = re.compile(r"\D")
_TEN_DIGITS = re.compile(r"^(\d{2})(\d{2})(\d{2})(\d{2})(\d{2})$")


def format_phone_number(value: str) -> str:
    """Group a 10-digit phone number as five pairs separated by spaces.

    Non-digit characters are ignored when counting digits. Anything that
    does not reduce to exactly ten digits is returned untouched so partial
    input can keep being typed.

    Example:
        >>> format_phone_number("0612345678")
        '06 12 34 56 78'
        >>> format_phone_number("06 12")
        '06 12'
    """
    cleaned = _NON_DIGITS.sub("", value)
    match = _TEN_DIGITS.match(cleaned)
    if match:
        return " ".join(match.groups())
    return value


def format_currency(amount: Union[Decimal, float, int], include_symbol: bool = True) -> str:
    """Format an amount with two decimals, symbol after the number.

    Example:
        >>> format_currency(Decimal("70"))
        '70.00 €'
        >>> format_currency(1234.5, include_symbol=False)
        '1,234.50'
    """
    formatted = f"{Decimal(str(amount)):,.2f}"
    return f"{formatted} {config.CURRENCY_SYMBOL}" if include_symbol else formatted
