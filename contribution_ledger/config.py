"""Configuration management for the contribution ledger.

This module centralizes configuration values including export paths,
defaults, user-facing messages and environment variable overrides.
"""

from __future__ import annotations

import os
from decimal import Decimal, InvalidOperation
from pathlib import Path

# Base project root - assumes this file is in contribution_ledger/
_PROJECT_ROOT = Path(__file__).parent.parent.resolve()

# Export location used when the workbook is written to disk
EXPORT_DIR = Path(os.getenv("LEDGER_EXPORT_DIR", _PROJECT_ROOT / "exports")).resolve()
EXPORT_FILENAME = os.getenv("LEDGER_EXPORT_FILENAME", "contributions.xlsx")
EXPORT_SHEET_NAME = "Contributions"
XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

# Budget defaults
_FALLBACK_INITIAL_BUDGET = Decimal("5000.00")


def _parse_default_budget(raw: str | None) -> Decimal:
    """Read the default budget override, falling back to 5000.00 when malformed."""
    if raw is None:
        return _FALLBACK_INITIAL_BUDGET
    try:
        value = Decimal(raw.strip().replace(",", "."))
    except InvalidOperation:
        return _FALLBACK_INITIAL_BUDGET
    if not value.is_finite() or value <= 0:
        return _FALLBACK_INITIAL_BUDGET
    return value.quantize(Decimal("0.01"))


DEFAULT_INITIAL_BUDGET = _parse_default_budget(os.getenv("LEDGER_DEFAULT_BUDGET"))
CURRENCY_SYMBOL = os.getenv("LEDGER_CURRENCY_SYMBOL", "€")
CURRENCY_CODE = "EUR"

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Spreadsheet column labels, in export order
COLUMN_GIVEN_NAME = "First name"
COLUMN_SURNAME = "Last name"
COLUMN_PHONE = "Phone"
COLUMN_AMOUNT = f"Amount ({CURRENCY_SYMBOL})"
EXPORT_COLUMNS = [COLUMN_GIVEN_NAME, COLUMN_SURNAME, COLUMN_PHONE, COLUMN_AMOUNT]

# User-facing messages
INITIAL_BUDGET_MESSAGE = "The initial budget must be greater than 0!"
BUDGET_EXCEEDED_MESSAGE = "The amount exceeds the remaining budget!"
DELETE_CONFIRMATION_MESSAGE = "Are you sure you want to delete this contribution?"
SURNAME_REQUIRED_MESSAGE = "Please enter a last name."
GIVEN_NAME_REQUIRED_MESSAGE = "Please enter a first name."
PHONE_REQUIRED_MESSAGE = "Please enter a phone number."
PHONE_FORMAT_MESSAGE = "The phone number must use the format 06 12 34 56 78."
AMOUNT_REQUIRED_MESSAGE = "Please enter an amount."
AMOUNT_INVALID_MESSAGE = "The amount must be a number."
AMOUNT_NEGATIVE_MESSAGE = "The amount cannot be negative."
EMPTY_LEDGER_MESSAGE = "No contributions yet"


def ensure_export_directory(directory: Path | None = None) -> Path:
    """Create the export directory if it doesn't exist."""
    target = directory or EXPORT_DIR
    target.mkdir(parents=True, exist_ok=True)
    return target

