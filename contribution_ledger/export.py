"""Spreadsheet export of the contribution list.

Records are flat dicts keyed by the column labels in
``config.EXPORT_COLUMNS``. The workbook itself is produced by pandas with
the openpyxl engine.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import pandas as pd

from . import config
from .models import Contribution

logger = logging.getLogger(__name__)

Record = Dict[str, object]


def build_export_records(contributions: Iterable[Contribution]) -> List[Record]:
    """One record per contribution, keeping the given order."""
    return [
        {
            config.COLUMN_GIVEN_NAME: contribution.given_name,
            config.COLUMN_SURNAME: contribution.surname,
            config.COLUMN_PHONE: contribution.phone,
            config.COLUMN_AMOUNT: float(contribution.amount),
        }
        for contribution in contributions
    ]


def records_to_frame(records: List[Record]) -> pd.DataFrame:
    """Build a DataFrame with the export columns in order, even when empty."""
    return pd.DataFrame.from_records(records, columns=config.EXPORT_COLUMNS)


def workbook_bytes(records: List[Record], sheet_name: str = config.EXPORT_SHEET_NAME) -> bytes:
    """Render the records as an in-memory ``.xlsx`` workbook."""
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        records_to_frame(records).to_excel(writer, sheet_name=sheet_name, index=False)
    return buffer.getvalue()


def write_workbook(
    records: List[Record],
    filename: str = config.EXPORT_FILENAME,
    directory: Optional[Path] = None,
) -> Path:
    """Write the records to ``directory / filename`` and return the path."""
    target_dir = config.ensure_export_directory(directory)
    target = target_dir / filename
    target.write_bytes(workbook_bytes(records))
    logger.info("Exported %d contributions to %s", len(records), target)
    return target
