"""Session controller tying the configuration stage to the ledger.

``LedgerSession`` receives the events emitted by the page (field changes,
form submissions, delete and export requests) and applies them to the
ledger. Everything that talks to the user is injected, so tests can swap
in deterministic doubles:

* ``alert(message)`` shows a validation failure,
* ``confirm(message) -> bool`` answers the deletion prompt,
* ``spreadsheet_writer(records, filename)`` materializes the export,
* ``id_generator() -> str`` supplies contribution ids.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Callable, List, Optional

from . import config
from .export import Record, build_export_records, write_workbook
from .formatting import format_phone_number
from .ledger import BudgetExceededError, Confirm, IdGenerator, Ledger
from .models import Contribution, ContributionForm, SessionPhase
from .validation import validate_contribution, validate_initial_budget

logger = logging.getLogger(__name__)

Alert = Callable[[str], None]
SpreadsheetWriter = Callable[[List[Record], str], object]


class SessionPhaseError(RuntimeError):
    """Raised when an operation is not available in the current phase."""


def _decline(message: str) -> bool:
    return False


def _log_alert(message: str) -> None:
    logger.warning(message)


class LedgerSession:
    """State of one user session: phase, form values and ledger."""

    def __init__(
        self,
        *,
        alert: Optional[Alert] = None,
        confirm: Optional[Confirm] = None,
        spreadsheet_writer: Optional[SpreadsheetWriter] = None,
        id_generator: Optional[IdGenerator] = None,
    ):
        self.alert = alert or _log_alert
        # Nothing is deleted unless a real confirmation is wired in
        self.confirm = confirm or _decline
        self.spreadsheet_writer = spreadsheet_writer or write_workbook
        self.id_generator = id_generator
        self.phase = SessionPhase.CONFIGURATION
        self.form = ContributionForm()
        self._ledger: Optional[Ledger] = None

    @property
    def ledger(self) -> Ledger:
        if self._ledger is None:
            raise SessionPhaseError("The budget has not been configured yet")
        return self._ledger

    @property
    def is_configured(self) -> bool:
        return self.phase is SessionPhase.LEDGER

    # Configuration stage -------------------------------------------------

    def configure(self, initial_budget) -> bool:
        """Commit the initial budget and open the ledger.

        Returns:
            True when the budget was accepted. On rejection the alert is
            shown and the session stays in the configuration phase.
        """
        if self.phase is not SessionPhase.CONFIGURATION:
            raise SessionPhaseError("The initial budget is already configured")
        result = validate_initial_budget(initial_budget)
        if not result.accepted:
            logger.info("Rejected initial budget %r", initial_budget)
            self.alert(result.reason)
            return False
        self._ledger = Ledger(result.value, id_generator=self.id_generator)
        self.phase = SessionPhase.LEDGER
        logger.info("Configured initial budget %s", result.value)
        return True

    # Ledger stage ----------------------------------------------------------

    def _require_ledger(self) -> Ledger:
        if self.phase is not SessionPhase.LEDGER:
            raise SessionPhaseError("Configure the initial budget first")
        return self.ledger

    @property
    def contributions(self) -> List[Contribution]:
        return self._require_ledger().contributions

    @property
    def remaining_budget(self) -> Decimal:
        return self._require_ledger().remaining_budget

    @property
    def initial_budget(self) -> Decimal:
        return self._require_ledger().initial_budget

    def change_field(self, field_name: str, raw_value) -> None:
        """Store a form field value; the phone is regrouped as it is typed."""
        if field_name not in ContributionForm.FIELDS:
            raise ValueError(f"Unknown form field: {field_name}")
        if field_name == "phone":
            raw_value = format_phone_number(raw_value or "")
        setattr(self.form, field_name, raw_value)
        logger.debug("Form field %s changed", field_name)

    def submit_contribution(self) -> Optional[Contribution]:
        """Validate the form and add its contribution to the ledger.

        Returns:
            The new contribution, or None when the form was rejected. A
            rejected form keeps its values so the user can correct them.
        """
        ledger = self._require_ledger()
        self.form.phone = format_phone_number(self.form.phone or "")
        result = validate_contribution(self.form)
        if not result.accepted:
            logger.info("Rejected contribution form: %s", result.reason)
            self.alert(result.reason)
            return None
        try:
            contribution = ledger.add(**result.value)
        except BudgetExceededError as exc:
            logger.info("Rejected contribution of %s; only %s remaining", exc.amount, exc.remaining)
            self.alert(str(exc))
            return None
        self.form.reset()
        return contribution

    def delete_contribution(self, contribution_id: str, confirm: Optional[Confirm] = None) -> bool:
        """Delete a contribution after confirmation.

        Args:
            contribution_id: Id of the contribution to remove.
            confirm: Overrides the session's confirmation capability for
                this request.
        """
        ledger = self._require_ledger()
        return ledger.delete(contribution_id, confirm or self.confirm)

    def export_records(self) -> List[Record]:
        return build_export_records(self._require_ledger().contributions)

    def export_contributions(self, writer: Optional[SpreadsheetWriter] = None) -> None:
        """Hand the current list, newest first, to the spreadsheet writer."""
        records = self.export_records()
        logger.debug("Exporting %d contributions", len(records))
        (writer or self.spreadsheet_writer)(records, config.EXPORT_FILENAME)
