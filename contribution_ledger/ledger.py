"""Contribution ledger state and budget arithmetic.

The ledger holds the immutable initial budget and the contributions
admitted against it, newest first. The remaining budget is never stored:
it is recomputed from the collection every time it is read.
"""

from __future__ import annotations

import logging
import uuid
from decimal import Decimal
from typing import Callable, Iterator, List, Optional

from . import config
from .models import Contribution
from .validation import parse_amount

logger = logging.getLogger(__name__)

Confirm = Callable[[str], bool]
IdGenerator = Callable[[], str]


class LedgerError(Exception):
    """Base class for ledger errors."""


class InvalidBudgetError(LedgerError):
    """Raised when the initial budget is not strictly positive."""


class BudgetExceededError(LedgerError):
    """Raised when a contribution is larger than the remaining budget."""

    def __init__(self, amount: Decimal, remaining: Decimal):
        super().__init__(config.BUDGET_EXCEEDED_MESSAGE)
        self.amount = amount
        self.remaining = remaining


def new_contribution_id() -> str:
    return str(uuid.uuid4())


class Ledger:
    """Ordered contributions against a fixed initial budget."""

    def __init__(self, initial_budget, id_generator: Optional[IdGenerator] = None):
        """Create an empty ledger.

        Args:
            initial_budget: Strictly positive amount (Decimal, number or
                numeric string), rounded to cents.
            id_generator: Callable returning a fresh unique string per call.
                Defaults to UUID4.

        Raises:
            InvalidBudgetError: If the budget is missing, not numeric or
                not greater than zero.
        """
        try:
            budget = parse_amount(initial_budget)
        except ValueError as exc:
            raise InvalidBudgetError(config.INITIAL_BUDGET_MESSAGE) from exc
        if budget is None or budget <= 0:
            raise InvalidBudgetError(config.INITIAL_BUDGET_MESSAGE)
        self._initial_budget = budget
        self._contributions: List[Contribution] = []
        self._id_generator = id_generator or new_contribution_id

    @property
    def initial_budget(self) -> Decimal:
        return self._initial_budget

    @property
    def contributions(self) -> List[Contribution]:
        """Contributions newest first. Returns a copy."""
        return list(self._contributions)

    @property
    def total_contributed(self) -> Decimal:
        return sum((c.amount for c in self._contributions), Decimal("0.00"))

    @property
    def remaining_budget(self) -> Decimal:
        return self._initial_budget - self.total_contributed

    def __len__(self) -> int:
        return len(self._contributions)

    def __iter__(self) -> Iterator[Contribution]:
        return iter(list(self._contributions))

    def get(self, contribution_id: str) -> Optional[Contribution]:
        for contribution in self._contributions:
            if contribution.id == contribution_id:
                return contribution
        return None

    def can_afford(self, amount: Decimal) -> bool:
        return amount <= self.remaining_budget

    def add(self, surname: str, given_name: str, phone: str, amount) -> Contribution:
        """Admit a contribution and put it at the front of the list.

        Raises:
            BudgetExceededError: If ``amount`` is above the remaining budget.
                The ledger is left unchanged.
            ValueError: If ``amount`` is missing, not numeric or negative.
        """
        value = parse_amount(amount)
        if value is None or value < 0:
            raise ValueError(f"Contribution amount must be a non-negative number, got {amount!r}")
        if not self.can_afford(value):
            raise BudgetExceededError(value, self.remaining_budget)

        contribution = Contribution(
            id=self._id_generator(),
            surname=surname,
            given_name=given_name,
            phone=phone,
            amount=value,
        )
        self._contributions.insert(0, contribution)
        logger.info(
            "Added contribution %s (%s); remaining budget %s",
            contribution.id, value, self.remaining_budget,
        )
        return contribution

    def delete(self, contribution_id: str, confirm: Confirm) -> bool:
        """Remove a contribution once ``confirm`` agrees.

        ``confirm`` is called with the confirmation message and must return
        a bool. Unknown ids are ignored.

        Returns:
            True if a contribution was removed.
        """
        if not confirm(config.DELETE_CONFIRMATION_MESSAGE):
            logger.info("Deletion of contribution %s cancelled", contribution_id)
            return False
        before = len(self._contributions)
        self._contributions = [c for c in self._contributions if c.id != contribution_id]
        removed = len(self._contributions) < before
        if removed:
            logger.info(
                "Deleted contribution %s; remaining budget %s",
                contribution_id, self.remaining_budget,
            )
        else:
            logger.debug("No contribution with id %s to delete", contribution_id)
        return removed
