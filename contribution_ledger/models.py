"""Data records shared by the ledger, the session and the page."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional, Union


class SessionPhase(Enum):
    """Which set of operations the session currently exposes."""

    CONFIGURATION = "configuration"
    LEDGER = "ledger"


@dataclass(frozen=True)
class Contribution:
    """A single admitted contribution. Immutable once created."""

    id: str
    surname: str
    given_name: str
    phone: str
    amount: Decimal

    @property
    def full_name(self) -> str:
        return f"{self.given_name} {self.surname}"


@dataclass
class ContributionForm:
    """In-progress values of the contribution form."""

    surname: str = ""
    given_name: str = ""
    phone: str = ""
    amount: Optional[Union[Decimal, float, int, str]] = None

    FIELDS = ("surname", "given_name", "phone", "amount")

    def reset(self) -> None:
        self.surname = ""
        self.given_name = ""
        self.phone = ""
        self.amount = None
