"""Top‑level package for the Contribution Ledger.

Tracks contributions against a fixed collective budget. The primary
modules are:

* ``ledger`` – the budget, the contributions and the remaining-budget arithmetic
* ``session`` – the configuration/ledger phases and the form events
* ``export`` – building the Excel workbook of the contribution list
* ``app`` – a Streamlit page that ties everything together

To run the page from the command line you can execute:

```bash
streamlit run contribution_ledger/app.py
```
"""

from .ledger import BudgetExceededError, InvalidBudgetError, Ledger, LedgerError
from .models import Contribution, ContributionForm, SessionPhase
from .session import LedgerSession, SessionPhaseError

__all__ = [
    "BudgetExceededError",
    "Contribution",
    "ContributionForm",
    "InvalidBudgetError",
    "Ledger",
    "LedgerError",
    "LedgerSession",
    "SessionPhase",
    "SessionPhaseError",
]
