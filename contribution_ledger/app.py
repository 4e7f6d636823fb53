"""Streamlit page for the collective budget contribution ledger.

The page has two phases. First the user sets the initial budget; after
that the page shows the remaining budget, the contribution form and the
list of contributions with delete and Excel export actions.

To run the page from the command line::

    streamlit run contribution_ledger/app.py

or use the ``run_ledger.py`` launcher at the project root.

All state lives in a :class:`LedgerSession` stored in
``st.session_state``. Widget callbacks translate widget values into
session events; the session never touches Streamlit directly.
"""

from __future__ import annotations

import os
import sys
from typing import List

import streamlit as st
from streamlit.errors import StreamlitAPIException

# Conditional imports to support execution both as part of a package and
# directly via ``streamlit run contribution_ledger/app.py``.
if __package__:
    from . import config
    from .export import Record, workbook_bytes
    from .formatting import format_currency
    from .logging_config import setup_logging
    from .models import Contribution, SessionPhase
    from .session import LedgerSession
    from .visualization import create_budget_usage_chart
else:
    CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
    PARENT_DIR = os.path.dirname(CURRENT_DIR)
    if PARENT_DIR not in sys.path:
        sys.path.insert(0, PARENT_DIR)
    from contribution_ledger import config  # type: ignore
    from contribution_ledger.export import Record, workbook_bytes  # type: ignore
    from contribution_ledger.formatting import format_currency  # type: ignore
    from contribution_ledger.logging_config import setup_logging  # type: ignore
    from contribution_ledger.models import Contribution, SessionPhase  # type: ignore
    from contribution_ledger.session import LedgerSession  # type: ignore
    from contribution_ledger.visualization import create_budget_usage_chart  # type: ignore

SESSION_KEY = "ledger_session"
BUDGET_INPUT_KEY = "initial_budget_input"
PENDING_DELETE_KEY = "pending_delete"
FIELD_KEYS = {
    "surname": "form_surname",
    "given_name": "form_given_name",
    "phone": "form_phone",
    "amount": "form_amount",
}


def _alert(message: str) -> None:
    st.error(message)


def _get_session() -> LedgerSession:
    state = st.session_state
    if SESSION_KEY not in state:
        state[SESSION_KEY] = LedgerSession(alert=_alert)
    return state[SESSION_KEY]


def _sync_widgets(session: LedgerSession) -> None:
    """Copy the session's form values back into the widget state."""
    st.session_state[FIELD_KEYS["surname"]] = session.form.surname
    st.session_state[FIELD_KEYS["given_name"]] = session.form.given_name
    st.session_state[FIELD_KEYS["phone"]] = session.form.phone
    amount = session.form.amount
    st.session_state[FIELD_KEYS["amount"]] = float(amount) if amount is not None else None


# Widget callbacks ----------------------------------------------------------

def _on_configure() -> None:
    _get_session().configure(st.session_state.get(BUDGET_INPUT_KEY))


def _on_field_change(field_name: str) -> None:
    session = _get_session()
    key = FIELD_KEYS[field_name]
    session.change_field(field_name, st.session_state.get(key))
    if field_name == "phone":
        st.session_state[key] = session.form.phone


def _on_submit() -> None:
    session = _get_session()
    for field_name, key in FIELD_KEYS.items():
        session.change_field(field_name, st.session_state.get(key))
    session.submit_contribution()
    _sync_widgets(session)


def _request_delete(contribution_id: str) -> None:
    st.session_state[PENDING_DELETE_KEY] = contribution_id


def _answer_delete(answer: bool) -> None:
    pending = st.session_state.get(PENDING_DELETE_KEY)
    st.session_state[PENDING_DELETE_KEY] = None
    if pending is None:
        return
    _get_session().delete_contribution(pending, confirm=lambda message: answer)


def _download_writer(records: List[Record], filename: str) -> None:
    st.download_button(
        label="📥 Export to Excel",
        data=workbook_bytes(records),
        file_name=filename,
        mime=config.XLSX_MIME,
    )


# Rendering -----------------------------------------------------------------

def _setup_page_config() -> None:
    try:
        st.set_page_config(page_title="Collective Budget", page_icon="💶", layout="centered")
    except StreamlitAPIException:
        # A callback already wrote to the page during this rerun.
        pass


def render_configuration() -> None:
    """Render the initial budget form."""
    st.header("⚙️ Budget configuration")
    st.session_state.setdefault(BUDGET_INPUT_KEY, float(config.DEFAULT_INITIAL_BUDGET))
    st.number_input(
        f"Initial budget ({config.CURRENCY_CODE})",
        key=BUDGET_INPUT_KEY,
        min_value=0.0,
        step=0.01,
        format="%.2f",
        help="Enter the total budget to manage",
    )
    st.button("Configure budget", key="configure_budget", on_click=_on_configure, type="primary", width="stretch")


def _render_header(session: LedgerSession) -> None:
    st.title("Collective Budget")
    col1, col2 = st.columns([2, 1])
    with col1:
        st.metric("Remaining budget", format_currency(session.remaining_budget))
        st.caption(f"of {format_currency(session.initial_budget)}")
    with col2:
        st.plotly_chart(
            create_budget_usage_chart(session.initial_budget, session.remaining_budget),
            width="stretch",
        )


def _render_contribution_form() -> None:
    st.subheader("New contribution")
    for key in FIELD_KEYS.values():
        st.session_state.setdefault(key, None if key == FIELD_KEYS["amount"] else "")

    col1, col2 = st.columns(2)
    with col1:
        st.text_input(
            "Last name",
            key=FIELD_KEYS["surname"],
            placeholder="e.g. Dupont",
            on_change=_on_field_change,
            args=("surname",),
        )
    with col2:
        st.text_input(
            "First name",
            key=FIELD_KEYS["given_name"],
            placeholder="e.g. Jean",
            on_change=_on_field_change,
            args=("given_name",),
        )
    st.text_input(
        "Phone number",
        key=FIELD_KEYS["phone"],
        placeholder="e.g. 06 12 34 56 78",
        help="Format: 06 12 34 56 78",
        on_change=_on_field_change,
        args=("phone",),
    )
    st.number_input(
        f"Amount ({config.CURRENCY_SYMBOL})",
        key=FIELD_KEYS["amount"],
        min_value=0.0,
        step=0.01,
        format="%.2f",
        placeholder="e.g. 50.00",
        on_change=_on_field_change,
        args=("amount",),
    )
    st.button("Add contribution", key="add_contribution", on_click=_on_submit, type="primary")


def _render_contribution_row(contribution: Contribution, pending_id: str | None) -> None:
    col1, col2, col3 = st.columns([5, 2, 1])
    with col1:
        st.markdown(f"**{contribution.full_name}**")
        st.caption(contribution.phone)
    with col2:
        st.markdown(f":green[**{format_currency(contribution.amount)}**]")
    with col3:
        st.button(
            "🗑️",
            key=f"delete_{contribution.id}",
            help="Delete this contribution",
            on_click=_request_delete,
            args=(contribution.id,),
        )
    if pending_id == contribution.id:
        st.warning(config.DELETE_CONFIRMATION_MESSAGE)
        yes_col, no_col, _ = st.columns([1, 1, 4])
        yes_col.button("Yes", key=f"confirm_{contribution.id}", on_click=_answer_delete, args=(True,))
        no_col.button("No", key=f"cancel_{contribution.id}", on_click=_answer_delete, args=(False,))


def _render_contribution_list(session: LedgerSession) -> None:
    header_col, export_col = st.columns([3, 1])
    with header_col:
        st.subheader("👥 Contributions")
    with export_col:
        session.export_contributions(writer=_download_writer)

    contributions = session.contributions
    if not contributions:
        st.info(config.EMPTY_LEDGER_MESSAGE)
        return
    pending_id = st.session_state.get(PENDING_DELETE_KEY)
    for contribution in contributions:
        _render_contribution_row(contribution, pending_id)
        st.divider()


def render_ledger(session: LedgerSession) -> None:
    """Render the budget header, the contribution form and the list."""
    _render_header(session)
    _render_contribution_form()
    _render_contribution_list(session)


def main() -> None:
    """Entry point for the Streamlit app."""
    setup_logging()
    _setup_page_config()
    session = _get_session()
    if session.phase is SessionPhase.CONFIGURATION:
        render_configuration()
    else:
        render_ledger(session)


if __name__ == "__main__":  # pragma: no cover
    main()
