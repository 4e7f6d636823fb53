"""Page-level tests rendering contribution_ledger/app.py with Streamlit's AppTest."""

from __future__ import annotations

from pathlib import Path

from streamlit.testing.v1 import AppTest

from contribution_ledger import config

APP_PATH = Path(__file__).resolve().parents[1] / 'contribution_ledger' / 'app.py'


def _app() -> AppTest:
    at = AppTest.from_file(str(APP_PATH), default_timeout=30)
    at.run()
    return at


def _configure(at: AppTest, budget: float = 100.0) -> AppTest:
    at.number_input(key='initial_budget_input').set_value(budget)
    at.button(key='configure_budget').click()
    at.run()
    return at


def _add(at: AppTest, surname: str, given_name: str, phone: str, amount: float) -> AppTest:
    at.text_input(key='form_surname').input(surname)
    at.text_input(key='form_given_name').input(given_name)
    at.text_input(key='form_phone').input(phone)
    at.number_input(key='form_amount').set_value(amount)
    at.button(key='add_contribution').click()
    at.run()
    return at


def _delete_buttons(at: AppTest):
    return [b for b in at.button if b.key and b.key.startswith('delete_')]


def _button_keys(at: AppTest, prefix: str):
    return [b.key for b in at.button if b.key and b.key.startswith(prefix)]


def test_configuration_page_is_shown_first() -> None:
    at = _app()
    assert not at.exception
    assert at.header[0].value == "⚙️ Budget configuration"
    assert at.number_input(key='initial_budget_input').value == 5000.0
    assert len(at.metric) == 0


def test_zero_budget_stays_on_configuration_page() -> None:
    at = _configure(_app(), budget=0.0)
    assert at.error[0].value == config.INITIAL_BUDGET_MESSAGE
    assert len(at.metric) == 0
    assert at.header[0].value == "⚙️ Budget configuration"


def test_configure_switches_to_ledger_page() -> None:
    at = _configure(_app())
    assert not at.exception
    assert at.title[0].value == "Collective Budget"
    assert at.metric[0].value == "100.00 €"
    assert at.caption[0].value == "of 100.00 €"
    assert at.info[0].value == config.EMPTY_LEDGER_MESSAGE


def test_add_and_over_budget_scenario() -> None:
    at = _configure(_app())
    _add(at, 'Dupont', 'Jean', '0612345678', 30.0)
    assert at.metric[0].value == "70.00 €"
    assert "**Jean Dupont**" in [m.value for m in at.markdown]
    assert "06 12 34 56 78" in [c.value for c in at.caption]
    assert len(at.info) == 0
    assert at.text_input(key='form_surname').value == ''

    _add(at, 'Martin', 'Claire', '0711223344', 80.0)
    assert at.error[0].value == config.BUDGET_EXCEEDED_MESSAGE
    assert at.metric[0].value == "70.00 €"
    assert len(_delete_buttons(at)) == 1


def test_delete_prompt_only_on_pending_row() -> None:
    at = _configure(_app())
    _add(at, 'Dupont', 'Jean', '0612345678', 30.0)
    _add(at, 'Martin', 'Claire', '0711223344', 20.0)
    assert at.metric[0].value == "50.00 €"
    assert len(at.warning) == 0

    # newest first: the first trash button belongs to Martin
    target = _delete_buttons(at)[0]
    contribution_id = target.key[len('delete_'):]
    target.click()
    at.run()

    assert [w.value for w in at.warning] == [config.DELETE_CONFIRMATION_MESSAGE]
    assert _button_keys(at, 'confirm_') == [f'confirm_{contribution_id}']
    assert _button_keys(at, 'cancel_') == [f'cancel_{contribution_id}']

    at.button(key=f'confirm_{contribution_id}').click()
    at.run()
    assert len(at.warning) == 0
    assert at.metric[0].value == "70.00 €"
    assert "**Claire Martin**" not in [m.value for m in at.markdown]
    assert len(_delete_buttons(at)) == 1


def test_declined_delete_keeps_row_then_yes_empties_list() -> None:
    at = _configure(_app())
    _add(at, 'Dupont', 'Jean', '0612345678', 30.0)
    contribution_id = _delete_buttons(at)[0].key[len('delete_'):]

    _delete_buttons(at)[0].click()
    at.run()
    at.button(key=f'cancel_{contribution_id}').click()
    at.run()
    assert len(at.warning) == 0
    assert at.metric[0].value == "70.00 €"

    _delete_buttons(at)[0].click()
    at.run()
    at.button(key=f'confirm_{contribution_id}').click()
    at.run()
    assert at.metric[0].value == "100.00 €"
    assert at.info[0].value == config.EMPTY_LEDGER_MESSAGE
