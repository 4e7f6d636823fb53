import logging

from contribution_ledger.logging_config import get_log_level, setup_logging


def test_get_log_level_defaults_to_info() -> None:
    assert get_log_level("DEBUG") == logging.DEBUG
    assert get_log_level("verbose") == logging.INFO


def test_setup_logging_installs_one_handler() -> None:
    logger = setup_logging("WARNING")
    setup_logging("DEBUG")
    names = [h.get_name() for h in logger.handlers]
    assert names.count("contribution_ledger.stdout") == 1
    assert logger.level == logging.DEBUG
