import logging

import pytest

from swisspairing.utils import ROOT_LOGGER_NAME, configure_logging, generate_id, setup_logger


def test_module_loggers_live_under_package_root():
    logger = setup_logger("swisspairing.tournament.engine")
    assert logger.name.startswith(ROOT_LOGGER_NAME)


def test_configure_logging_accepts_level_names():
    root = configure_logging("debug")
    assert root.level == logging.DEBUG
    handlers = len(root.handlers)
    configure_logging(logging.WARNING)
    assert root.level == logging.WARNING
    assert len(root.handlers) == handlers


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        configure_logging("loud")


def test_generate_id():
    assert generate_id() != generate_id()
    assert generate_id("match").startswith("match-")
