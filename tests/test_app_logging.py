import logging

from rich.logging import RichHandler

from validador_ec.core.app_logging import PACKAGE_LOGGER, configure_logging


def test_configure_logging_is_idempotent():
    configure_logging("INFO")
    logger = configure_logging("DEBUG")

    assert logger.name == PACKAGE_LOGGER
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], RichHandler)


def test_unknown_level_falls_back_to_warning():
    assert configure_logging("NOPE").level == logging.WARNING
