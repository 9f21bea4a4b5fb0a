from __future__ import annotations

import logging
from typing import Generator

import pytest

import podreport.utils.logger as logger_module
from podreport.utils.console import reconfigure_console


@pytest.fixture(autouse=True)
def reset_podreport_logging() -> Generator[None, None, None]:
    """Undo any CLI logging setup so caplog sees podreport records."""
    yield
    root_logger = logging.getLogger(logger_module.ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True
    logger_module._logging_configured = False


@pytest.fixture(autouse=True)
def reset_console() -> Generator[None, None, None]:
    """Give every test a fresh Rich console bound to its own stdout."""
    reconfigure_console()
    yield
    reconfigure_console()
