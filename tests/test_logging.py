"""Тесты настройки логирования"""

import logging

import pytest

from nos_signer.utils.logging import PACKAGE_LOGGER, setup_logging


@pytest.fixture(autouse=True)
def restore_package_level():
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    level = package_logger.level
    yield
    package_logger.setLevel(level)


class TestSetupLogging:
    def test_package_level(self):
        setup_logging(level="WARNING", package_log_level="debug")

        assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG
        assert logging.getLogger("nos_signer.nos.client").isEnabledFor(logging.DEBUG)

    def test_package_inherits_root_level(self):
        logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG)

        setup_logging(level="INFO")

        assert logging.getLogger(PACKAGE_LOGGER).level == logging.NOTSET
