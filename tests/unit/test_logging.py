"""Tests for logging configuration and behavior."""

import logging

from bankengine import Bank, RequestType
from bankengine.logging import DEEP_DEBUG, BankLogger, getLogger, level_from_name


class TestBankLogger:
    """Test custom BankLogger functionality."""

    def test_getlogger_returns_banklogger(self):
        assert isinstance(getLogger("bankengine.test"), BankLogger)

    def test_deep_level_exists(self):
        assert DEEP_DEBUG == 5
        assert logging.getLevelName(DEEP_DEBUG) == "DEEP"

    def test_deep_logging_when_enabled(self, caplog):
        logger = getLogger("test.deep")
        logger.setLevel(DEEP_DEBUG)

        with caplog.at_level(DEEP_DEBUG, logger="test.deep"):
            logger.deep("Deep debug message")

        assert "Deep debug message" in caplog.text

    def test_deep_logging_when_disabled(self, caplog):
        logger = getLogger("test.deep_disabled")
        logger.setLevel(logging.INFO)

        with caplog.at_level(logging.INFO, logger="test.deep_disabled"):
            logger.deep("Should not appear")

        assert "Should not appear" not in caplog.text

    def test_level_from_name(self):
        assert level_from_name("deep_debug") == DEEP_DEBUG
        assert level_from_name("WARNING") == logging.WARNING


class TestLoggingConfiguration:
    """Test logging configuration via Bank.init()."""

    def test_set_default_level(self):
        Bank.init(logging={"default_level": "WARNING"})
        assert logging.getLogger("bankengine").level == logging.WARNING

    def test_per_module_override(self):
        Bank.init(
            logging={
                "default_level": "INFO",
                "modules": {"safety": "DEEP_DEBUG", "bank": "ERROR"},
            }
        )
        assert logging.getLogger("bankengine.safety").level == DEEP_DEBUG
        assert logging.getLogger("bankengine.bank").level == logging.ERROR
        # restore for other tests
        logging.getLogger("bankengine.safety").setLevel(logging.NOTSET)
        logging.getLogger("bankengine.bank").setLevel(logging.NOTSET)


class TestCommitLogging:
    def test_verdict_logged_at_info(self, caplog):
        bank = Bank(100, 0.1, 0.0, bucket_capacity=8)
        bank.request(1, RequestType.LOAN, 150)
        with caplog.at_level(logging.INFO, logger="bankengine"):
            bank.commit_loans()
        assert "Loans rejected" in caplog.text

    def test_grants_logged_at_deep_debug(self, caplog):
        bank = Bank(100, 0.1, 0.0, bucket_capacity=8)
        bank.request(1, RequestType.LOAN, 50)
        with caplog.at_level(DEEP_DEBUG, logger="bankengine"):
            bank.commit_loans()
        assert "granted request 0" in caplog.text

    def test_discarded_operations_logged_at_warning(self, caplog):
        bank = Bank(100, 0.1, 0.0, bucket_capacity=8)
        bank.request(42, RequestType.WITHDRAW, 10)
        with caplog.at_level(logging.WARNING, logger="bankengine"):
            bank.end_epoch()
        assert "Operations rejected" in caplog.text
        assert "42" in caplog.text
