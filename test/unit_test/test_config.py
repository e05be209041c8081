"""
Test Config Module

Tests for environment-driven configuration and logging setup.
"""

import os
import sys
import logging
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from swap_estimator.config import (
    Config,
    ChainConfig,
    QuoterConfig,
    EstimateConfig,
    LoggingConfig,
    setup_logging,
)


class TestConfigDefaults(unittest.TestCase):
    """Defaults when no environment variables are set"""

    @patch.dict(os.environ, {}, clear=True)
    def test_chain_defaults(self):
        chain = ChainConfig()
        self.assertEqual(chain.bsc_rpc_url, "")
        self.assertEqual(chain.bsc_chain_id, 56)
        self.assertEqual(chain.timeout, 30.0)

    @patch.dict(os.environ, {}, clear=True)
    def test_quoter_defaults(self):
        quoter = QuoterConfig()
        self.assertEqual(quoter.default_fee_tier, 3000)
        self.assertEqual(quoter.token_decimals, 18)

    @patch.dict(os.environ, {}, clear=True)
    def test_estimate_defaults(self):
        self.assertEqual(EstimateConfig().debounce_seconds, 0.3)

    @patch.dict(os.environ, {}, clear=True)
    def test_logging_defaults(self):
        log_config = LoggingConfig()
        self.assertEqual(log_config.log_file, "")
        self.assertEqual(log_config.level, logging.INFO)
        self.assertTrue(log_config.console_output)


class TestConfigFromEnvironment(unittest.TestCase):
    """Values read from environment variables"""

    @patch.dict(os.environ, {
        "BSC_RPC_URL": "https://bsc.example.com",
        "CHAIN_TIMEOUT": "5",
        "QUOTER_DEFAULT_FEE_TIER": "500",
        "ESTIMATE_DEBOUNCE_SECONDS": "0.1",
        "LOG_LEVEL": "debug",
        "LOG_CONSOLE": "false",
    }, clear=True)
    def test_overrides(self):
        config = Config()
        self.assertEqual(config.chain.bsc_rpc_url, "https://bsc.example.com")
        self.assertEqual(config.chain.timeout, 5.0)
        self.assertEqual(config.quoter.default_fee_tier, 500)
        self.assertEqual(config.estimate.debounce_seconds, 0.1)
        self.assertEqual(config.logging.level, logging.DEBUG)
        self.assertFalse(config.logging.console_output)

    @patch.dict(os.environ, {
        "CHAIN_TIMEOUT": "soon",
        "QUOTER_DEFAULT_FEE_TIER": "3k",
    }, clear=True)
    def test_invalid_values_fall_back_to_defaults(self):
        with self.assertLogs("swap_estimator.config", level="WARNING"):
            chain = ChainConfig()
        self.assertEqual(chain.timeout, 30.0)

        with self.assertLogs("swap_estimator.config", level="WARNING"):
            quoter = QuoterConfig()
        self.assertEqual(quoter.default_fee_tier, 3000)

    @patch.dict(os.environ, {"LOG_LEVEL": "verbose"}, clear=True)
    def test_unknown_log_level_is_info(self):
        self.assertEqual(LoggingConfig().level, logging.INFO)


class TestSetupLogging(unittest.TestCase):
    """Handler wiring for setup_logging"""

    def tearDown(self):
        logger = logging.getLogger("swap_estimator_test")
        for handler in logger.handlers[:]:
            handler.close()
            logger.removeHandler(handler)

    def test_console_only(self):
        logger = setup_logging(
            LoggingConfig(log_file="", log_level="WARNING", console_output=True),
            logger_name="swap_estimator_test",
        )
        self.assertEqual(logger.level, logging.WARNING)
        self.assertEqual(len(logger.handlers), 1)
        self.assertIsInstance(logger.handlers[0], logging.StreamHandler)

    def test_file_handler_creates_directory(self):
        with tempfile.TemporaryDirectory() as tmp:
            log_file = os.path.join(tmp, "nested", "quotes.log")
            logger = setup_logging(
                LoggingConfig(log_file=log_file, log_level="INFO", console_output=False),
                logger_name="swap_estimator_test",
            )
            self.assertTrue(os.path.isdir(os.path.dirname(log_file)))
            self.assertEqual(len(logger.handlers), 1)
            self.assertEqual(logger.handlers[0].__class__.__name__, "RotatingFileHandler")
            self.tearDown()

    def test_repeated_setup_replaces_handlers(self):
        log_config = LoggingConfig(log_file="", log_level="INFO", console_output=True)
        setup_logging(log_config, logger_name="swap_estimator_test")
        logger = setup_logging(log_config, logger_name="swap_estimator_test")
        self.assertEqual(len(logger.handlers), 1)


if __name__ == "__main__":
    unittest.main()
