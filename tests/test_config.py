import importlib
import logging
import os
import tempfile
import unittest
from pathlib import Path

from fleet_health.config import logging_config
from fleet_health.config.config import Config


class TestConfig(unittest.TestCase):
    def test_config_defaults(self):
        self.assertEqual(Config.SERVER_LIST_PATH, "server.txt")
        self.assertEqual(Config.REPORT_PATH, "report.json")
        self.assertEqual(Config.WORKER_COUNT, 10)
        self.assertEqual(Config.SERVER_SCHEME, "http")
        self.assertEqual(Config.HEALTH_PATH, "/healthz")
        self.assertIsInstance(Config.PROBE_TIMEOUT, float)

    def test_config_env_override(self):
        import fleet_health.config.config as config_mod

        os.environ["WORKER_COUNT"] = "3"
        os.environ["REPORT_PATH"] = "/tmp/out.json"
        try:
            importlib.reload(config_mod)
            self.assertEqual(config_mod.Config.WORKER_COUNT, 3)
            self.assertEqual(config_mod.Config.REPORT_PATH, "/tmp/out.json")
        finally:
            del os.environ["WORKER_COUNT"]
            del os.environ["REPORT_PATH"]
            importlib.reload(config_mod)


class TestLoggingConfig(unittest.TestCase):
    def tearDown(self):
        logging_config.setup_logging(log_file=None)

    def test_logging_setup(self):
        try:
            logging_config.setup_logging()
        except Exception as e:
            self.fail(f"setup_logging() raised {e}")
        logger = logging.getLogger()
        self.assertTrue(logger.hasHandlers())
        self.assertEqual(logging.getLogger("httpx").level, logging.WARNING)

    def test_console_only_without_log_file(self):
        config = logging_config.build_logging_config("INFO", None)
        self.assertEqual(list(config["handlers"]), ["console"])
        self.assertEqual(config["handlers"]["console"]["stream"], "ext://sys.stderr")

    def test_file_handler_when_log_file_set(self):
        with tempfile.TemporaryDirectory() as tmp:
            log_file = str(Path(tmp) / "fleet.log")
            logging_config.setup_logging(level="DEBUG", log_file=log_file)
            root = logging.getLogger()
            self.assertTrue(
                any(isinstance(h, logging.FileHandler) for h in root.handlers)
            )
            self.assertEqual(root.level, logging.DEBUG)
            logging_config.setup_logging(log_file=None)


if __name__ == "__main__":
    unittest.main()
