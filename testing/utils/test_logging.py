"""Tests for logging configuration."""

import logging
import unittest
from unittest.mock import patch

from clickup_client.utils.logging import configure_logging


class TestConfigureLogging(unittest.TestCase):
    """Tests for configure_logging."""

    def setUp(self) -> None:
        """Save the root logger state."""
        self.root = logging.getLogger()
        self.saved_level = self.root.level
        self.saved_handlers = list(self.root.handlers)
        self.saved_urllib3 = logging.getLogger("urllib3").level

    def tearDown(self) -> None:
        """Restore the root logger state."""
        self.root.handlers[:] = self.saved_handlers
        self.root.setLevel(self.saved_level)
        logging.getLogger("urllib3").setLevel(self.saved_urllib3)

    @patch.dict("os.environ", {"LOG_LEVEL": "WARNING"}, clear=True)
    def test_level_from_environment(self) -> None:
        """Test that LOG_LEVEL sets the root level with a single handler."""
        configure_logging()

        self.assertEqual(self.root.level, logging.WARNING)
        self.assertEqual(len(self.root.handlers), 1)

    @patch.dict("os.environ", {"LOG_LEVEL": "WARNING"}, clear=True)
    def test_argument_overrides_environment(self) -> None:
        """Test that an explicit level wins over LOG_LEVEL."""
        configure_logging("debug")

        self.assertEqual(self.root.level, logging.DEBUG)

    @patch.dict("os.environ", {}, clear=True)
    def test_http_wire_quiet_by_default(self) -> None:
        """Test that urllib3 is raised to INFO when wire logging is off."""
        configure_logging("DEBUG")

        self.assertEqual(logging.getLogger("urllib3").level, logging.INFO)

    def test_invalid_level_raises(self) -> None:
        """Test that an unknown level name raises ValueError."""
        with self.assertRaises(ValueError):
            configure_logging("LOUD")


if __name__ == "__main__":
    unittest.main()
