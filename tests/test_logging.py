"""
Test coreutils logging setup - level handling from LOG_LEVEL
"""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import logging
import unittest
from unittest.mock import patch

from src.coreutils.logging import resolve_level, setup_logging


class TestResolveLevel(unittest.TestCase):
    def test_known_names(self):
        self.assertEqual(resolve_level("debug"), "DEBUG")
        self.assertEqual(resolve_level(" warning "), "WARNING")
        self.assertEqual(resolve_level(logging.ERROR), logging.ERROR)

    def test_unknown_name_falls_back_to_info(self):
        self.assertEqual(resolve_level("verbose"), "INFO")
        self.assertEqual(resolve_level(""), "INFO")

    @patch.dict(os.environ, {"LOG_LEVEL": "verbose"})
    def test_invalid_env_value_falls_back_to_info(self):
        self.assertEqual(resolve_level(), "INFO")

    @patch.dict(os.environ, {}, clear=True)
    def test_unset_env_defaults_to_info(self):
        self.assertEqual(resolve_level(), "INFO")


class TestSetupLogging(unittest.TestCase):
    @patch.dict(os.environ, {"LOG_LEVEL": "verbose"})
    @patch("src.coreutils.logging.os.makedirs")
    @patch("src.coreutils.logging.logging.FileHandler")
    @patch("src.coreutils.logging.logging.basicConfig")
    def test_invalid_env_level_does_not_raise(
        self, mock_basic_config, mock_file_handler, mock_makedirs
    ):
        setup_logging()

        mock_basic_config.assert_called_once()
        self.assertEqual(mock_basic_config.call_args.kwargs["level"], "INFO")


if __name__ == "__main__":
    unittest.main()
