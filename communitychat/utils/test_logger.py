import unittest
import logging
from unittest import mock
from communitychat.utils.config import settings
from communitychat.utils.logger import console_level, setup_logger

class TestLogger(unittest.TestCase):
    def test_known_level_names(self):
        self.assertEqual(console_level("debug"), logging.DEBUG)
        self.assertEqual(console_level("WARNING"), logging.WARNING)

    def test_unknown_level_falls_back_to_info(self):
        self.assertEqual(console_level("LOUD"), logging.INFO)
        self.assertEqual(console_level(""), logging.INFO)

    def test_setup_with_bad_level_uses_info(self):
        with mock.patch.object(settings, "log_level", "nonsense"):
            logger = setup_logger("communitychat.test.badlevel")
        console = [h for h in logger.handlers if type(h) is logging.StreamHandler]
        self.assertEqual(console[0].level, logging.INFO)

    def test_setup_is_idempotent(self):
        first = setup_logger("communitychat.test.twice")
        count = len(first.handlers)
        self.assertIs(setup_logger("communitychat.test.twice"), first)
        self.assertEqual(len(first.handlers), count)

if __name__ == '__main__':
    unittest.main()
