import sys, os, io, json, logging, unittest
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

import structlog

from seqdiff.comparator import StringsComparator
from seqdiff.log import configure_logging, get_logger


class TestConfigureLogging(unittest.TestCase):
    def setUp(self):
        structlog.reset_defaults()

    def tearDown(self):
        structlog.reset_defaults()
        package_logger = logging.getLogger("seqdiff")
        for handler in list(package_logger.handlers):
            package_logger.removeHandler(handler)
        package_logger.setLevel(logging.NOTSET)

    def test_console_output(self):
        stream = io.StringIO()
        configure_logging(level="DEBUG", stream=stream)
        StringsComparator("bottle", "noodle").get_script()
        output = stream.getvalue()
        self.assertIn("edit_script_built", output)
        self.assertIn("lcs_length=3", output)

    def test_json_output(self):
        stream = io.StringIO()
        configure_logging(level="debug", json_format=True, stream=stream)
        StringsComparator("aa", "C").get_script()
        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        self.assertEqual(record["event"], "edit_script_built")
        self.assertEqual(record["level"], "debug")
        self.assertEqual(record["modifications"], 3)
        self.assertIn("timestamp", record)

    def test_level_filters_debug(self):
        stream = io.StringIO()
        configure_logging(level="WARNING", stream=stream)
        StringsComparator("bottle", "noodle").get_script()
        self.assertEqual(stream.getvalue(), "")

    def test_reconfigure_replaces_handler(self):
        configure_logging(level="INFO", stream=io.StringIO())
        configure_logging(level="INFO", stream=io.StringIO())
        self.assertEqual(len(logging.getLogger("seqdiff").handlers), 1)

    def test_get_logger_defaults_to_package(self):
        stream = io.StringIO()
        configure_logging(level="INFO", stream=stream)
        get_logger().info("custom_event", answer=42)
        self.assertIn("custom_event", stream.getvalue())


if __name__ == '__main__':
    unittest.main()
