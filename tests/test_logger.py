import io
import logging
import unittest

from crossgrid.utils.logger import configure_logging, get_logger


class LoggerTests(unittest.TestCase):
    def tearDown(self) -> None:
        configure_logging(logging.WARNING)

    def test_names_are_kept_inside_the_package_namespace(self) -> None:
        self.assertEqual(get_logger().name, "crossgrid")
        self.assertEqual(get_logger("crossgrid.engine.grid").name, "crossgrid.engine.grid")
        self.assertEqual(get_logger("cli").name, "crossgrid.cli")

    def test_records_go_to_the_configured_stream(self) -> None:
        stream = io.StringIO()
        configure_logging(logging.DEBUG, stream=stream)
        get_logger("crossgrid.engine.search").debug("tried %s", "SOL")
        self.assertIn("| DEBUG   | crossgrid.engine.search | tried SOL", stream.getvalue())

    def test_reconfiguring_replaces_the_handler(self) -> None:
        first = io.StringIO()
        second = io.StringIO()
        configure_logging(logging.INFO, stream=first)
        configure_logging(logging.INFO, stream=second)
        get_logger("tests").info("once")
        self.assertEqual(first.getvalue(), "")
        self.assertIn("once", second.getvalue())
        self.assertEqual(len(logging.getLogger("crossgrid").handlers), 1)

    def test_level_filters_records(self) -> None:
        stream = io.StringIO()
        configure_logging(logging.WARNING, stream=stream)
        get_logger("tests").info("hidden")
        self.assertEqual(stream.getvalue(), "")
