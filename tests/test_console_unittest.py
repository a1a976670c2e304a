import io
import os
import unittest
import sys
from datetime import datetime
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from console import (
    ConsoleDisplay,
    ConsoleReporter,
    FixedClock,
    LoggingReporter,
    MemoryDisplay,
    SystemClock,
)


class ConsoleTests(unittest.TestCase):
    def test_console_display_writes_lines(self):
        buf = io.StringIO()
        display = ConsoleDisplay(stream=buf)
        display.write_line("** Checkout receipt")
        display.write_line("")
        self.assertEqual(buf.getvalue(), "** Checkout receipt\n\n")

    def test_console_reporter_writes_message(self):
        buf = io.StringIO()
        ConsoleReporter(stream=buf).report_error("Cart is empty")
        self.assertEqual(buf.getvalue(), "Cart is empty\n")

    def test_logging_reporter(self):
        with self.assertLogs('console', level='ERROR') as cm:
            LoggingReporter().report_error("Insufficient balance.")
        self.assertIn("Insufficient balance.", cm.output[0])

    def test_memory_display_text(self):
        display = MemoryDisplay()
        display.write_line("a")
        display.write_line("b")
        self.assertEqual(display.text, "a\nb")

    def test_clocks(self):
        instant = datetime(2025, 12, 31, 8, 30)
        self.assertEqual(FixedClock(instant).now(), instant)
        self.assertIsInstance(SystemClock().now(), datetime)


if __name__ == '__main__':
    unittest.main()
