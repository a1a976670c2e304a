import logging
import sys
from datetime import datetime

logger = logging.getLogger(__name__)


# --- CLOCKS ---
class SystemClock:
    def now(self):
        return datetime.now()


class FixedClock:
    """Clock that always answers the same instant (tests, --today)."""

    def __init__(self, instant):
        self.instant = instant

    def now(self):
        return self.instant


# --- REPORTERS (failure channel) ---
class ConsoleReporter:
    def __init__(self, stream=None):
        self.stream = stream

    def report_error(self, message):
        print(message, file=self.stream or sys.stderr)


class LoggingReporter:
    def __init__(self, log=None):
        self.log = log or logger

    def report_error(self, message):
        self.log.error(message)


class MemoryReporter:
    def __init__(self):
        self.messages = []

    def report_error(self, message):
        self.messages.append(message)


# --- DISPLAYS (receipt / manifest channel) ---
class ConsoleDisplay:
    def __init__(self, stream=None):
        self.stream = stream

    def write_line(self, text):
        print(text, file=self.stream or sys.stdout)


class MemoryDisplay:
    def __init__(self):
        self.lines = []

    def write_line(self, text):
        self.lines.append(text)

    @property
    def text(self):
        return "\n".join(self.lines)
