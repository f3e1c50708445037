"""
Destinations for the errors, warnings and provenance notes produced while
evaluating an EPD. Any object with record_error / record_warning /
record_note methods can be passed to the evaluator.
"""

import logging


class LoggingSink:
    """
    Forwards messages to a standard library logger.
    """
    def __init__(self, logger=None):
        self.logger = logger or logging.getLogger("epd_birdy")

    def record_error(self, message):
        self.logger.error(message)

    def record_warning(self, message):
        self.logger.warning(message)

    def record_note(self, message):
        self.logger.info(message)


class RecordingSink:
    """
    Keeps every message in memory so callers can inspect the audit trail.
    """
    def __init__(self):
        self.errors = []
        self.warnings = []
        self.notes = []

    def record_error(self, message):
        self.errors.append(message)

    def record_warning(self, message):
        self.warnings.append(message)

    def record_note(self, message):
        self.notes.append(message)

    def clear(self):
        self.errors.clear()
        self.warnings.clear()
        self.notes.clear()


default_sink = LoggingSink()
