"""PII (Personally Identifiable Information) logging filter.

Redacts customer contact details from log messages so that transcript
fragments quoted in debug output never leak names, phone numbers or emails.
"""

import logging
from typing import Any

from linekb.core.pii_utils import redact_for_logs


class PIIFilter(logging.Filter):
    """Logging filter that redacts PII from log messages."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter log record by redacting PII from message.

        Args:
            record: The log record to filter

        Returns:
            True (always allow the record, but with redacted content)
        """
        if record.msg:
            record.msg = redact_for_logs(str(record.msg))

        # Also redact from args if present
        if record.args:
            if isinstance(record.args, dict):
                record.args = {
                    k: self._redact_string(v) for k, v in record.args.items()
                }
            elif isinstance(record.args, tuple):
                record.args = tuple(self._redact_string(arg) for arg in record.args)

        return True

    def _redact_string(self, value: Any) -> Any:
        """Redact PII from a string value, leaving other types untouched."""
        if isinstance(value, str):
            return redact_for_logs(value)
        return value
