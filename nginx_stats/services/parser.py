"""
LogParser Class - Handles parsing and validation

This module parses raw nginx JSON log lines into structured LogRecord objects.
"""

import json
import logging
from typing import Any, Dict

from nginx_stats.errors import DecodeError
from nginx_stats.models.data_models import LogRecord

logger = logging.getLogger(__name__)

# JSON key -> LogRecord field, for the string-valued fields
STRING_FIELDS = (
    ("time", "timestamp"),
    ("remote_ip", "remote_address"),
    ("remote_user", "remote_user"),
    ("request", "request_line"),
    ("referrer", "referrer"),
    ("agent", "user_agent"),
)

MAX_STATUS = 65535


class LogParser:
    """
    Parses raw log lines into structured LogRecord objects.
    Responsibilities:
    - Parse JSON lines
    - Check each object has the nginx log record shape
    """

    @staticmethod
    def parse_json(line: str, line_num: int = 1) -> Dict[str, Any]:
        """Parse JSON line, raise DecodeError if invalid"""
        try:
            raw = json.loads(line)
        except json.JSONDecodeError as exc:
            raise DecodeError(line_num, f"invalid JSON: {exc}", line) from exc
        if not isinstance(raw, dict):
            raise DecodeError(line_num, f"expected a JSON object, got {type(raw).__name__}", line)
        return raw

    @staticmethod
    def normalize(raw: Dict[str, Any], line_num: int = 1) -> LogRecord:
        """
        Build a LogRecord from a decoded JSON object.
        Every field is required; unknown keys are ignored.
        """
        missing = [k for k in ("time", "remote_ip", "remote_user", "request",
                               "response", "bytes", "referrer", "agent") if k not in raw]
        if missing:
            raise DecodeError(line_num, f"missing field(s): {', '.join(missing)}")

        values: Dict[str, Any] = {}
        for key, attr in STRING_FIELDS:
            if not isinstance(raw[key], str):
                raise DecodeError(line_num, f"field '{key}' must be a string")
            values[attr] = raw[key]

        # bool is an int subclass; true/false are not status codes
        status = raw["response"]
        if isinstance(status, bool) or not isinstance(status, int):
            raise DecodeError(line_num, "field 'response' must be an integer")
        if not 0 <= status <= MAX_STATUS:
            raise DecodeError(line_num, f"field 'response' out of range: {status}")

        size = raw["bytes"]
        if isinstance(size, bool) or not isinstance(size, int):
            raise DecodeError(line_num, "field 'bytes' must be an integer")
        if size < 0:
            raise DecodeError(line_num, f"field 'bytes' must be non-negative: {size}")

        return LogRecord(status_code=status, bytes_sent=size, **values)

    def parse_line(self, line: str, line_num: int = 1) -> LogRecord:
        """Parse one raw line (trailing newline allowed) into a LogRecord"""
        stripped = line.rstrip("\r\n")
        try:
            return self.normalize(self.parse_json(stripped, line_num), line_num)
        except DecodeError as exc:
            logger.debug("Rejecting log line %d: %s", line_num, exc.message)
            if not exc.line:
                exc.line = stripped
            raise
