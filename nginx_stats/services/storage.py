"""
LogStore Class - Handles file I/O operations

This module reads an access log file into an ordered list of LogRecords.
"""

import logging
import os
from typing import Iterator, List, Optional, Tuple

from nginx_stats.errors import FileAccessError, LogError
from nginx_stats.models.data_models import HealthStatus, LogRecord
from nginx_stats.services.parser import LogParser
from nginx_stats.utils.helpers import parse_ts

logger = logging.getLogger(__name__)


class LogStore:
    """
    Holds the records of one log file in memory.
    Responsibilities:
    - Read log file lines
    - Load every line as a LogRecord, all or nothing
    - Provide file statistics
    """

    def __init__(self, file_path: str, parser: Optional[LogParser] = None):
        self.file_path = file_path
        self.parser = parser or LogParser()

    def read_lines(self) -> Iterator[Tuple[int, str]]:
        """Iterator over (line number, raw line) in the log file"""
        try:
            with open(self.file_path, "r", encoding="utf-8", newline="") as f:
                for line_num, line in enumerate(f, 1):
                    yield line_num, line
        except FileNotFoundError as exc:
            raise FileAccessError(self.file_path, "no such file") from exc
        except IsADirectoryError as exc:
            raise FileAccessError(self.file_path, "is a directory") from exc
        except PermissionError as exc:
            raise FileAccessError(self.file_path, "permission denied") from exc
        except UnicodeDecodeError as exc:
            raise FileAccessError(self.file_path, f"not valid UTF-8: {exc}") from exc
        except OSError as exc:
            raise FileAccessError(self.file_path, exc.strerror or str(exc)) from exc

    def load_records(self) -> List[LogRecord]:
        """
        Parse every line of the file, preserving order.
        The first bad line aborts the whole load with a DecodeError.
        """
        records: List[LogRecord] = []
        for line_num, line in self.read_lines():
            records.append(self.parser.parse_line(line, line_num))
        logger.debug("Loaded %d records from %s", len(records), self.file_path)
        return records

    def stat(self) -> HealthStatus:
        """Get file statistics"""
        exists = os.path.isfile(self.file_path)
        size_bytes = os.path.getsize(self.file_path) if exists else 0
        status = "ok"
        total_lines = 0
        latest = None

        if exists:
            try:
                records = self.load_records()
            except LogError as exc:
                logger.warning("Cannot read %s for health check: %s", self.file_path, exc)
                status = "error"
            else:
                total_lines = len(records)
                stamps = [ts for ts in (parse_ts(r.timestamp) for r in records) if ts is not None]
                latest = max(stamps, default=None)

        return HealthStatus(
            status=status,
            log_file_exists=exists,
            path=os.path.abspath(self.file_path),
            size_bytes=size_bytes,
            total_lines=total_lines,
            latest_timestamp=latest.isoformat() if latest else None,
        )


def load_records(path: str) -> List[LogRecord]:
    """Load all records of the log at *path*"""
    return LogStore(path).load_records()
