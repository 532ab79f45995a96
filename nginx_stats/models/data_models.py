"""
Data Models (DTOs - Data Transfer Objects)

This module contains all dataclass definitions used throughout the application.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass(frozen=True)
class LogRecord:
    """Represents a single line of an nginx JSON access log"""
    timestamp: str
    remote_address: str
    remote_user: str
    request_line: str
    status_code: int
    bytes_sent: int
    referrer: str
    user_agent: str

    @property
    def endpoint(self) -> str:
        """Request path: second token of the request line, "/" if missing"""
        parts = self.request_line.split()
        return parts[1] if len(parts) > 1 else "/"

    @property
    def failed(self) -> bool:
        return self.status_code >= 400


@dataclass
class LogSummary:
    """
    Statistics over a whole access log.

    Size statistics are NaN when their partition is empty.
    """
    status_counts: Dict[int, int] = field(default_factory=dict)
    mean_all: float = float("nan")
    mean_successful: float = float("nan")
    mean_failed: float = float("nan")
    median_all: float = float("nan")
    median_successful: float = float("nan")
    median_failed: float = float("nan")
    p99_all: float = float("nan")
    p99_successful: float = float("nan")
    p99_failed: float = float("nan")
    largest_endpoint: str = ""
    failingest_endpoint: str = "/"

    @property
    def total_requests(self) -> int:
        return sum(self.status_counts.values())


@dataclass
class HealthStatus:
    """Health check response"""
    status: str
    log_file_exists: bool
    path: str
    size_bytes: int
    total_lines: int
    latest_timestamp: Optional[str] = None
