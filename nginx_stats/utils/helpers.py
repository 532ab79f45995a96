"""
Helper Functions

This module contains utility functions used throughout the application.
"""

import math
from datetime import datetime, timezone
from typing import Any, Optional, Sequence

from dateutil import parser as dtparser

NAN = float("nan")

# $time_local, e.g. 17/May/2015:08:05:32 +0000
NGINX_TIME_FORMAT = "%d/%b/%Y:%H:%M:%S %z"


def parse_ts(x: Any) -> Optional[datetime]:
    """Parse timestamp from nginx $time_local, ISO-8601 or other common formats"""
    if not x:
        return None
    s = str(x)
    try:
        dt = datetime.strptime(s, NGINX_TIME_FORMAT)
    except ValueError:
        try:
            dt = dtparser.isoparse(s)
        except (ValueError, OverflowError):
            try:
                dt = dtparser.parse(s)
            except (ValueError, OverflowError):
                return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def mean(vals: Sequence[int]) -> float:
    """Arithmetic mean, NaN for an empty sequence"""
    if not vals:
        return NAN
    return sum(vals) / len(vals)


def median(sorted_vals: Sequence[int]) -> float:
    """
    Element at index n // 2 of a sorted sequence.

    For even counts this is the upper of the two middle elements, not
    their average. NaN for an empty sequence.
    """
    n = len(sorted_vals)
    if n == 0:
        return NAN
    return float(sorted_vals[n // 2])


def p99(sorted_vals: Sequence[int]) -> float:
    """Element at index floor(n * 0.99), clamped to the last element"""
    n = len(sorted_vals)
    if n == 0:
        return NAN
    idx = min(int(n * 0.99), n - 1)
    return float(sorted_vals[idx])


def format_value(x: float) -> str:
    """Render a byte statistic: integral values without a fraction, NaN as NaN"""
    if math.isnan(x):
        return "NaN"
    if x.is_integer():
        return str(int(x))
    return str(x)


def format_mean(x: float) -> str:
    if math.isnan(x):
        return "NaN"
    return f"{x:.2f}"
