"""
Plain-text rendering of a LogSummary.
"""

from typing import List

from nginx_stats.models.data_models import LogSummary
from nginx_stats.utils.helpers import format_mean, format_value


def format_summary(summary: LogSummary) -> str:
    """
    Render *summary* as text. Sections, in order: status codes, mean,
    median and p99 bytes, largest endpoint, failingest endpoint.
    """
    lines: List[str] = ["Status Codes:"]
    for status, count in sorted(summary.status_counts.items()):
        lines.append(f"  {status}: {count}")

    lines.append("Mean Bytes:")
    lines.append(f"  All Requests: {format_mean(summary.mean_all)}")
    lines.append(f"  Successful Requests: {format_mean(summary.mean_successful)}")
    lines.append(f"  Failed Requests: {format_mean(summary.mean_failed)}")

    lines.append("Median Bytes:")
    lines.append(f"  All Requests: {format_value(summary.median_all)}")
    lines.append(f"  Successful Requests: {format_value(summary.median_successful)}")
    lines.append(f"  Failed Requests: {format_value(summary.median_failed)}")

    lines.append("99th Percentile Bytes:")
    lines.append(f"  All Requests: {format_value(summary.p99_all)}")
    lines.append(f"  Successful Requests: {format_value(summary.p99_successful)}")
    lines.append(f"  Failed Requests: {format_value(summary.p99_failed)}")

    lines.append(f"Largest Endpoint: {summary.largest_endpoint}")
    lines.append(f"Failingest Endpoint: {summary.failingest_endpoint}")

    return "\n".join(lines) + "\n"
