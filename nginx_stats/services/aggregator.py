"""
Aggregator Class - Computes the log summary

This module aggregates log records into status counts, response size
statistics and the notable endpoints.
"""

import logging
from typing import Dict, List, Sequence, Tuple

from nginx_stats.models.data_models import LogRecord, LogSummary
from nginx_stats.utils.helpers import mean, median, p99

logger = logging.getLogger(__name__)


class Aggregator:
    """
    Aggregates log records into a LogSummary.
    Responsibilities:
    - Count requests per status code
    - Find the endpoint with the largest response
    - Find the endpoint with the most failed requests
    - Compute mean / median / p99 of response sizes per partition

    Records are never modified; sorting works on fresh lists.
    """

    def compute_status_counts(self, records: Sequence[LogRecord]) -> Dict[int, int]:
        """Requests per status code, keys in ascending order"""
        counts: Dict[int, int] = {}
        for r in records:
            counts[r.status_code] = counts.get(r.status_code, 0) + 1
        return dict(sorted(counts.items()))

    def largest_endpoint(self, records: Sequence[LogRecord]) -> str:
        """
        Endpoint of the single largest response.
        Strictly-greater comparison keeps the first record on ties,
        and a log where every response is empty yields "".
        """
        largest: Tuple[str, int] = ("", 0)
        for r in records:
            if r.bytes_sent > largest[1]:
                largest = (r.endpoint, r.bytes_sent)
        return largest[0]

    def endpoint_failures(self, records: Sequence[LogRecord]) -> Dict[str, int]:
        """Failed requests per endpoint, keys in ascending order"""
        failures: Dict[str, int] = {}
        for r in records:
            if r.failed:
                failures[r.endpoint] = failures.get(r.endpoint, 0) + 1
        return dict(sorted(failures.items()))

    def failingest_endpoint(self, records: Sequence[LogRecord]) -> str:
        """
        Endpoint with the most failed requests, "/" if nothing failed.
        Keys are scanned in ascending order and only a strictly higher
        count replaces the current best, so the smallest endpoint wins ties.
        """
        best, best_count = "/", 0
        for endpoint, count in self.endpoint_failures(records).items():
            if count > best_count:
                best, best_count = endpoint, count
        return best

    @staticmethod
    def partition_sizes(records: Sequence[LogRecord]) -> Tuple[List[int], List[int], List[int]]:
        """Sorted response sizes for all, successful and failed requests"""
        all_bytes = sorted(r.bytes_sent for r in records)
        success_bytes = sorted(r.bytes_sent for r in records if not r.failed)
        failed_bytes = sorted(r.bytes_sent for r in records if r.failed)
        return all_bytes, success_bytes, failed_bytes

    def compute_summary(self, records: Sequence[LogRecord]) -> LogSummary:
        """Compute the full summary; empty partitions give NaN statistics"""
        all_bytes, success_bytes, failed_bytes = self.partition_sizes(records)
        logger.debug(
            "Summarizing %d records (%d successful, %d failed)",
            len(all_bytes), len(success_bytes), len(failed_bytes),
        )

        return LogSummary(
            status_counts=self.compute_status_counts(records),
            mean_all=mean(all_bytes),
            mean_successful=mean(success_bytes),
            mean_failed=mean(failed_bytes),
            median_all=median(all_bytes),
            median_successful=median(success_bytes),
            median_failed=median(failed_bytes),
            p99_all=p99(all_bytes),
            p99_successful=p99(success_bytes),
            p99_failed=p99(failed_bytes),
            largest_endpoint=self.largest_endpoint(records),
            failingest_endpoint=self.failingest_endpoint(records),
        )


def compute_summary(records: Sequence[LogRecord]) -> LogSummary:
    """Summarize *records* with a default Aggregator"""
    return Aggregator().compute_summary(records)
