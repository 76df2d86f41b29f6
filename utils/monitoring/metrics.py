"""Metrics collection and tracking."""

from typing import Dict, Any, Optional
from collections import defaultdict
import time

from config import settings


class MetricsCollector:
    """Lightweight in-process metrics collector."""

    def __init__(self):
        self.request_count = 0
        self.failed_request_count = 0
        self.total_latency_ms = 0
        self.endpoint_usage = defaultdict(int)
        self.llm_calls = 0
        self.llm_empty_responses = 0
        self.fetcher_failures = defaultdict(int)
        self.error_types = defaultdict(int)

    def track_request(self, endpoint: str, latency_ms: int, success: bool):
        """Track a handled HTTP request."""
        self.request_count += 1
        self.total_latency_ms += latency_ms
        self.endpoint_usage[endpoint] += 1
        if not success:
            self.failed_request_count += 1

    def track_llm_call(self, success: bool):
        """Track a generative-language call; empty results count as unsuccessful."""
        self.llm_calls += 1
        if not success:
            self.llm_empty_responses += 1

    def track_fetcher_failure(self, fetcher: str):
        self.fetcher_failures[fetcher] += 1

    def track_error(self, error_type: str):
        """Track error occurrence."""
        self.error_types[error_type] += 1

    def get_summary(self) -> Dict[str, Any]:
        """Get metrics summary."""
        avg_latency = (
            self.total_latency_ms / self.request_count
            if self.request_count > 0 else 0
        )

        return {
            "total_requests": self.request_count,
            "failed_requests": self.failed_request_count,
            "avg_latency_ms": round(avg_latency, 2),
            "endpoint_usage": dict(self.endpoint_usage),
            "llm_calls": self.llm_calls,
            "llm_empty_responses": self.llm_empty_responses,
            "fetcher_failures": dict(self.fetcher_failures),
            "error_types": dict(self.error_types),
        }

    def reset(self):
        """Reset all metrics."""
        self.request_count = 0
        self.failed_request_count = 0
        self.total_latency_ms = 0
        self.endpoint_usage.clear()
        self.llm_calls = 0
        self.llm_empty_responses = 0
        self.fetcher_failures.clear()
        self.error_types.clear()


# Global metrics collector
_metrics = MetricsCollector()


def track_request(endpoint: str, latency_ms: int, success: bool):
    """Track request metrics."""
    if settings.enable_metrics:
        _metrics.track_request(endpoint, latency_ms, success)


def track_llm_call(success: bool):
    if settings.enable_metrics:
        _metrics.track_llm_call(success)


def track_fetcher_failure(fetcher: str):
    if settings.enable_metrics:
        _metrics.track_fetcher_failure(fetcher)


def track_error(error_type: str):
    """Track error occurrence."""
    if settings.enable_metrics:
        _metrics.track_error(error_type)


def get_metrics_summary() -> Dict[str, Any]:
    """Get current metrics summary."""
    return _metrics.get_summary()


def reset_metrics():
    """Reset all metrics."""
    _metrics.reset()


class RequestTimer:
    """Context manager for timing request handling."""

    def __init__(self, endpoint: str):
        self.endpoint = endpoint
        self.start_time: Optional[float] = None
        self.latency_ms = 0
        self.success = True

    def __enter__(self):
        self.start_time = time.time()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.latency_ms = int((time.time() - self.start_time) * 1000)
        self.success = self.success and exc_type is None

        track_request(
            endpoint=self.endpoint,
            latency_ms=self.latency_ms,
            success=self.success
        )
