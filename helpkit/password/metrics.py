"""
Prometheus Metrics — password validation observability.

Exposes counters and a histogram for:
- Checks evaluated, by kind and outcome
- Length-bound rejections
- Validation latency

Helpers are no-ops when ``HELPKIT_METRICS_ENABLED`` is false, so callers never
need to guard their usage.

Usage
-----
    from helpkit.password.metrics import record_check, timed_validation

    with timed_validation():
        result = validate(candidate, checks)
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram

from helpkit.config import settings


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Checks evaluated, labelled by kind and outcome ("passed" / "failed").
CHECKS_TOTAL: Counter = Counter(
    "helpkit_checks_total",
    "Password checks evaluated by kind and outcome",
    ["kind", "outcome"],
)

# Candidates rejected by the length guard before their checks ran.
LENGTH_REJECTIONS: Counter = Counter(
    "helpkit_length_rejections_total",
    "Candidates rejected by the min/max length guard",
    ["bound"],
)

VALIDATION_LATENCY: Histogram = Histogram(
    "helpkit_validation_seconds",
    "Time spent in a single validate() call",
    buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1),
)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_check(kind: str, passed: bool) -> None:
    """Increment the check counter for *kind*."""
    if settings.METRICS_ENABLED:
        CHECKS_TOTAL.labels(kind=kind, outcome="passed" if passed else "failed").inc()


def record_length_rejection(bound: str) -> None:
    """Increment the length rejection counter; *bound* is ``"max"`` or ``"min"``."""
    if settings.METRICS_ENABLED:
        LENGTH_REJECTIONS.labels(bound=bound).inc()


@contextmanager
def timed_validation() -> Generator[None, None, None]:
    """Context manager that records validation latency."""
    if not settings.METRICS_ENABLED:
        yield
        return
    with VALIDATION_LATENCY.time():
        yield
