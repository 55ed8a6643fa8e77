"""
metrics.py - Prometheus metrics for the Kairos service.

- kairos_conversions_total{operation,outcome} - Engine calls by outcome
- kairos_conversion_latency_seconds{operation} - Engine call latency
- kairos_input_neutralized_total{field} - Non-finite inputs replaced by 0
- kairos_build_info - Constants the running engine was built with
"""

from __future__ import annotations

import time

from contextlib import contextmanager
from typing import Iterator

from prometheus_client import Counter, Histogram, Info

from kairos.constants import DAY_LENGTH_POLICY, GENESIS_MS, MICRO_PER_BEAT, MICRO_PER_DAY
from kairos.errors import KairosInputError

# ===========================
# CONVERSION METRICS
# ===========================

kairos_conversions_total = Counter(
    "kairos_conversions_total",
    "Engine conversions by operation and outcome",
    ["operation", "outcome"],  # outcome: success, input_error, error
)

kairos_conversion_latency_seconds = Histogram(
    "kairos_conversion_latency_seconds",
    "Engine conversion latency",
    ["operation"],
    buckets=(0.00001, 0.00005, 0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, float("inf")),
)

# ===========================
# INPUT HYGIENE
# ===========================

kairos_input_neutralized_total = Counter(
    "kairos_input_neutralized_total",
    "Non-finite numeric inputs neutralised to 0",
    ["field"],
)

# ===========================
# BUILD INFO
# ===========================

kairos_build_info = Info("kairos_build", "Kairos engine constants")


def initialize_build_info(algo_version: str) -> None:
    """Publish the constants the engine runs with."""
    kairos_build_info.info(
        {
            "algo_version": algo_version,
            "genesis_ms": str(GENESIS_MS),
            "micro_per_day": str(MICRO_PER_DAY),
            "micro_per_beat": str(MICRO_PER_BEAT),
            "day_policy": DAY_LENGTH_POLICY,
        }
    )


def record_neutralized(field: str) -> None:
    kairos_input_neutralized_total.labels(field=field).inc()


@contextmanager
def track_conversion(operation: str) -> Iterator[None]:
    """Time an engine call and count its outcome."""
    start = time.perf_counter()
    outcome = "success"
    try:
        yield
    except KairosInputError:
        outcome = "input_error"
        raise
    except Exception:
        outcome = "error"
        raise
    finally:
        kairos_conversion_latency_seconds.labels(operation=operation).observe(
            time.perf_counter() - start
        )
        kairos_conversions_total.labels(operation=operation, outcome=outcome).inc()
