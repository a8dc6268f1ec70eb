"""In-process per-endpoint request telemetry, aggregated by calendar day"""

import threading
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, List, Optional, Tuple

from loan_simulator.config import settings


@dataclass(frozen=True)
class EndpointTelemetry:
    """Daily request statistics for one API route"""

    api_name: str
    request_count: int
    avg_ms: int
    min_ms: int
    max_ms: int
    success_rate: float  # 0.0 - 1.0


@dataclass
class _Bucket:
    count: int = 0
    successes: int = 0
    total_ms: float = 0.0
    min_ms: float = field(default=float("inf"))
    max_ms: float = 0.0


class TelemetryRegistry:
    """Thread-safe accumulator of request durations and outcomes"""

    def __init__(self, retention_days: int = 7) -> None:
        self.retention_days = retention_days
        self._lock = threading.Lock()
        self._buckets: Dict[Tuple[date, str], _Bucket] = {}

    def record(self, endpoint: str, duration_ms: float, success: bool, on: Optional[date] = None) -> None:
        day = on or date.today()
        key = (day, endpoint)
        with self._lock:
            self._evict_before(day - timedelta(days=self.retention_days))
            bucket = self._buckets.setdefault(key, _Bucket())
            bucket.count += 1
            bucket.successes += 1 if success else 0
            bucket.total_ms += duration_ms
            bucket.min_ms = min(bucket.min_ms, duration_ms)
            bucket.max_ms = max(bucket.max_ms, duration_ms)

    def snapshot(self, day: date) -> List[EndpointTelemetry]:
        """Statistics for every endpoint hit on the given day, sorted by name"""
        with self._lock:
            items = sorted(
                ((endpoint, bucket) for (d, endpoint), bucket in self._buckets.items() if d == day),
                key=lambda item: item[0],
            )
            return [
                EndpointTelemetry(
                    api_name=endpoint,
                    request_count=bucket.count,
                    avg_ms=round(bucket.total_ms / bucket.count),
                    min_ms=round(bucket.min_ms),
                    max_ms=round(bucket.max_ms),
                    success_rate=round(bucket.successes / bucket.count, 2),
                )
                for endpoint, bucket in items
            ]

    def _evict_before(self, cutoff: date) -> None:
        # Caller holds the lock
        for key in [k for k in self._buckets if k[0] < cutoff]:
            del self._buckets[key]

    def days(self) -> List[date]:
        """Days that still have recorded requests, oldest first"""
        with self._lock:
            return sorted({d for d, _ in self._buckets})

    def reset(self) -> None:
        with self._lock:
            self._buckets.clear()


telemetry_registry = TelemetryRegistry(retention_days=settings.telemetry_retention_days)
