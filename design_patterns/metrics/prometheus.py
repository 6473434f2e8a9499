"""Prometheus metrics collection module."""

from typing import Any, Dict, List

from prometheus_client import Counter


class MetricsRegistry:
    """Registry for Prometheus metrics."""

    def __init__(self):
        """Initialize metrics registry."""
        self._metrics = {}

    def register_counter(self, name: str, description: str, labels: List[str] = None) -> Counter:
        """Register a new counter metric."""
        if name in self._metrics:
            return self._metrics[name]

        counter = Counter(name, description, labels or [])
        self._metrics[name] = counter
        return counter

    def get_metric(self, name: str) -> Any:
        """Get a registered metric by name."""
        return self._metrics.get(name)

    def snapshot(self) -> Dict[str, float]:
        """Return current sample values keyed by sample name and labels."""
        values = {}
        for metric in self._metrics.values():
            for family in metric.collect():
                for sample in family.samples:
                    if not sample.name.endswith("_total"):
                        continue
                    labels = ",".join(f"{k}={v}" for k, v in sorted(sample.labels.items()))
                    key = f"{sample.name}{{{labels}}}" if labels else sample.name
                    values[key] = sample.value
        return values


# Global metrics registry
metrics = MetricsRegistry()

# Notification metrics
metrics.register_counter(
    "observer_notifications",
    "Number of observer invocations made by notifiers",
    ["mode", "status"],
)
