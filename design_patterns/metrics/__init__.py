"""Metrics collection for the design patterns catalog."""

from .prometheus import MetricsRegistry, metrics

__all__ = ["MetricsRegistry", "metrics"]
