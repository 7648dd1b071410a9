"""Adapters — concrete implementations of the engine ports."""

from .clock import FixedClock, SystemClock
from .metrics import InMemoryMetricsCounter, LoggingMetricsCounter

__all__ = [
    "FixedClock",
    "SystemClock",
    "InMemoryMetricsCounter",
    "LoggingMetricsCounter",
]
