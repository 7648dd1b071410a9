"""Metrics counter adapters for compliance pass/fail tallies."""

import logging
from collections import Counter
from collections.abc import Mapping

logger = logging.getLogger(__name__)

LabelSet = tuple[tuple[str, str], ...]


def _freeze(labels: Mapping[str, str]) -> LabelSet:
    return tuple(sorted(labels.items()))


class InMemoryMetricsCounter:
    """Counts increments per label set."""

    def __init__(self, name: str = "compliance_tests_total"):
        self.name = name
        self._counts: Counter[LabelSet] = Counter()

    def inc(self, labels: Mapping[str, str]) -> None:
        self._counts[_freeze(labels)] += 1

    def value(self, labels: Mapping[str, str]) -> int:
        return self._counts[_freeze(labels)]

    def total(self) -> int:
        return sum(self._counts.values())


class LoggingMetricsCounter:
    """Emits one log record per increment, for deployments without a metrics backend."""

    def __init__(self, name: str = "compliance_tests_total", level: int = logging.INFO):
        self.name = name
        self.level = level

    def inc(self, labels: Mapping[str, str]) -> None:
        rendered = ",".join(f"{key}={value}" for key, value in sorted(labels.items()))
        logger.log(self.level, "metric %s{%s} +1", self.name, rendered)
