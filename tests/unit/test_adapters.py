"""
Tests for port adapters

Checks:
1. Clocks return aware UTC instants; FixedClock is controllable
2. In-memory counter tallies per label set
3. Logging counter emits one record per increment
"""

import logging
from datetime import datetime, timedelta, timezone

from energy_compliance.adapters.clock import FixedClock, SystemClock
from energy_compliance.adapters.metrics import InMemoryMetricsCounter, LoggingMetricsCounter
from energy_compliance.calculators.duct_leakage import check_compliance_threshold

# =============================================================================
# CLOCKS
# =============================================================================


class TestSystemClock:
    """Tests for SystemClock"""

    def test_now_is_aware_utc(self) -> None:
        now = SystemClock().now()
        assert now.tzinfo == timezone.utc


class TestFixedClock:
    """Tests for FixedClock"""

    def test_returns_instant(self) -> None:
        instant = datetime(2024, 6, 1, tzinfo=timezone.utc)
        assert FixedClock(instant).now() == instant

    def test_naive_taken_as_utc(self) -> None:
        clock = FixedClock(datetime(2024, 6, 1))
        assert clock.now() == datetime(2024, 6, 1, tzinfo=timezone.utc)

    def test_advance(self) -> None:
        clock = FixedClock(datetime(2024, 6, 1, tzinfo=timezone.utc))
        clock.advance(timedelta(hours=36))
        assert clock.now() == datetime(2024, 6, 2, 12, tzinfo=timezone.utc)


# =============================================================================
# METRICS
# =============================================================================


class TestInMemoryMetricsCounter:
    """Tests for InMemoryMetricsCounter"""

    def test_label_order_irrelevant(self) -> None:
        counter = InMemoryMetricsCounter()
        counter.inc({"test_type": "TDL", "passed": "true"})
        counter.inc({"passed": "true", "test_type": "TDL"})

        assert counter.value({"test_type": "TDL", "passed": "true"}) == 2
        assert counter.total() == 2

    def test_unseen_labels_zero(self) -> None:
        assert InMemoryMetricsCounter().value({"test_type": "DLO", "passed": "false"}) == 0

    def test_accumulates_across_checks(self) -> None:
        counter = InMemoryMetricsCounter()
        check_compliance_threshold(3.0, 2.0, metrics=counter)
        check_compliance_threshold(5.0, 2.0, metrics=counter)

        assert counter.value({"test_type": "TDL", "passed": "true"}) == 1
        assert counter.value({"test_type": "TDL", "passed": "false"}) == 1
        assert counter.value({"test_type": "DLO", "passed": "true"}) == 2
        assert counter.total() == 4


class TestLoggingMetricsCounter:
    """Tests for LoggingMetricsCounter"""

    def test_logs_each_increment(self, caplog) -> None:
        counter = LoggingMetricsCounter()

        with caplog.at_level(logging.INFO, logger="energy_compliance.adapters.metrics"):
            check_compliance_threshold(3.5, 3.5, metrics=counter)

        messages = [record.getMessage() for record in caplog.records]
        assert messages == [
            "metric compliance_tests_total{passed=true,test_type=TDL} +1",
            "metric compliance_tests_total{passed=false,test_type=DLO} +1",
        ]

    def test_custom_level(self, caplog) -> None:
        counter = LoggingMetricsCounter(name="ach50_tests_total", level=logging.DEBUG)

        with caplog.at_level(logging.DEBUG, logger="energy_compliance.adapters.metrics"):
            counter.inc({"test_type": "ACH50", "passed": "true"})

        assert caplog.records[0].levelno == logging.DEBUG
        assert "ach50_tests_total" in caplog.records[0].getMessage()
