"""Example: asserting on instrumented code from a pytest suite.

Run with:
    pytest examples/pytest_example.py
"""

import pytest
from prometheus_client import CollectorRegistry, Counter, Histogram

from metricmatcher import (
    assert_that,
    does_not_have_metric,
    greater_than,
    has_metric,
)


class CheckoutService:
    """A tiny service instrumented with prometheus_client."""

    def __init__(self, registry: CollectorRegistry) -> None:
        self.orders = Counter(
            "checkout_orders", "Orders placed", ["payment"], registry=registry
        )
        self.latency = Histogram(
            "checkout_latency_seconds", "Checkout latency", registry=registry
        )

    def checkout(self, payment: str) -> None:
        with self.latency.time():
            self.orders.labels(payment).inc()


@pytest.fixture
def registry() -> CollectorRegistry:
    return CollectorRegistry()


def test_checkout_is_counted(registry: CollectorRegistry) -> None:
    service = CheckoutService(registry)

    service.checkout("card")
    service.checkout("card")

    assert_that(
        registry,
        has_metric("checkout_orders_total").label("payment", "card").int_value(2),
    )
    assert_that(registry, has_metric("checkout_latency_seconds_count").int_value(2))
    assert_that(
        registry, has_metric("checkout_latency_seconds_sum").value(greater_than(0))
    )
    assert_that(registry, does_not_have_metric("checkout_refunds"))
