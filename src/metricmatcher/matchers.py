"""Fluent assertions on metric registries and collectors.

Example:
    ```python
    from metricmatcher import assert_that, greater_than, has_metric

    assert_that(registry, has_metric("http_requests").label("method", "GET"))
    assert_that(registry, has_metric("queue_depth").value(greater_than(4)))
    assert_that(registry, does_not_have_metric("legacy_requests"))
    ```

Names may be a family name or one of its sample names: for a histogram
``rpc_latency_seconds``, ``rpc_latency_seconds_count`` and
``rpc_latency_seconds_sum`` are accepted too.
"""

from __future__ import annotations

from typing import Any

from metricmatcher.adapters.sources import adapt
from metricmatcher.core.diagnostics import describe_expectation, describe_mismatch
from metricmatcher.core.engine import evaluate
from metricmatcher.core.models import MatchResult
from metricmatcher.core.predicates import Predicate
from metricmatcher.core.spec import MatchSpec, SourceKind


class MetricMatcher:
    """Checks a source for a metric sample and explains failures.

    ``label``, ``value`` and ``int_value`` narrow the search and return the
    same matcher so they can be chained.
    """

    def __init__(
        self, name: str, presence: bool = True, kind: SourceKind = SourceKind.REGISTRY
    ) -> None:
        self.spec = MatchSpec(name=name, presence=presence, source_kind=kind)

    def label(
        self, name: str | Predicate, value: str | Predicate | None
    ) -> MetricMatcher:
        """Require a label; see ``MatchSpec.label``."""
        self.spec.label(name, value)
        return self

    def value(
        self, value: Predicate | float | None, epsilon: float | None = None
    ) -> MetricMatcher:
        """Require a sample value; see ``MatchSpec.value``."""
        self.spec.value(value, epsilon)
        return self

    def int_value(self, value: int | None) -> MetricMatcher:
        """Require an integral sample value; see ``MatchSpec.int_value``."""
        self.spec.int_value(value)
        return self

    def evaluate(self, source: Any) -> MatchResult:
        """Evaluate against a fresh snapshot of the source.

        Raises:
            UnsupportedSourceType: If the source is neither registry-shaped
                nor collector-shaped.
        """
        return evaluate(self.spec, adapt(source))

    def matches(self, source: Any) -> bool:
        return self.evaluate(source).matched

    def describe(self) -> str:
        return describe_expectation(self.spec)

    def describe_mismatch(self, source: Any) -> str:
        """Explain why ``source`` does or does not carry the metric.

        The source is always read again, never taken from an earlier call.
        """
        return describe_mismatch(self.spec, self.evaluate(source))

    def __repr__(self) -> str:
        return f"<MetricMatcher {self.describe()!r}>"


def has_metric(name: str) -> MetricMatcher:
    """Match a registry that exports a sample with the given name."""
    return MetricMatcher(name, presence=True, kind=SourceKind.REGISTRY)


def does_not_have_metric(name: str) -> MetricMatcher:
    """Match a registry that exports no sample with the given name."""
    return MetricMatcher(name, presence=False, kind=SourceKind.REGISTRY)


def collects_metric(name: str) -> MetricMatcher:
    """Match a collector that collects a sample with the given name."""
    return MetricMatcher(name, presence=True, kind=SourceKind.COLLECTOR)


def does_not_collect_metric(name: str) -> MetricMatcher:
    """Match a collector that collects no sample with the given name."""
    return MetricMatcher(name, presence=False, kind=SourceKind.COLLECTOR)


# @tra: Assertions.AssertThat
def assert_that(source: Any, matcher: MetricMatcher, reason: str = "") -> None:
    """Raise AssertionError with a full diagnostic unless the matcher matches."""
    result = matcher.evaluate(source)
    if result.matched:
        return
    message = (
        f"{reason}\nExpected: {matcher.describe()}\n"
        f"     but: {describe_mismatch(matcher.spec, result)}"
    )
    raise AssertionError(message)
