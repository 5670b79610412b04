"""Port interfaces for predicates and metric sources.

These protocols define the shapes the core accepts. The core depends only
on these interfaces, never on a concrete metrics library.
"""

from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class PredicatePort(Protocol):
    """A reusable boolean test with a human-readable description."""

    def matches(self, item: Any) -> bool:
        """Return True if the item satisfies the predicate."""
        ...

    def describe(self) -> str:
        """Describe what the predicate accepts."""
        ...


@runtime_checkable
class FamilyRecord(Protocol):
    """Anything exposing a family name and its samples.

    Examples: FamilyGroup, prometheus_client.Metric.
    """

    name: str
    samples: Iterable[Any]


@runtime_checkable
class MetricRegistryPort(Protocol):
    """Registry-shaped source: enumerates its exported metric families."""

    def metric_families(self) -> Iterable[FamilyRecord]:
        """Return the exported families, in enumeration order."""
        ...


@runtime_checkable
class MetricCollectorPort(Protocol):
    """Collector-shaped source: produces its families on demand.

    Examples: prometheus_client.CollectorRegistry, custom collectors.
    """

    def collect(self) -> Iterable[FamilyRecord]:
        """Collect the current metric families."""
        ...
