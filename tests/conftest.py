"""Shared test fixtures for all test modules.

Every fixture builds fresh metric state, so no test sees another's samples.
"""

from collections.abc import Iterable
from typing import Any

import pytest
from prometheus_client import CollectorRegistry, Gauge, Histogram

from metricmatcher import FamilyGroup, Sample

COUNT = "count"
PEANUTS = "peanuts"
LABEL_ONE = "label_one"
ANOTHER_LABEL = "another_label"


def labelled(name: str, label_one: str, another_label: str, value: float) -> Sample:
    """Build a sample carrying the two scenario labels."""
    return Sample(
        name=name,
        label_names=(LABEL_ONE, ANOTHER_LABEL),
        label_values=(label_one, another_label),
        value=value,
    )


@pytest.fixture
def count_family() -> FamilyGroup:
    """Counter-like family with two label sets."""
    return FamilyGroup(
        name=COUNT,
        samples=(
            labelled(COUNT, "value_one", "4", 3.0),
            labelled(COUNT, "value_two", "value22", -3.4),
        ),
    )


@pytest.fixture
def peanuts_family() -> FamilyGroup:
    """Gauge-like family sharing the label names of count_family."""
    return FamilyGroup(
        name=PEANUTS,
        samples=(
            labelled(PEANUTS, "value_three", "4", -3.0),
            labelled(PEANUTS, "value_four", "value22", 3.4),
        ),
    )


@pytest.fixture
def families(count_family: FamilyGroup, peanuts_family: FamilyGroup) -> list[FamilyGroup]:
    """Snapshot holding the count and peanuts families, in that order."""
    return [count_family, peanuts_family]


@pytest.fixture
def prometheus_registry() -> CollectorRegistry:
    """Real prometheus_client registry with a histogram and a gauge."""
    registry = CollectorRegistry()
    count = Histogram(
        COUNT, "well I count", [LABEL_ONE, ANOTHER_LABEL], registry=registry
    )
    count.labels("value_one", "4").observe(3.0)
    count.labels("value_two", "value22").observe(-3.4)

    peanuts = Gauge(
        PEANUTS,
        "peanuts plus peanuts still amount to peanuts",
        [LABEL_ONE, ANOTHER_LABEL],
        registry=registry,
    )
    peanuts.labels("value_three", "4").dec(3.0)
    peanuts.labels("value_four", "value22").inc(3.4)
    return registry


class RegistryBackedCollector:
    """Collector-shaped wrapper that re-collects a registry on demand."""

    def __init__(self, registry: CollectorRegistry) -> None:
        self._registry = registry

    def collect(self) -> Iterable[Any]:
        return list(self._registry.collect())


@pytest.fixture
def prometheus_collector(prometheus_registry: CollectorRegistry) -> RegistryBackedCollector:
    """Collector-shaped view of prometheus_registry."""
    return RegistryBackedCollector(prometheus_registry)
