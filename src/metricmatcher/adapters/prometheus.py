"""prometheus_client integration.

Registries and collectors from ``prometheus_client`` are collector-shaped
and go through ``adapt`` unchanged. This module adds the default registry
and a registry-shaped view over text exposition output, for asserting on
what an HTTP ``/metrics`` endpoint served.
"""

from collections.abc import Iterator

from prometheus_client import REGISTRY, CollectorRegistry
from prometheus_client.parser import text_string_to_metric_families

from metricmatcher.adapters.sources import normalize_family
from metricmatcher.core.models import FamilyGroup


def default_registry() -> CollectorRegistry:
    """Return the process-wide ``prometheus_client`` registry."""
    return REGISTRY


class ExpositionSource:
    """Registry-shaped source over Prometheus text exposition format.

    Example:
        ```python
        response = client.get("/metrics")
        assert_that(ExpositionSource(response.text), has_metric("http_requests"))
        ```
    """

    def __init__(self, text: str | bytes) -> None:
        if isinstance(text, bytes):
            text = text.decode("utf-8")
        self._text = text

    def metric_families(self) -> Iterator[FamilyGroup]:
        """Parse the exposition text, yielding one family per metric block.

        Raises:
            ValueError: If the text is not valid exposition format.
        """
        for metric in text_string_to_metric_families(self._text):
            yield normalize_family(metric)
