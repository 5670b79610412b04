"""Source adapter: turns registries and collectors into family groups.

Two source shapes are accepted. Registry-shaped sources enumerate their
families (``metric_families()``, or simply being an iterable of family
records). Collector-shaped sources expose a zero-argument ``collect()``,
which covers ``prometheus_client`` registries and custom collectors.
"""

import logging
from collections.abc import Iterable
from typing import Any

from metricmatcher.core.exceptions import UnsupportedSourceType
from metricmatcher.core.models import FamilyGroup, Sample
from metricmatcher.core.ports import MetricCollectorPort, MetricRegistryPort
from metricmatcher.core.spec import SourceKind

logger = logging.getLogger(__name__)


def _is_family_iterable(source: Any) -> bool:
    return isinstance(source, Iterable) and not isinstance(
        source, (str, bytes, bytearray, dict)
    )


def source_kind_of(source: Any) -> SourceKind:
    """Classify a source as registry-shaped or collector-shaped.

    Raises:
        UnsupportedSourceType: If the source has neither shape.
    """
    if isinstance(source, MetricRegistryPort) or _is_family_iterable(source):
        return SourceKind.REGISTRY
    if isinstance(source, MetricCollectorPort):
        return SourceKind.COLLECTOR
    raise UnsupportedSourceType(type(source).__name__)


def normalize_sample(record: Any) -> Sample:
    """Convert a sample-shaped record into a Sample.

    Accepts Sample itself, records with ``label_names``/``label_values``, and
    records with a ``labels`` mapping such as ``prometheus_client`` samples.
    """
    if isinstance(record, Sample):
        return record
    if hasattr(record, "label_names"):
        return Sample(
            name=record.name,
            label_names=tuple(record.label_names),
            label_values=tuple(str(v) for v in record.label_values),
            value=float(record.value),
        )
    return Sample.from_labels(record.name, getattr(record, "labels", None), record.value)


def normalize_family(record: Any) -> FamilyGroup:
    """Convert a family-shaped record (``name`` plus ``samples``) into a FamilyGroup."""
    if isinstance(record, FamilyGroup):
        return record
    return FamilyGroup(
        name=record.name,
        samples=tuple(normalize_sample(s) for s in record.samples),
    )


# @tra: Adapter.Sources.Adapt
def adapt(source: Any) -> list[FamilyGroup]:
    """Read a source once and return its families in source order.

    Args:
        source: A registry-shaped or collector-shaped object.

    Returns:
        The source's families as FamilyGroup objects.

    Raises:
        UnsupportedSourceType: If the source has neither shape. There is
            no partial result to fall back on.
    """
    kind = source_kind_of(source)
    records: Iterable[Any]
    if kind is SourceKind.COLLECTOR:
        records = source.collect()
    elif isinstance(source, MetricRegistryPort):
        records = source.metric_families()
    else:
        records = source
    families = [normalize_family(record) for record in records]
    logger.debug(
        "Adapted %d metric families from %s", len(families), type(source).__name__
    )
    return families
