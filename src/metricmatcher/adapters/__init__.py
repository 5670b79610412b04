"""Adapters from metric sources to the core family model."""

from metricmatcher.adapters.sources import adapt, source_kind_of

__all__ = ["adapt", "source_kind_of"]
