"""metricmatcher - assertions on metric registries with precise diagnostics."""

from metricmatcher.adapters.prometheus import ExpositionSource, default_registry
from metricmatcher.adapters.sources import adapt
from metricmatcher.core.diagnostics import describe_expectation, describe_mismatch
from metricmatcher.core.engine import evaluate
from metricmatcher.core.exceptions import (
    InvalidSpecification,
    MetricMatcherError,
    UnsupportedSourceType,
)
from metricmatcher.core.models import FamilyGroup, MatchResult, Sample
from metricmatcher.core.predicates import (
    Predicate,
    all_of,
    any_of,
    anything,
    close_to,
    contains_string,
    ends_with,
    equal_to,
    greater_than,
    greater_than_or_equal_to,
    is_not,
    less_than,
    less_than_or_equal_to,
    starts_with,
)
from metricmatcher.core.spec import DEFAULT_INT_EPSILON, MatchSpec, SourceKind
from metricmatcher.matchers import (
    MetricMatcher,
    assert_that,
    collects_metric,
    does_not_collect_metric,
    does_not_have_metric,
    has_metric,
)

__all__ = [
    # Models
    "FamilyGroup",
    "MatchResult",
    "Sample",
    # Specs
    "DEFAULT_INT_EPSILON",
    "MatchSpec",
    "SourceKind",
    # Engine and diagnostics
    "adapt",
    "evaluate",
    "describe_expectation",
    "describe_mismatch",
    # Errors
    "InvalidSpecification",
    "MetricMatcherError",
    "UnsupportedSourceType",
    # Predicates
    "Predicate",
    "all_of",
    "any_of",
    "anything",
    "close_to",
    "contains_string",
    "ends_with",
    "equal_to",
    "greater_than",
    "greater_than_or_equal_to",
    "is_not",
    "less_than",
    "less_than_or_equal_to",
    "starts_with",
    # Matchers
    "MetricMatcher",
    "assert_that",
    "collects_metric",
    "does_not_collect_metric",
    "does_not_have_metric",
    "has_metric",
    # prometheus_client
    "ExpositionSource",
    "default_registry",
]
