"""Match specifications: what sample an assertion is looking for."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from metricmatcher.core.exceptions import InvalidSpecification
from metricmatcher.core.models import LabelPredicate
from metricmatcher.core.predicates import Predicate, close_to, equal_to, is_number

logger = logging.getLogger(__name__)

# Tolerance applied by int_value(); counters only ever hold whole numbers.
DEFAULT_INT_EPSILON = 0.1


class SourceKind(Enum):
    """Kind of object an assertion targets, as named in expectation text."""

    REGISTRY = "CollectorRegistry"
    COLLECTOR = "Collector"


# @tra: Core.MatchSpec.Build
@dataclass
class MatchSpec:
    """A requested metric: name, label predicates, value predicate, presence.

    Built once per assertion. The ``label`` and ``value`` methods narrow the
    spec in place and return it, so calls can be chained::

        spec = MatchSpec("http_requests").label("method", "GET").int_value(3)

    Attributes:
        name: Family name or derived sample name to look for.
        presence: True to assert the sample exists, False to assert it does not.
        label_predicates: (name, value) predicate pairs, in insertion order.
        value_predicate: Predicate over the sample value, None to leave it free.
        source_kind: What the assertion targets, used in expectation text.
    """

    name: str
    presence: bool = True
    label_predicates: list[LabelPredicate] = field(default_factory=list)
    value_predicate: Predicate | None = None
    source_kind: SourceKind = SourceKind.REGISTRY

    def __post_init__(self) -> None:
        if self.name is None or not str(self.name).strip():
            raise InvalidSpecification("Cannot match a metric without at least a name")

    @property
    def is_constrained(self) -> bool:
        """True if labels or a value narrow the search beyond the name."""
        return self.value_predicate is not None or bool(self.label_predicates)

    def label(
        self, name: str | Predicate, value: str | Predicate | None
    ) -> MatchSpec:
        """Require a label whose name and value satisfy the given predicates.

        Plain strings are turned into equality predicates. A value of None
        leaves this label unconstrained and adds nothing. Passing the same
        name predicate object again replaces its value predicate.

        Raises:
            InvalidSpecification: If name is None, or either argument is
                neither a string nor a Predicate.
        """
        if name is None:
            raise InvalidSpecification("Cannot match a label without a name")
        if value is None:
            logger.debug("Label %r has no value predicate, not constraining it", name)
            return self
        name_predicate = _label_predicate(name, "name")
        value_predicate = _label_predicate(value, "value")
        pair = LabelPredicate(name_predicate, value_predicate)
        for i, existing in enumerate(self.label_predicates):
            if existing.name is name_predicate:
                self.label_predicates[i] = pair
                break
        else:
            self.label_predicates.append(pair)
        return self

    def value(
        self, value: Predicate | float | None, epsilon: float | None = None
    ) -> MatchSpec:
        """Require the sample value to satisfy a predicate.

        ``value(pred)`` uses the predicate as is, ``value(3.0, 0.1)`` matches
        within a tolerance. None removes any value constraint.

        Raises:
            InvalidSpecification: If value is neither None, a Predicate nor a
                number, or is a number given without an epsilon.
        """
        if value is None or isinstance(value, Predicate):
            self.value_predicate = value
            return self
        if not is_number(value):
            raise InvalidSpecification(
                f"A value must be a number or a Predicate, got {type(value).__name__}"
            )
        if epsilon is None:
            raise InvalidSpecification(
                "A numeric value needs an epsilon, use int_value() for integers"
            )
        self.value_predicate = close_to(value, epsilon)
        return self

    def int_value(self, value: int | None) -> MatchSpec:
        """Require an integral sample value, within DEFAULT_INT_EPSILON."""
        if value is None:
            return self.value(None)
        if not is_number(value):
            raise InvalidSpecification(
                f"An int value must be a number, got {type(value).__name__}"
            )
        return self.value(float(value), DEFAULT_INT_EPSILON)


def _label_predicate(arg: str | Predicate, role: str) -> Predicate:
    if isinstance(arg, str):
        return equal_to(arg)
    if isinstance(arg, Predicate):
        return arg
    raise InvalidSpecification(
        f"Label {role} must be a string or a Predicate, got {type(arg).__name__}"
    )