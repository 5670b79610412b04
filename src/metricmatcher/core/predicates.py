"""Composable predicates over label names, label values and sample values.

Each predicate can test a candidate and describe itself, so a failed match
can explain what was expected. Descriptions follow the Hamcrest wording,
so failure messages read the same as in other metric matchers.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from numbers import Real
from typing import Any

from metricmatcher.core.diagnostics import Description
from metricmatcher.core.exceptions import InvalidSpecification


class Predicate:
    """Base class for all predicates.

    Subclasses implement ``matches`` and ``describe_to``. Predicates compare
    by identity, so two equal-looking predicates are distinct entries.
    """

    def matches(self, item: Any) -> bool:
        raise NotImplementedError

    def describe_to(self, description: Description) -> None:
        raise NotImplementedError

    def describe(self) -> str:
        description = Description()
        self.describe_to(description)
        return str(description)

    def __and__(self, other: Predicate) -> Predicate:
        return all_of(self, other)

    def __or__(self, other: Predicate) -> Predicate:
        return any_of(self, other)

    def __invert__(self) -> Predicate:
        return is_not(self)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.describe()}>"


class IsAnything(Predicate):
    """Matches every candidate, including None."""

    def matches(self, item: Any) -> bool:
        return True

    def describe_to(self, description: Description) -> None:
        description.append_text("ANYTHING")


class IsEqual(Predicate):
    """Matches candidates equal to the expected value."""

    def __init__(self, expected: Any) -> None:
        self.expected = expected

    def matches(self, item: Any) -> bool:
        return bool(item == self.expected)

    def describe_to(self, description: Description) -> None:
        description.append_value(self.expected)


class _StringPredicate(Predicate):
    """Shared shape of substring, prefix and suffix predicates."""

    relationship = ""

    def __init__(self, substring: str) -> None:
        if not isinstance(substring, str):
            raise InvalidSpecification(
                f"{self.relationship} requires a string, got {type(substring).__name__}"
            )
        self.substring = substring

    def matches(self, item: Any) -> bool:
        return isinstance(item, str) and self._evaluate(item)

    def _evaluate(self, item: str) -> bool:
        raise NotImplementedError

    def describe_to(self, description: Description) -> None:
        description.append_text(f"a string {self.relationship} ").append_value(
            self.substring
        )


class StringContains(_StringPredicate):
    """Matches strings containing the substring."""

    relationship = "containing"

    def _evaluate(self, item: str) -> bool:
        return self.substring in item


class StringStartsWith(_StringPredicate):
    """Matches strings starting with the prefix."""

    relationship = "starting with"

    def _evaluate(self, item: str) -> bool:
        return item.startswith(self.substring)


class StringEndsWith(_StringPredicate):
    """Matches strings ending with the suffix."""

    relationship = "ending with"

    def _evaluate(self, item: str) -> bool:
        return item.endswith(self.substring)


def is_number(item: Any) -> bool:
    """True for real numbers other than bools."""
    return isinstance(item, Real) and not isinstance(item, bool)


class IsCloseTo(Predicate):
    """Matches numbers within ``epsilon`` of ``target``, boundary included."""

    def __init__(self, target: float, epsilon: float) -> None:
        if not is_number(target) or not is_number(epsilon):
            raise InvalidSpecification("close_to requires numeric target and epsilon")
        if epsilon < 0:
            raise InvalidSpecification(f"epsilon must not be negative, got {epsilon}")
        self.target = float(target)
        self.epsilon = float(epsilon)

    def matches(self, item: Any) -> bool:
        if not is_number(item) or math.isnan(item):
            return False
        return abs(item - self.target) <= self.epsilon

    def describe_to(self, description: Description) -> None:
        description.append_text("a numeric value within ").append_value(
            self.epsilon
        ).append_text(" of ").append_value(self.target)


class OrderingComparison(Predicate):
    """Compares numbers against a fixed bound with the given comparison."""

    def __init__(
        self,
        value: float,
        comparison: Callable[[float, float], bool],
        relationship: str,
    ) -> None:
        if not is_number(value):
            raise InvalidSpecification(
                f"{relationship} requires a number, got {type(value).__name__}"
            )
        self.value = value
        self.comparison = comparison
        self.relationship = relationship

    def matches(self, item: Any) -> bool:
        return is_number(item) and self.comparison(item, self.value)

    def describe_to(self, description: Description) -> None:
        description.append_text(f"a value {self.relationship} ").append_value(
            self.value
        )


class IsNot(Predicate):
    """Inverts another predicate."""

    def __init__(self, predicate: Predicate) -> None:
        self.predicate = predicate

    def matches(self, item: Any) -> bool:
        return not self.predicate.matches(item)

    def describe_to(self, description: Description) -> None:
        description.append_text("not ").append_description_of(self.predicate)


class AllOf(Predicate):
    """Matches when every inner predicate matches."""

    def __init__(self, *predicates: Predicate) -> None:
        self.predicates = predicates

    def matches(self, item: Any) -> bool:
        return all(p.matches(item) for p in self.predicates)

    def describe_to(self, description: Description) -> None:
        description.append_list("(", " and ", ")", self.predicates)


class AnyOf(Predicate):
    """Matches when at least one inner predicate matches."""

    def __init__(self, *predicates: Predicate) -> None:
        self.predicates = predicates

    def matches(self, item: Any) -> bool:
        return any(p.matches(item) for p in self.predicates)

    def describe_to(self, description: Description) -> None:
        description.append_list("(", " or ", ")", self.predicates)


def anything() -> Predicate:
    """Matches any candidate."""
    return IsAnything()


def equal_to(expected: Any) -> Predicate:
    """Matches candidates equal to ``expected``.

    Raises:
        InvalidSpecification: If expected is None. Use ``anything()`` to
            leave a slot unconstrained.
    """
    if expected is None:
        raise InvalidSpecification("Cannot build an equality predicate on None")
    return IsEqual(expected)


def contains_string(substring: str) -> Predicate:
    """Matches strings containing ``substring``."""
    return StringContains(substring)


def starts_with(prefix: str) -> Predicate:
    """Matches strings starting with ``prefix``."""
    return StringStartsWith(prefix)


def ends_with(suffix: str) -> Predicate:
    """Matches strings ending with ``suffix``."""
    return StringEndsWith(suffix)


def close_to(target: float, epsilon: float) -> Predicate:
    """Matches numbers ``v`` with ``abs(v - target) <= epsilon``."""
    return IsCloseTo(target, epsilon)


def greater_than(value: float) -> Predicate:
    """Matches numbers strictly greater than ``value``."""
    return OrderingComparison(value, lambda a, b: a > b, "greater than")


def greater_than_or_equal_to(value: float) -> Predicate:
    """Matches numbers greater than or equal to ``value``."""
    return OrderingComparison(value, lambda a, b: a >= b, "greater than or equal to")


def less_than(value: float) -> Predicate:
    """Matches numbers strictly less than ``value``."""
    return OrderingComparison(value, lambda a, b: a < b, "less than")


def less_than_or_equal_to(value: float) -> Predicate:
    """Matches numbers less than or equal to ``value``."""
    return OrderingComparison(value, lambda a, b: a <= b, "less than or equal to")


def is_not(predicate: Predicate) -> Predicate:
    """Matches candidates ``predicate`` rejects."""
    return IsNot(predicate)


def all_of(*predicates: Predicate) -> Predicate:
    """Matches candidates every predicate accepts."""
    return AllOf(*predicates)


def any_of(*predicates: Predicate) -> Predicate:
    """Matches candidates at least one predicate accepts."""
    return AnyOf(*predicates)
