"""Exceptions raised by metricmatcher."""


class MetricMatcherError(Exception):
    """Base class for all metricmatcher errors."""


class InvalidSpecification(MetricMatcherError, ValueError):
    """A match specification or predicate was built from invalid input."""


class UnsupportedSourceType(MetricMatcherError, TypeError):
    """The object under test is neither registry-shaped nor collector-shaped.

    Attributes:
        type_name: Runtime type name of the rejected source.
    """

    def __init__(self, type_name: str) -> None:
        super().__init__(f"Cannot match an object of type: {type_name}")
        self.type_name = type_name
