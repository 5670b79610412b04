"""Core domain models for metric matching."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from metricmatcher.core.predicates import Predicate


@dataclass(frozen=True)
class Sample:
    """A single metric observation.

    Attributes:
        name: Sample name (e.g., http_request_duration_seconds_count).
        label_names: Label names, in exposition order.
        label_values: Label values, positionally paired with label_names.
        value: The sample value.
    """

    name: str
    label_names: tuple[str, ...] = ()
    label_values: tuple[str, ...] = ()
    value: float = 0.0

    def __post_init__(self) -> None:
        if len(self.label_names) != len(self.label_values):
            raise ValueError(
                f"sample {self.name!r} has {len(self.label_names)} label names "
                f"but {len(self.label_values)} label values"
            )

    @classmethod
    def from_labels(
        cls, name: str, labels: Mapping[str, str] | None = None, value: float = 0.0
    ) -> Sample:
        """Build a sample from a label mapping, keeping its iteration order."""
        labels = labels or {}
        return cls(
            name=name,
            label_names=tuple(labels.keys()),
            label_values=tuple(str(v) for v in labels.values()),
            value=float(value),
        )

    @property
    def labels(self) -> dict[str, str]:
        """Label name/value pairs as an ordered dict."""
        return dict(zip(self.label_names, self.label_values))


@dataclass(frozen=True)
class FamilyGroup:
    """A named group of related samples.

    A histogram family named ``latency`` yields samples named
    ``latency_bucket``, ``latency_count`` and ``latency_sum``.
    """

    name: str
    samples: tuple[Sample, ...] = ()


@dataclass(frozen=True, eq=False)
class LabelPredicate:
    """A label name predicate paired with its label value predicate."""

    name: Predicate
    value: Predicate


@dataclass(frozen=True)
class UnmatchedLabelValue:
    """A label whose name matched but whose value did not."""

    name: Predicate
    expected_value: Predicate
    actual_value: str


@dataclass
class UnmatchedLabelRecord:
    """Why a single sample failed the label predicates."""

    actual_labels: dict[str, str] = field(default_factory=dict)
    missing_predicate_names: list[Predicate] = field(default_factory=list)
    value_mismatches: list[UnmatchedLabelValue] = field(default_factory=list)

    @property
    def is_full_match(self) -> bool:
        return not self.missing_predicate_names and not self.value_mismatches


@dataclass
class MatchResult:
    """Diagnostic state accumulated while evaluating one match.

    Attributes:
        matched: Final verdict, presence mode already applied.
        found_values: Values of samples whose labels fully matched, per sample name.
        unmatched_label_records: One record per name-matched sample whose labels failed.
        actual_family_names: Every family name seen during the scan.
        actual_sample_names: Every sample name seen during the scan.
    """

    matched: bool = False
    found_values: dict[str, list[float]] = field(default_factory=dict)
    unmatched_label_records: list[UnmatchedLabelRecord] = field(default_factory=list)
    actual_family_names: set[str] = field(default_factory=set)
    actual_sample_names: set[str] = field(default_factory=set)

    def add_found_value(self, sample_name: str, value: float) -> None:
        self.found_values.setdefault(sample_name, []).append(value)

    def sorted_found_values(self) -> list[tuple[str, list[float]]]:
        return sorted(self.found_values.items())

    def sorted_family_names(self) -> list[str]:
        return sorted(self.actual_family_names)

    def sorted_sample_names(self) -> list[str]:
        return sorted(self.actual_sample_names)
