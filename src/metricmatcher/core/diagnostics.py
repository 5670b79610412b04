"""Human-readable rendering of match expectations and mismatches.

The text shape (ten-space indentation, ``- `` bullets, quoted strings and
angle-bracketed numbers) matches Hamcrest-based metric matchers so existing
failure-message expectations keep working.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from metricmatcher.core.models import MatchResult
    from metricmatcher.core.spec import MatchSpec

INDENTATION = " " * 10
BULLET = "- "
DASH_LIST_WITH_NEWLINE = "\n" + INDENTATION + BULLET


class Description:
    """Accumulates description text; every append returns self for chaining."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def __str__(self) -> str:
        return "".join(self._parts)

    def append_text(self, text: str) -> Description:
        self._parts.append(text)
        return self

    def append_value(self, value: Any) -> Description:
        """Append a value: strings double-quoted, anything else in <...>."""
        if isinstance(value, str):
            escaped = value.replace("\\", "\\\\").replace('"', '\\"')
            self._parts.append(f'"{escaped}"')
        else:
            self._parts.append(f"<{value!r}>")
        return self

    def append_description_of(self, described: Any) -> Description:
        """Append a predicate's own description."""
        if hasattr(described, "describe_to"):
            described.describe_to(self)
        elif hasattr(described, "describe"):
            self._parts.append(described.describe())
        else:
            self.append_value(described)
        return self

    def append_list(
        self, start: str, separator: str, end: str, described: Iterable[Any]
    ) -> Description:
        """Append the descriptions of several predicates."""
        self._parts.append(start)
        for i, item in enumerate(described):
            if i:
                self._parts.append(separator)
            self.append_description_of(item)
        self._parts.append(end)
        return self

    def append_value_list(
        self, start: str, separator: str, end: str, values: Iterable[Any]
    ) -> Description:
        """Append several values, each rendered with append_value."""
        self._parts.append(start)
        for i, value in enumerate(values):
            if i:
                self._parts.append(separator)
            self.append_value(value)
        self._parts.append(end)
        return self


def _labels_tuple(labels: dict[str, str]) -> str:
    return "(" + ", ".join(f"{k}={v}" for k, v in labels.items()) + ")"


# @tra: Core.Diagnostics.Mismatch
def describe_mismatch(spec: MatchSpec, result: MatchResult) -> str:
    """Explain why an evaluation did not come out as the match spec expected.

    The first applicable explanation wins: values of label-matched samples
    when a value predicate is set, then label mismatches, then every family
    and sample name observed.
    """
    description = Description()
    if result.found_values and spec.value_predicate is not None:
        description.append_text("no" if spec.presence else "a").append_text(
            " value matches: "
        ).append_description_of(spec.value_predicate).append_text(
            "\n" + INDENTATION + "found values: "
        )
        for sample_name, values in result.sorted_found_values():
            description.append_value_list(
                DASH_LIST_WITH_NEWLINE, ", ", " for sample ", values
            ).append_value(sample_name)
    elif result.unmatched_label_records:
        description.append_text("labels did")
        if spec.presence:
            description.append_text(" not")
        description.append_text(" match:")
        for record in result.unmatched_label_records:
            description.append_text("\n").append_text(
                _labels_tuple(record.actual_labels)
            )
            if not spec.presence:
                continue
            if record.missing_predicate_names:
                description.append_text("\n  missing names: ").append_list(
                    "", ", ", "", record.missing_predicate_names
                )
            if record.value_mismatches:
                description.append_text("\n  unmatched label values:")
                for mismatch in record.value_mismatches:
                    description.append_text("\n  - for ").append_description_of(
                        mismatch.name
                    ).append_text(" expected: ").append_description_of(
                        mismatch.expected_value
                    ).append_text(" but got: ").append_value(mismatch.actual_value)
            description.append_text("\n")
    else:
        family_names = result.sorted_family_names()
        sample_names = result.sorted_sample_names()
        if spec.presence:
            description.append_text("no metric with name: ").append_value(
                spec.name
            ).append_text("\n" + INDENTATION)
        if family_names:
            description.append_value_list(
                "found metric names:" + DASH_LIST_WITH_NEWLINE,
                DASH_LIST_WITH_NEWLINE,
                "",
                family_names,
            )
        if sample_names:
            if family_names:
                description.append_text("\n" + INDENTATION)
            description.append_value_list(
                "found metric sample names:" + DASH_LIST_WITH_NEWLINE,
                DASH_LIST_WITH_NEWLINE,
                "",
                sample_names,
            )
    return str(description)


# @tra: Core.Diagnostics.Expectation
def describe_expectation(spec: MatchSpec) -> str:
    """Describe what the match spec expects to find, or not find."""
    description = Description()
    description.append_text("a ").append_text(spec.source_kind.value)
    if not spec.presence:
        description.append_text(" not")
    description.append_text(" containing a sample with name: ").append_value(
        spec.name
    )
    if spec.value_predicate is not None:
        description.append_text(" value: ").append_description_of(
            spec.value_predicate
        )
    if spec.label_predicates:
        description.append_text(" and labels:\n")
        for pair in spec.label_predicates:
            description.append_description_of(pair.name).append_text(
                "="
            ).append_description_of(pair.value).append_text("\n")
    return str(description)
