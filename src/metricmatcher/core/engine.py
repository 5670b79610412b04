"""Match engine: searches metric families for a sample satisfying a spec.

The search records every name it sees and every near miss it finds, so a
failed assertion can explain itself without a second pass over the source.
"""

import logging
from collections.abc import Iterable, Sequence

from metricmatcher.core.models import (
    FamilyGroup,
    LabelPredicate,
    MatchResult,
    Sample,
    UnmatchedLabelRecord,
    UnmatchedLabelValue,
)
from metricmatcher.core.spec import MatchSpec

logger = logging.getLogger(__name__)


# @tra: Core.Engine.Evaluate
def evaluate(spec: MatchSpec, families: Iterable[FamilyGroup]) -> MatchResult:
    """Evaluate a match specification against a snapshot of metric families.

    Families are candidates when their name starts with the requested name,
    or when the requested name is one of their derived sample names
    (e.g. ``latency_sum`` for family ``latency``).

    The verdict of a family whose name starts with the requested name
    replaces the previous one instead of being OR-ed with it: such a later
    family can undo an earlier match unless the scan already stopped. A
    family reached only through a derived sample name can set the verdict
    but never clear it. The scan stops at the first match when anything
    beyond the name is constrained, or when asserting presence.

    Args:
        spec: The requested metric.
        families: Adapted families, in source order.

    Returns:
        A fresh MatchResult holding the verdict and the diagnostic state.
    """
    result = MatchResult()
    found = False
    for family in families:
        result.actual_family_names.add(family.name)
        extends_name = family.name.startswith(spec.name)
        if not extends_name and not spec.name.startswith(family.name):
            continue
        if extends_name and not spec.is_constrained:
            found = True
        elif extends_name:
            found = match_samples(spec, family, result)
        else:
            # Derived-name family: can confirm a match, never undo one.
            found = match_samples(spec, family, result) or found
        if found and (spec.is_constrained or spec.presence):
            break
    result.matched = spec.presence == found
    logger.debug(
        "Evaluated %r (presence=%s) after %d family names: matched=%s",
        spec.name,
        spec.presence,
        len(result.actual_family_names),
        result.matched,
    )
    return result


# @tra: Core.Engine.MatchSamples
def match_samples(spec: MatchSpec, family: FamilyGroup, result: MatchResult) -> bool:
    """Search one family's samples, recording names, values and near misses.

    Returns:
        The verdict of the last sample whose name carried the requested
        prefix, False if there was none.
    """
    found = False
    for sample in family.samples:
        result.actual_sample_names.add(sample.name)
        if not sample.name.startswith(spec.name):
            continue
        if not spec.is_constrained:
            found = True
            if spec.presence:
                break
            continue
        record = match_labels(sample, spec.label_predicates)
        if record.is_full_match:
            result.add_found_value(sample.name, sample.value)
            found = spec.value_predicate is None or spec.value_predicate.matches(
                sample.value
            )
            if found and spec.presence:
                break
        else:
            record.actual_labels.update(zip(sample.label_names, sample.label_values))
            result.unmatched_label_records.append(record)
    return found


# @tra: Core.Engine.MatchLabels
def match_labels(
    sample: Sample, label_predicates: Sequence[LabelPredicate]
) -> UnmatchedLabelRecord:
    """Check every label of a sample against every label predicate pair.

    A name predicate that matches no label name stays in
    ``missing_predicate_names``. A label whose name matched but whose value
    failed is listed in ``value_mismatches``. Non-exact name predicates may
    match several labels, each checked on its own.
    """
    record = UnmatchedLabelRecord(
        missing_predicate_names=[pair.name for pair in label_predicates]
    )
    for label_name, label_value in zip(sample.label_names, sample.label_values):
        for pair in label_predicates:
            if not pair.name.matches(label_name):
                continue
            record.missing_predicate_names = [
                p for p in record.missing_predicate_names if p is not pair.name
            ]
            if not pair.value.matches(label_value):
                record.value_mismatches.append(
                    UnmatchedLabelValue(pair.name, pair.value, label_value)
                )
    return record
