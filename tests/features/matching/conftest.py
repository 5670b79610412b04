"""BDD step definitions for metric assertion features."""

from dataclasses import dataclass
from typing import Any

import pytest
from prometheus_client import CollectorRegistry
from pytest_bdd import given, parsers, then, when

from metricmatcher import (
    MetricMatcher,
    assert_that,
    does_not_have_metric,
    has_metric,
)


@dataclass
class MatchingScenarioContext:
    """Shared state between steps in a matching scenario."""

    source: Any = None
    matcher: MetricMatcher | None = None
    passed: bool | None = None
    diagnostic: str = ""


@pytest.fixture
def ctx() -> MatchingScenarioContext:
    """Fresh scenario context for each test."""
    return MatchingScenarioContext()


# === Background Steps ===
@given("the count and peanuts registry")
def step_registry(
    ctx: MatchingScenarioContext, prometheus_registry: CollectorRegistry
) -> None:
    ctx.source = prometheus_registry


# === Matcher Steps ===
@given(parsers.parse('a matcher for metric "{name}"'))
def step_has_metric(ctx: MatchingScenarioContext, name: str) -> None:
    ctx.matcher = has_metric(name)


@given(parsers.parse('a matcher for the absence of metric "{name}"'))
def step_does_not_have_metric(ctx: MatchingScenarioContext, name: str) -> None:
    ctx.matcher = does_not_have_metric(name)


@given(parsers.parse('the label "{name}" equal to "{value}"'))
def step_label(ctx: MatchingScenarioContext, name: str, value: str) -> None:
    assert ctx.matcher is not None
    ctx.matcher.label(name, value)


@given(parsers.parse("the value {value:g} within {epsilon:g}"))
def step_value(ctx: MatchingScenarioContext, value: float, epsilon: float) -> None:
    assert ctx.matcher is not None
    ctx.matcher.value(value, epsilon)


@given(parsers.parse("the integer value {value:d}"))
def step_int_value(ctx: MatchingScenarioContext, value: int) -> None:
    assert ctx.matcher is not None
    ctx.matcher.int_value(value)


# === Evaluation Steps ===
@when("the matcher is evaluated")
def step_evaluate(ctx: MatchingScenarioContext) -> None:
    assert ctx.matcher is not None
    try:
        assert_that(ctx.source, ctx.matcher)
    except AssertionError as e:
        ctx.passed = False
        ctx.diagnostic = str(e)
    else:
        ctx.passed = True


# === Outcome Steps ===
@then("the assertion passes")
def step_passes(ctx: MatchingScenarioContext) -> None:
    assert ctx.passed is True, ctx.diagnostic


@then("the assertion fails")
def step_fails(ctx: MatchingScenarioContext) -> None:
    assert ctx.passed is False


@then(parsers.parse('the diagnostic contains "{text}"'))
def step_diagnostic_contains(ctx: MatchingScenarioContext, text: str) -> None:
    assert text in ctx.diagnostic, ctx.diagnostic


@then(parsers.parse('the diagnostic lists the family name "{name}"'))
def step_diagnostic_lists_family(ctx: MatchingScenarioContext, name: str) -> None:
    assert f'- "{name}"' in ctx.diagnostic, ctx.diagnostic
