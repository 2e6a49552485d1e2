"""
Rule Precedence Tests

Each rule is checked in isolation, then the ordered lists are checked for
first-match-wins behaviour.
"""

import math

import pytest

from story_engine.contracts import ConfidenceInput, ConfidenceLevel, StoryState
from story_engine.core import (
    DEFAULT_CONFIDENCE_RULE, DEFAULT_STATE_RULE,
    EXPLANATION_CONTRADICTED, EXPLANATION_HIGH, EXPLANATION_LIMITED,
    EXPLANATION_MEDIUM, EXPLANATION_SINGLE_SOURCE,
    ConfidenceThresholds, build_confidence_rules, build_state_rules,
    classify_confidence, classify_state,
)


def rule_named(rules, name):
    return next(r for r in rules if r.name == name)


class TestStateRules:

    def test_precedence_order(self):
        names = [r.name for r in build_state_rules()]
        assert names == ["contradicted", "single_source", "confirmed"]

    def test_contradiction_overrides_high_source_count(self):
        signals = ConfidenceInput(source_count=10, verified_source_count=8, has_contradictions=True)
        assert classify_state(signals).state is StoryState.CONTRADICTED

    def test_contradicted_single_source(self):
        signals = ConfidenceInput(source_count=1, has_contradictions=True)
        assert classify_state(signals).state is StoryState.CONTRADICTED

    def test_single_source(self):
        assert classify_state(ConfidenceInput(source_count=1)).state is StoryState.SINGLE_SOURCE

    def test_zero_sources_is_single_source(self):
        assert classify_state(ConfidenceInput(source_count=0)).state is StoryState.SINGLE_SOURCE

    @pytest.mark.parametrize("source_count,verified,stable", [
        (4, 2, True),
        (12, 2, True),
        (4, 4, True),
    ])
    def test_confirmed(self, source_count, verified, stable):
        signals = ConfidenceInput(
            source_count=source_count, verified_source_count=verified, is_stable_narrative=stable
        )
        assert classify_state(signals).state is StoryState.CONFIRMED

    @pytest.mark.parametrize("source_count,verified,stable", [
        (3, 3, True),    # too few sources
        (4, 1, True),    # too few verified
        (6, 4, False),   # narrative still shifting
        (2, 0, True),
    ])
    def test_developing(self, source_count, verified, stable):
        signals = ConfidenceInput(
            source_count=source_count, verified_source_count=verified, is_stable_narrative=stable
        )
        rule = classify_state(signals)
        assert rule is DEFAULT_STATE_RULE
        assert rule.state is StoryState.DEVELOPING

    def test_confirmed_rule_in_isolation(self):
        confirmed = rule_named(build_state_rules(), "confirmed")
        assert confirmed.matches(ConfidenceInput(source_count=4, verified_source_count=2))
        assert not confirmed.matches(ConfidenceInput(source_count=4, verified_source_count=2,
                                                     is_stable_narrative=False))


class TestConfidenceRules:

    def test_precedence_order(self):
        names = [r.name for r in build_confidence_rules()]
        assert names == [
            "low_single_source", "low_contradicted", "low_no_primary", "low_too_recent", "high"
        ]

    def test_single_source_explanation_wins_over_contradiction(self):
        signals = ConfidenceInput(source_count=1, has_contradictions=True)
        rule = classify_confidence(signals)

        assert rule.level is ConfidenceLevel.LOW
        assert rule.explanation == EXPLANATION_SINGLE_SOURCE

    def test_single_source_explanation_text(self):
        rule = classify_confidence(ConfidenceInput(source_count=1))
        assert rule.explanation == "Limited independent confirmation — only one source reporting"

    def test_contradiction_explanation_wins_over_generic(self):
        signals = ConfidenceInput(source_count=2, has_contradictions=True)
        rule = classify_confidence(signals)

        assert rule.name == "low_contradicted"
        assert rule.explanation == EXPLANATION_CONTRADICTED

    def test_no_primary_reporting_with_few_sources_is_low(self):
        signals = ConfidenceInput(source_count=2, verified_source_count=2, has_primary_reporting=False)
        rule = classify_confidence(signals)

        assert rule.name == "low_no_primary"
        assert rule.explanation == EXPLANATION_LIMITED

    def test_recency_rule_in_isolation(self):
        too_recent = rule_named(build_confidence_rules(), "low_too_recent")

        assert too_recent.matches(ConfidenceInput(source_count=1, age_minutes=10))
        assert not too_recent.matches(ConfidenceInput(source_count=2, age_minutes=10))
        assert not too_recent.matches(ConfidenceInput(source_count=1, age_minutes=30))
        assert not too_recent.matches(ConfidenceInput(source_count=1, age_minutes=math.inf))

    def test_high_with_primary_reporting(self):
        signals = ConfidenceInput(
            source_count=4, verified_source_count=2, has_primary_reporting=True
        )
        rule = classify_confidence(signals)

        assert rule.level is ConfidenceLevel.HIGH
        assert rule.explanation == EXPLANATION_HIGH

    def test_high_without_primary_needs_three_verified(self):
        two = ConfidenceInput(source_count=5, verified_source_count=2)
        three = ConfidenceInput(source_count=5, verified_source_count=3)

        assert classify_confidence(two).level is ConfidenceLevel.MEDIUM
        assert classify_confidence(three).level is ConfidenceLevel.HIGH

    def test_unstable_narrative_caps_at_medium(self):
        signals = ConfidenceInput(
            source_count=8, verified_source_count=5,
            has_primary_reporting=True, is_stable_narrative=False
        )
        assert classify_confidence(signals).level is ConfidenceLevel.MEDIUM

    def test_medium_default(self):
        signals = ConfidenceInput(source_count=3, verified_source_count=0)
        rule = classify_confidence(signals)

        assert rule is DEFAULT_CONFIDENCE_RULE
        assert rule.explanation == EXPLANATION_MEDIUM


class TestThresholds:

    def test_custom_thresholds_shift_confirmed(self):
        strict = ConfidenceThresholds(confirmed_min_sources=6, confirmed_min_verified=3)
        signals = ConfidenceInput(source_count=5, verified_source_count=3)

        assert classify_state(signals).state is StoryState.CONFIRMED
        assert classify_state(signals, build_state_rules(strict)).state is StoryState.DEVELOPING

    def test_custom_recency_window(self):
        wide = ConfidenceThresholds(recency_window_minutes=120, recency_min_sources=3)
        signals = ConfidenceInput(source_count=2, has_primary_reporting=True, age_minutes=60)

        assert classify_confidence(signals).level is ConfidenceLevel.MEDIUM
        rule = classify_confidence(signals, build_confidence_rules(wide))
        assert rule.name == "low_too_recent"
