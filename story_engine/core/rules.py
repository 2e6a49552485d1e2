"""
Classification Rules
====================

Story state and confidence level rules as ordered precedence lists.

INVARIANT: first match wins.
Each rule is a named (predicate, outcome) pair, so precedence is data that
can be audited and tested one rule at a time. Reordering a tuple is the
only way to change precedence.

GUARANTEES:
===========
1. A single-source story never grades HIGH (LOW rules run first)
2. A contradicted story is always CONTRADICTED and LOW
3. The engine never emits StoryState.RESOLVED
4. No rule raises, whatever the input values
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from ..contracts.signals import ConfidenceInput, ConfidenceLevel, StoryState


Predicate = Callable[[ConfidenceInput], bool]


# =============================================================================
# THRESHOLDS
# =============================================================================

@dataclass(frozen=True)
class ConfidenceThresholds:
    """Numeric cut-offs shared by the state and confidence rules."""
    confirmed_min_sources: int = 4
    confirmed_min_verified: int = 2
    high_min_verified_without_primary: int = 3
    low_min_sources_without_primary: int = 3
    recency_window_minutes: float = 30.0
    recency_min_sources: int = 2


DEFAULT_THRESHOLDS = ConfidenceThresholds()


# =============================================================================
# EXPLANATIONS
# =============================================================================

EXPLANATION_SINGLE_SOURCE = "Limited independent confirmation — only one source reporting"
EXPLANATION_CONTRADICTED = "Contradictions detected between sources"
EXPLANATION_LIMITED = "Limited independent confirmation"
EXPLANATION_HIGH = "Consistent reporting across multiple independent sources"
EXPLANATION_MEDIUM = "Multiple sources reporting consistently"


# =============================================================================
# RULE TYPES
# =============================================================================

@dataclass(frozen=True)
class StateRule:
    name: str
    predicate: Predicate
    state: StoryState

    def matches(self, signals: ConfidenceInput) -> bool:
        return bool(self.predicate(signals))


@dataclass(frozen=True)
class ConfidenceRule:
    name: str
    predicate: Predicate
    level: ConfidenceLevel
    explanation: str

    def matches(self, signals: ConfidenceInput) -> bool:
        return bool(self.predicate(signals))


DEFAULT_STATE_RULE = StateRule(
    name="developing",
    predicate=lambda s: True,
    state=StoryState.DEVELOPING,
)

DEFAULT_CONFIDENCE_RULE = ConfidenceRule(
    name="medium",
    predicate=lambda s: True,
    level=ConfidenceLevel.MEDIUM,
    explanation=EXPLANATION_MEDIUM,
)


# =============================================================================
# RULE BUILDERS
# =============================================================================

def _meets_confirmed_grade(t: ConfidenceThresholds) -> Predicate:
    def predicate(s: ConfidenceInput) -> bool:
        return (
            s.source_count >= t.confirmed_min_sources
            and s.verified_source_count >= t.confirmed_min_verified
            and s.is_stable_narrative
        )
    return predicate


def build_state_rules(thresholds: ConfidenceThresholds = DEFAULT_THRESHOLDS) -> Tuple[StateRule, ...]:
    """Ordered state rules; DEFAULT_STATE_RULE applies when none match."""
    return (
        StateRule("contradicted", lambda s: s.has_contradictions, StoryState.CONTRADICTED),
        StateRule("single_source", lambda s: s.is_single_source, StoryState.SINGLE_SOURCE),
        StateRule("confirmed", _meets_confirmed_grade(thresholds), StoryState.CONFIRMED),
    )


def build_confidence_rules(thresholds: ConfidenceThresholds = DEFAULT_THRESHOLDS) -> Tuple[ConfidenceRule, ...]:
    """
    Ordered confidence rules; DEFAULT_CONFIDENCE_RULE applies when none match.

    The four LOW rules together form the LOW condition. Their order also
    selects the explanation: single-source, then contradiction, then generic.
    """
    t = thresholds
    confirmed_grade = _meets_confirmed_grade(t)

    def lacks_primary_corroboration(s: ConfidenceInput) -> bool:
        return not s.has_primary_reporting and s.source_count < t.low_min_sources_without_primary

    def too_recent(s: ConfidenceInput) -> bool:
        return s.age_minutes < t.recency_window_minutes and s.source_count < t.recency_min_sources

    def high_grade(s: ConfidenceInput) -> bool:
        return (
            confirmed_grade(s)
            and not s.has_contradictions
            and (s.has_primary_reporting or s.verified_source_count >= t.high_min_verified_without_primary)
        )

    return (
        ConfidenceRule("low_single_source", lambda s: s.is_single_source,
                       ConfidenceLevel.LOW, EXPLANATION_SINGLE_SOURCE),
        ConfidenceRule("low_contradicted", lambda s: s.has_contradictions,
                       ConfidenceLevel.LOW, EXPLANATION_CONTRADICTED),
        ConfidenceRule("low_no_primary", lacks_primary_corroboration,
                       ConfidenceLevel.LOW, EXPLANATION_LIMITED),
        ConfidenceRule("low_too_recent", too_recent,
                       ConfidenceLevel.LOW, EXPLANATION_LIMITED),
        ConfidenceRule("high", high_grade,
                       ConfidenceLevel.HIGH, EXPLANATION_HIGH),
    )


# =============================================================================
# EVALUATION
# =============================================================================

def classify_state(
    signals: ConfidenceInput,
    rules: Optional[Tuple[StateRule, ...]] = None
) -> StateRule:
    """Return the first state rule matching the signals."""
    for rule in rules if rules is not None else build_state_rules():
        if rule.matches(signals):
            return rule
    return DEFAULT_STATE_RULE


def classify_confidence(
    signals: ConfidenceInput,
    rules: Optional[Tuple[ConfidenceRule, ...]] = None
) -> ConfidenceRule:
    """Return the first confidence rule matching the signals."""
    for rule in rules if rules is not None else build_confidence_rules():
        if rule.matches(signals):
            return rule
    return DEFAULT_CONFIDENCE_RULE
