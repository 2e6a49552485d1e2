"""
Core Confidence & State Rules

RESPONSIBILITY: Turn a ConfidenceInput into a lifecycle state and a grade
ALLOWED INPUTS: ConfidenceInput only
OUTPUTS: the StateRule / ConfidenceRule that fired

WHAT THIS LAYER MUST NOT DO:
============================
- Read a clock (age arrives pre-computed)
- Validate or reject input (classification is total)
- Emit StoryState.RESOLVED (editorial action only)
"""

from .rules import (
    ConfidenceRule, ConfidenceThresholds, StateRule,
    DEFAULT_CONFIDENCE_RULE, DEFAULT_STATE_RULE, DEFAULT_THRESHOLDS,
    EXPLANATION_CONTRADICTED, EXPLANATION_HIGH, EXPLANATION_LIMITED,
    EXPLANATION_MEDIUM, EXPLANATION_SINGLE_SOURCE,
    build_confidence_rules, build_state_rules,
    classify_confidence, classify_state,
)

__all__ = [
    'ConfidenceRule', 'ConfidenceThresholds', 'StateRule',
    'DEFAULT_CONFIDENCE_RULE', 'DEFAULT_STATE_RULE', 'DEFAULT_THRESHOLDS',
    'EXPLANATION_CONTRADICTED', 'EXPLANATION_HIGH', 'EXPLANATION_LIMITED',
    'EXPLANATION_MEDIUM', 'EXPLANATION_SINGLE_SOURCE',
    'build_confidence_rules', 'build_state_rules',
    'classify_confidence', 'classify_state',
]
