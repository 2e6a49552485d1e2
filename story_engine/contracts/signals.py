"""
Signal Contracts

The aggregate signals consumed by the confidence engine and the result it
produces. Both are pure data: the engine reads a ConfidenceInput and returns
a ConfidenceResult, nothing is cached or mutated in between.

WHY NO VALIDATION HERE:
=======================
A ConfidenceInput must be constructible from degenerate values
(source_count = 0, verified > total) so that the engine can classify them
conservatively instead of crashing. Validation lives in the ledger layer
(see story_engine.ledger.validate_confidence_input).
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict
import hashlib
import json
import math


# =============================================================================
# ENUMS (Closed World)
# =============================================================================

class ConfidenceLevel(Enum):
    """
    Reporting reliability grade.
    Describes corroboration, never truth.
    """
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def label(self) -> str:
        """Capitalised form used by the public API (Low|Medium|High)."""
        return self.value.capitalize()


class StoryState(Enum):
    """
    Editorial lifecycle stage of a story.
    RESOLVED is set by editorial action only, never by the engine.
    """
    SINGLE_SOURCE = "single-source"
    DEVELOPING = "developing"
    CONFIRMED = "confirmed"
    CONTRADICTED = "contradicted"
    RESOLVED = "resolved"

    @property
    def label(self) -> str:
        return _STATE_LABELS[self]


_STATE_LABELS = {
    StoryState.SINGLE_SOURCE: "Single Source",
    StoryState.DEVELOPING: "Developing",
    StoryState.CONFIRMED: "Confirmed",
    StoryState.CONTRADICTED: "Contradicted",
    StoryState.RESOLVED: "Resolved",
}


# =============================================================================
# ENGINE INPUT
# =============================================================================

@dataclass(frozen=True)
class ConfidenceInput:
    """
    Aggregate signals for one story, derived from its Source Ledger.

    age_minutes is infinite when the story's age is unknown or the caller
    does not want recency to influence the grade.
    """
    source_count: int
    verified_source_count: int = 0
    has_primary_reporting: bool = False
    has_contradictions: bool = False
    age_minutes: float = math.inf
    is_stable_narrative: bool = True

    @property
    def is_single_source(self) -> bool:
        return self.source_count <= 1


# =============================================================================
# ENGINE OUTPUT
# =============================================================================

@dataclass(frozen=True)
class ConfidenceResult:
    """
    Projection of a story's signals into a grade and a lifecycle state.

    Never persisted as authoritative: it can always be recomputed from the
    ledger. state_rule and confidence_rule name the rules that fired; the
    counts and contradiction flag echo the signals that were evaluated, so
    consumers never recompute them.
    """
    level: ConfidenceLevel
    explanation: str
    story_state: StoryState
    is_single_source: bool
    state_rule: str
    confidence_rule: str
    source_count: int = 0
    verified_source_count: int = 0
    has_contradictions: bool = False

    @property
    def label(self) -> str:
        return self.level.label

    @property
    def state_label(self) -> str:
        return self.story_state.label

    def to_dict(self) -> Dict[str, Any]:
        return {
            "level": self.level.value,
            "label": self.label,
            "explanation": self.explanation,
            "story_state": self.story_state.value,
            "state_label": self.state_label,
            "is_single_source": self.is_single_source,
            "state_rule": self.state_rule,
            "confidence_rule": self.confidence_rule,
            "source_count": self.source_count,
            "verified_source_count": self.verified_source_count,
            "has_contradictions": self.has_contradictions,
        }

    def fingerprint(self) -> str:
        """SHA-256 over the canonical JSON form."""
        canonical = json.dumps(self.to_dict(), sort_keys=True, separators=(',', ':'))
        return hashlib.sha256(canonical.encode('utf-8')).hexdigest()
