"""
Presentation Contracts

Responsibility:
Badge ViewModels for confidence levels and story states.
Presentation-only: the engine commits to the level/state names, never to
colours or icons.
"""

from dataclasses import dataclass

from ..contracts.signals import ConfidenceLevel, StoryState


@dataclass(frozen=True)
class BadgeViewModel:
    """ViewModel for a badge component."""
    label: str    # e.g., "Well-verified"
    color: str    # e.g., "emerald"
    icon: str     # e.g., "check"


CONFIDENCE_BADGES = {
    ConfidenceLevel.LOW: BadgeViewModel(label="Limited verification", color="amber", icon="alert-triangle"),
    ConfidenceLevel.MEDIUM: BadgeViewModel(label="Moderate confidence", color="blue", icon="info"),
    ConfidenceLevel.HIGH: BadgeViewModel(label="Well-verified", color="emerald", icon="shield-check"),
}

STATE_BADGES = {
    StoryState.SINGLE_SOURCE: BadgeViewModel(label="Single Source", color="amber", icon="warning"),
    StoryState.DEVELOPING: BadgeViewModel(label="Developing", color="blue", icon="refresh"),
    StoryState.CONFIRMED: BadgeViewModel(label="Confirmed", color="emerald", icon="check"),
    StoryState.CONTRADICTED: BadgeViewModel(label="Contradicted", color="red", icon="warning-red"),
    StoryState.RESOLVED: BadgeViewModel(label="Resolved", color="muted", icon="neutral"),
}


def confidence_badge(level: ConfidenceLevel) -> BadgeViewModel:
    return CONFIDENCE_BADGES[level]


def state_badge(state: StoryState) -> BadgeViewModel:
    return STATE_BADGES[state]
