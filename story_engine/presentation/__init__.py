from .viewmodels import (
    BadgeViewModel, CONFIDENCE_BADGES, STATE_BADGES, confidence_badge, state_badge
)

__all__ = ['BadgeViewModel', 'CONFIDENCE_BADGES', 'STATE_BADGES', 'confidence_badge', 'state_badge']
