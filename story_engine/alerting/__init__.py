"""
Verified-Source Alert Threshold

Detects when a story's verified-source count crosses the alert threshold.
Delivering the notification belongs to the alerting collaborator; this
module only decides whether one is due.

INVARIANT: an alert fires on the upward crossing only.
A story that stays above the threshold, or falls back below it, does not
re-trigger.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import logging

from ..contracts.base import Timestamp

logger = logging.getLogger(__name__)

DEFAULT_VERIFIED_THRESHOLD = 3


@dataclass(frozen=True)
class AlertTrigger:
    """A due notification for one story."""
    story_id: str
    threshold: int
    previous_verified_count: int
    verified_count: int
    triggered_at: Optional[Timestamp] = None


class VerifiedSourceAlertPolicy:
    """Threshold check over successive verified-source counts of a story."""

    def __init__(self, threshold: int = DEFAULT_VERIFIED_THRESHOLD):
        if threshold < 1:
            raise ValueError("threshold must be at least 1")
        self._threshold = threshold

    @property
    def threshold(self) -> int:
        return self._threshold

    def crossed(self, previous_verified_count: int, verified_count: int) -> bool:
        return previous_verified_count < self._threshold <= verified_count

    def check(
        self,
        story_id: str,
        previous_verified_count: int,
        verified_count: int,
        at: Optional[Timestamp] = None
    ) -> Optional[AlertTrigger]:
        """Return an AlertTrigger if this update crosses the threshold."""
        if not self.crossed(previous_verified_count, verified_count):
            return None
        logger.info(
            "Story %s reached %d verified sources (threshold %d)",
            story_id, verified_count, self._threshold
        )
        return AlertTrigger(
            story_id=story_id,
            threshold=self._threshold,
            previous_verified_count=previous_verified_count,
            verified_count=verified_count,
            triggered_at=at
        )


__all__ = ['AlertTrigger', 'VerifiedSourceAlertPolicy', 'DEFAULT_VERIFIED_THRESHOLD']
