"""
Ledger Temporal Helpers
=======================

Timestamp ordering and consistency checks over a story's observations.

INVARIANT: "now" is always passed in as reference_time.
Nothing in this module reads a clock.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from ..contracts.base import Timestamp
from ..contracts.ledger import SourceObservation


DEFAULT_FUTURE_TOLERANCE_MINUTES = 5.0


def chronological(observations: Iterable[SourceObservation]) -> Tuple[SourceObservation, ...]:
    """Oldest first; equal timestamps are ordered by source name."""
    return tuple(sorted(
        observations,
        key=lambda o: (o.published_at.value, o.source_name.lower())
    ))


def first_published(observations: Iterable[SourceObservation]) -> Optional[Timestamp]:
    stamps = [o.published_at for o in observations]
    return min(stamps) if stamps else None


def last_published(observations: Iterable[SourceObservation]) -> Optional[Timestamp]:
    stamps = [o.published_at for o in observations]
    return max(stamps) if stamps else None


def age_minutes(since: Timestamp, reference_time: Timestamp) -> float:
    """
    Minutes elapsed between `since` and `reference_time`.

    A `since` later than the reference time (publisher clock skew) counts
    as zero age rather than a negative one.
    """
    return max(0.0, since.minutes_until(reference_time))


@dataclass(frozen=True)
class TimestampConsistency:
    """Result of checking observation timestamps against the reference time."""
    reference_time: Timestamp
    tolerance_minutes: float
    future_dated: Tuple[SourceObservation, ...] = field(default_factory=tuple)

    @property
    def is_consistent(self) -> bool:
        return len(self.future_dated) == 0


def check_timestamp_consistency(
    observations: Iterable[SourceObservation],
    reference_time: Timestamp,
    tolerance_minutes: float = DEFAULT_FUTURE_TOLERANCE_MINUTES
) -> TimestampConsistency:
    """Flag observations published more than tolerance_minutes after reference_time."""
    future = tuple(
        o for o in chronological(observations)
        if reference_time.minutes_until(o.published_at) > tolerance_minutes
    )
    return TimestampConsistency(
        reference_time=reference_time,
        tolerance_minutes=tolerance_minutes,
        future_dated=future
    )
