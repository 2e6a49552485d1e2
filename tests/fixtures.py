"""
Test Fixtures

Explicit, fixed-time fixtures for deterministic testing.
No wall-clock reads: every timestamp is a constant.
"""

from datetime import datetime, timezone, timedelta
from typing import Optional, Sequence

from story_engine.contracts import (
    ContradictionFlag, SourceLedger, SourceObservation, Timestamp
)
from story_engine.verification import VerifiedSourceRegistry


# =============================================================================
# FIXED TIMESTAMPS (deterministic)
# =============================================================================

EPOCH = datetime(2026, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
T1 = datetime(2026, 1, 1, 10, 0, 0, tzinfo=timezone.utc)
T2 = datetime(2026, 1, 1, 10, 5, 0, tzinfo=timezone.utc)
T3 = datetime(2026, 1, 1, 10, 10, 0, tzinfo=timezone.utc)
NOON = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


# =============================================================================
# REGISTRY
# =============================================================================

TEST_REGISTRY = VerifiedSourceRegistry.from_names([
    "Reuters", "Associated Press", "BBC", "The Guardian", "Bloomberg",
])


# =============================================================================
# FACTORIES
# =============================================================================

def make_observation(
    source_name: str,
    published_at: datetime = T1,
    is_primary: bool = False,
    description: Optional[str] = None,
    url: Optional[str] = None
) -> SourceObservation:
    return SourceObservation(
        source_name=source_name,
        published_at=Timestamp(value=published_at),
        is_primary_reporting=is_primary,
        source_url=url,
        description=description,
    )


def make_ledger(
    source_names: Sequence[str],
    story_id: str = "story_001",
    start: datetime = T1,
    step_minutes: int = 5,
    primary: Sequence[str] = (),
    is_stable_narrative: bool = True
) -> SourceLedger:
    """Ledger with one observation per name, step_minutes apart."""
    ledger = SourceLedger(story_id=story_id, is_stable_narrative=is_stable_narrative)
    for i, name in enumerate(source_names):
        ledger = ledger.append(make_observation(
            name,
            published_at=start + timedelta(minutes=i * step_minutes),
            is_primary=name in primary,
        ))
    return ledger


def make_contradiction(first: str = "Reuters", second: str = "Daily Rumour") -> ContradictionFlag:
    return ContradictionFlag(
        first_source=first,
        second_source=second,
        reason="Conflicting casualty figures",
        flagged_at=Timestamp(value=T3),
    )
