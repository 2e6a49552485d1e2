"""
Ledger Aggregation Layer

RESPONSIBILITY: Derive a ConfidenceInput from a story's SourceLedger
ALLOWED INPUTS: SourceLedger, an injected reference time
OUTPUTS: Result carrying a ConfidenceInput or an explicit Error

WHAT THIS LAYER MUST NOT DO:
============================
- Read a clock
- Detect contradictions or narrative drift itself (signals are pluggable)
- Classify state or confidence (that is the core layer)

Producers that build a ConfidenceInput without a ledger can still check it
with validate_confidence_input before handing it to the engine.
"""

from __future__ import annotations
from typing import Callable, Optional
import logging
import math

from ..contracts.base import Error, ErrorCode, Result, Timestamp
from ..contracts.ledger import SourceLedger
from ..contracts.signals import ConfidenceInput
from ..verification import VerifiedSourceRegistry, default_registry
from .temporal import (
    DEFAULT_FUTURE_TOLERANCE_MINUTES, TimestampConsistency,
    age_minutes, check_timestamp_consistency, chronological,
    first_published, last_published,
)

logger = logging.getLogger(__name__)

LedgerSignal = Callable[[SourceLedger], bool]


def flagged_contradictions(ledger: SourceLedger) -> bool:
    """Default contradiction signal: any flag recorded on the ledger."""
    return ledger.has_contradictions


def recorded_stability(ledger: SourceLedger) -> bool:
    """Default narrative-stability signal: the flag recorded on the ledger."""
    return ledger.is_stable_narrative


class LedgerAggregator:
    """
    Derives engine signals from a Source Ledger.

    contradiction_signal and stability_signal are the hooks for the external
    clustering/review process; by default they read the ledger's own flags.
    """

    def __init__(
        self,
        registry: Optional[VerifiedSourceRegistry] = None,
        contradiction_signal: LedgerSignal = flagged_contradictions,
        stability_signal: LedgerSignal = recorded_stability,
        future_tolerance_minutes: float = DEFAULT_FUTURE_TOLERANCE_MINUTES
    ):
        self._registry = registry or default_registry()
        self._contradiction_signal = contradiction_signal
        self._stability_signal = stability_signal
        self._future_tolerance_minutes = future_tolerance_minutes

    @property
    def registry(self) -> VerifiedSourceRegistry:
        return self._registry

    def aggregate(
        self,
        ledger: SourceLedger,
        reference_time: Optional[Timestamp] = None
    ) -> Result:
        """
        Build the ConfidenceInput for a ledger.

        Without a reference_time the story's age is unknown and
        age_minutes is infinite.
        """
        if ledger.is_empty:
            return Result.failure(Error(
                code=ErrorCode.EMPTY_LEDGER,
                message="Story has no source observations",
                context=(("story_id", ledger.story_id),)
            ))

        observations = ledger.observations

        if reference_time is None:
            age = math.inf
        else:
            consistency = check_timestamp_consistency(
                observations, reference_time, self._future_tolerance_minutes
            )
            if not consistency.is_consistent:
                logger.warning(
                    "Story %s has %d future-dated observation(s) relative to %s: %s",
                    ledger.story_id,
                    len(consistency.future_dated),
                    reference_time.to_iso(),
                    ", ".join(o.source_name for o in consistency.future_dated)
                )
            age = age_minutes(first_published(observations), reference_time)

        signals = ConfidenceInput(
            source_count=len(observations),
            verified_source_count=self._registry.count_verified(ledger.source_names),
            has_primary_reporting=any(o.is_primary_reporting for o in observations),
            has_contradictions=bool(self._contradiction_signal(ledger)),
            age_minutes=age,
            is_stable_narrative=bool(self._stability_signal(ledger)),
        )
        logger.debug("Aggregated story %s: %s", ledger.story_id, signals)
        return Result.success(signals)


def validate_confidence_input(signals: ConfidenceInput) -> Result:
    """
    Check the data-model invariants of a ConfidenceInput.

    The engine does not call this; it classifies whatever it is given.
    """
    if signals.source_count < 1:
        return Result.failure(Error(
            code=ErrorCode.INVALID_SOURCE_COUNT,
            message="source_count must be at least 1",
            context=(("source_count", str(signals.source_count)),)
        ))
    if signals.verified_source_count < 0:
        return Result.failure(Error(
            code=ErrorCode.NEGATIVE_VERIFIED_COUNT,
            message="verified_source_count must not be negative",
            context=(("verified_source_count", str(signals.verified_source_count)),)
        ))
    if signals.verified_source_count > signals.source_count:
        return Result.failure(Error(
            code=ErrorCode.VERIFIED_EXCEEDS_TOTAL,
            message="verified_source_count exceeds source_count",
            context=(
                ("source_count", str(signals.source_count)),
                ("verified_source_count", str(signals.verified_source_count)),
            )
        ))
    if math.isnan(signals.age_minutes) or signals.age_minutes < 0:
        return Result.failure(Error(
            code=ErrorCode.INVALID_AGE,
            message="age_minutes must be a non-negative number or infinity",
            context=(("age_minutes", str(signals.age_minutes)),)
        ))
    return Result.success(signals)


__all__ = [
    'LedgerAggregator', 'LedgerSignal',
    'flagged_contradictions', 'recorded_stability', 'validate_confidence_input',
    'TimestampConsistency', 'age_minutes', 'check_timestamp_consistency',
    'chronological', 'first_published', 'last_published',
]
