"""
Source Ledger Contracts

The per-story record of which outlets reported it, supplied by the external
ingestion/clustering process. The engine only reads it.

BOUNDARY ENFORCEMENT:
=====================
- Append-only: every mutation returns a NEW ledger
- Verification status is derived, never stored on an observation
- Contradictions and narrative stability are flagged upstream; this layer
  records them and does not detect them
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from .base import Timestamp


@dataclass(frozen=True)
class SourceObservation:
    """One outlet's report of a story."""
    source_name: str
    published_at: Timestamp
    is_primary_reporting: bool = False
    source_url: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.source_name, str):
            raise ValueError("source_name must be a string")
        if not isinstance(self.published_at, Timestamp):
            raise ValueError("published_at must be a Timestamp")


@dataclass(frozen=True)
class ContradictionFlag:
    """
    Two outlets whose accounts of the story were flagged as materially
    conflicting by the clustering/review process.
    """
    first_source: str
    second_source: str
    reason: str
    flagged_at: Timestamp

    def __post_init__(self):
        if not isinstance(self.first_source, str) or not isinstance(self.second_source, str):
            raise ValueError("ContradictionFlag source names must be strings")
        if not self.first_source or not self.second_source:
            raise ValueError("ContradictionFlag requires both source names")
        if not isinstance(self.flagged_at, Timestamp):
            raise ValueError("flagged_at must be a Timestamp")


@dataclass(frozen=True)
class SourceLedger:
    """
    Immutable set of observations attached to one story.

    Observations keep insertion order; chronological views are derived
    (see story_engine.ledger.temporal).
    """
    story_id: str
    observations: Tuple[SourceObservation, ...] = field(default_factory=tuple)
    contradictions: Tuple[ContradictionFlag, ...] = field(default_factory=tuple)
    is_stable_narrative: bool = True

    def __post_init__(self):
        if not self.story_id or not isinstance(self.story_id, str):
            raise ValueError("story_id must be a non-empty string")

    @property
    def is_empty(self) -> bool:
        return len(self.observations) == 0

    @property
    def has_contradictions(self) -> bool:
        return len(self.contradictions) > 0

    @property
    def source_names(self) -> Tuple[str, ...]:
        return tuple(o.source_name for o in self.observations)

    def append(self, observation: SourceObservation) -> SourceLedger:
        """Return new ledger with the observation added."""
        return replace(self, observations=self.observations + (observation,))

    def flag_contradiction(self, flag: ContradictionFlag) -> SourceLedger:
        """Return new ledger with the contradiction recorded."""
        return replace(self, contradictions=self.contradictions + (flag,))

    def with_narrative_stability(self, is_stable: bool) -> SourceLedger:
        return replace(self, is_stable_narrative=is_stable)
