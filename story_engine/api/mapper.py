"""
API Mapper
==========

Transforms a story's ledger and its ConfidenceResult into public API
responses. The result is a projection: it is never stored, only rendered.
"""
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence
import html
import re

from ..contracts.base import Timestamp
from ..contracts.ledger import SourceLedger, SourceObservation
from ..contracts.signals import ConfidenceResult, StoryState
from ..ledger.temporal import chronological
from ..verification import VerifiedSourceRegistry, default_registry
from .schemas import (
    SourceResponse, StoryDetailResponse, StoryFeedResponse, StorySummaryResponse
)

DEFAULT_TIMELINE_DESCRIPTION = "Reported this story"
FEED_TIMELINE_ENTRIES = 3

_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class StoryRecord:
    """
    A story as the read API sees it.

    resolved_at is set by editorial action; when present the story is
    rendered as resolved regardless of what the engine computed.
    """
    story_id: str
    headline: str
    ledger: SourceLedger
    summary: Optional[str] = None
    category: Optional[str] = None
    resolved_at: Optional[Timestamp] = None

    @property
    def is_resolved(self) -> bool:
        return self.resolved_at is not None


def sanitize_output(text: Optional[str]) -> str:
    """Decode HTML entities, drop tags and collapse whitespace."""
    if not text:
        return ""
    cleaned = html.unescape(text)
    cleaned = _TAG_RE.sub("", cleaned)
    return _WHITESPACE_RE.sub(" ", cleaned).strip()


def rendered_state(record: StoryRecord, result: ConfidenceResult) -> StoryState:
    return StoryState.RESOLVED if record.is_resolved else result.story_state


def build_timeline(observations: Iterable[SourceObservation]) -> List[str]:
    """Oldest first: "<ISO timestamp>: <source name> - <description>"."""
    return [
        f"{o.published_at.to_api_iso()}: {o.source_name} - "
        f"{sanitize_output(o.description) or DEFAULT_TIMELINE_DESCRIPTION}"
        for o in chronological(observations)
    ]


def build_feed_timeline(observations: Iterable[SourceObservation]) -> List[str]:
    return [
        f"{o.published_at.to_api_iso()}: {o.source_name}"
        for o in chronological(observations)[:FEED_TIMELINE_ENTRIES]
    ]


def map_story_detail(
    record: StoryRecord,
    result: ConfidenceResult,
    registry: Optional[VerifiedSourceRegistry] = None
) -> StoryDetailResponse:
    """
    Map a story and its evaluation to the "get story" response.

    Counts and the contradiction flag come from the evaluated result; the
    registry only marks individual sources as verified and should be the
    one the engine used.
    """
    registry = registry or default_registry()
    ordered = chronological(record.ledger.observations)

    return StoryDetailResponse(
        story_id=record.story_id,
        headline=sanitize_output(record.headline),
        summary=sanitize_output(record.summary),
        state=rendered_state(record, result).value,
        confidence=result.label,
        confidence_explanation=result.explanation,
        sources_count=result.source_count,
        verified_sources_count=result.verified_source_count,
        has_contradictions=result.has_contradictions,
        first_published_at=ordered[0].published_at.to_api_iso() if ordered else None,
        last_updated_at=ordered[-1].published_at.to_api_iso() if ordered else None,
        category=record.category,
        timeline=build_timeline(ordered),
        sources=[
            SourceResponse(
                name=o.source_name,
                url=o.source_url,
                published_at=o.published_at.to_api_iso(),
                is_primary=o.is_primary_reporting,
                is_verified=registry.is_verified(o.source_name),
            )
            for o in ordered
        ],
    )


def map_story_summary(record: StoryRecord, result: ConfidenceResult) -> StorySummaryResponse:
    """Map a story and its evaluation to one "list stories" entry."""
    ordered = chronological(record.ledger.observations)

    return StorySummaryResponse(
        story_id=record.story_id,
        headline=sanitize_output(record.headline),
        state=rendered_state(record, result).value,
        confidence=result.label,
        sources_count=result.source_count,
        verified_sources_count=result.verified_source_count,
        category=record.category,
        first_published_at=ordered[0].published_at.to_api_iso() if ordered else None,
        timeline=build_feed_timeline(ordered),
    )


def filter_by_confidence(
    stories: Iterable[StorySummaryResponse],
    confidence: Optional[str]
) -> List[StorySummaryResponse]:
    """Keep stories whose confidence matches, case-insensitively."""
    if not confidence:
        return list(stories)
    wanted = confidence.strip().lower()
    return [s for s in stories if s.confidence.lower() == wanted]


def map_story_feed(
    records: Sequence[StoryRecord],
    results: Sequence[ConfidenceResult],
    updated_at: Timestamp,
    confidence: Optional[str] = None
) -> StoryFeedResponse:
    """
    Map evaluated stories to the "list stories" response.

    records and results are parallel sequences.
    """
    if len(records) != len(results):
        raise ValueError("records and results must have the same length")
    summaries = [
        map_story_summary(record, result)
        for record, result in zip(records, results)
    ]
    return StoryFeedResponse(
        updated_at=updated_at.to_api_iso(),
        stories=filter_by_confidence(summaries, confidence),
    )
