"""
Public Read API Mapping

Serialization of engine results for the story endpoints. HTTP plumbing is
owned by the serving layer and is not part of this package.
"""

from .mapper import (
    StoryRecord, build_feed_timeline, build_timeline, filter_by_confidence,
    map_story_detail, map_story_feed, map_story_summary, rendered_state,
    sanitize_output,
)
from .schemas import (
    SourceResponse, StoryDetailResponse, StoryFeedResponse, StorySummaryResponse
)

__all__ = [
    'StoryRecord', 'build_feed_timeline', 'build_timeline', 'filter_by_confidence',
    'map_story_detail', 'map_story_feed', 'map_story_summary', 'rendered_state',
    'sanitize_output',
    'SourceResponse', 'StoryDetailResponse', 'StoryFeedResponse', 'StorySummaryResponse',
]
