"""
Public Read API Schemas

Response shapes of the "get story" and "list stories" endpoints.
Routing, CORS, API keys and rate limiting live in the HTTP layer; this
module only fixes what a story looks like on the wire.
"""

from typing import List, Optional

from pydantic import BaseModel


class SourceResponse(BaseModel):
    name: str
    url: Optional[str] = None
    published_at: str
    is_primary: bool = False
    is_verified: bool = False


class StoryDetailResponse(BaseModel):
    story_id: str
    headline: str
    summary: str
    state: str                  # kebab-case, e.g. "single-source"
    confidence: str             # Low | Medium | High
    confidence_explanation: str
    sources_count: int
    verified_sources_count: int
    has_contradictions: bool
    first_published_at: Optional[str] = None
    last_updated_at: Optional[str] = None
    category: Optional[str] = None
    timeline: List[str]
    sources: List[SourceResponse]


class StorySummaryResponse(BaseModel):
    story_id: str
    headline: str
    state: str
    confidence: str
    sources_count: int
    verified_sources_count: int
    category: Optional[str] = None
    first_published_at: Optional[str] = None
    timeline: List[str]


class StoryFeedResponse(BaseModel):
    updated_at: str
    stories: List[StorySummaryResponse]
