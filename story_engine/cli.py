"""
Story Evaluation CLI
====================

Evaluate a story ledger stored as JSON and print the "get story" response.

Usage:
    story-engine ledger.json --now 2026-01-01T12:00:00Z
    python -m story_engine ledger.json

Ledger file format:
    {
      "story_id": "...",
      "headline": "...",
      "summary": "...",
      "category": "...",
      "resolved_at": null,
      "is_stable_narrative": true,
      "sources": [
        {"name": "Reuters", "published_at": "2026-01-01T10:00:00Z",
         "is_primary": true, "url": "...", "description": "..."}
      ],
      "contradictions": [
        {"first_source": "A", "second_source": "B", "reason": "...",
         "flagged_at": "2026-01-01T11:00:00Z"}
      ]
    }
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
import argparse
import json
import logging
import sys

from .api.mapper import StoryRecord, map_story_detail
from .contracts.base import Timestamp
from .contracts.ledger import ContradictionFlag, SourceLedger, SourceObservation
from .engine import EngineConfig, StoryConfidenceEngine
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


def _require_dict(value: Any, where: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"{where} must be a JSON object")
    return value


def _list_of_dicts(data: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    items = data.get(key, [])
    if not isinstance(items, list):
        raise ValueError(f"'{key}' must be a list")
    return [_require_dict(item, f"'{key}[{i}]'") for i, item in enumerate(items)]


def _timestamp(data: Dict[str, Any], key: str) -> Timestamp:
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be an ISO 8601 string")
    return Timestamp.from_iso(value)


def _flag(data: Dict[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"'{key}' must be true or false")
    return value


def _optional_str(data: Dict[str, Any], key: str, default: Optional[str] = None) -> Optional[str]:
    value = data.get(key, default)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string")
    return value


def record_from_dict(data: Any) -> StoryRecord:
    """Build a StoryRecord from its JSON form. Raises ValueError/KeyError on bad data."""
    data = _require_dict(data, "ledger")

    observations = tuple(
        SourceObservation(
            source_name=s['name'],
            published_at=_timestamp(s, 'published_at'),
            is_primary_reporting=_flag(s, 'is_primary', False),
            source_url=_optional_str(s, 'url'),
            description=_optional_str(s, 'description'),
        )
        for s in _list_of_dicts(data, 'sources')
    )
    contradictions = tuple(
        ContradictionFlag(
            first_source=c['first_source'],
            second_source=c['second_source'],
            reason=_optional_str(c, 'reason', '') or '',
            flagged_at=_timestamp(c, 'flagged_at'),
        )
        for c in _list_of_dicts(data, 'contradictions')
    )
    ledger = SourceLedger(
        story_id=data['story_id'],
        observations=observations,
        contradictions=contradictions,
        is_stable_narrative=_flag(data, 'is_stable_narrative', True),
    )
    return StoryRecord(
        story_id=data['story_id'],
        headline=_optional_str(data, 'headline', '') or '',
        ledger=ledger,
        summary=_optional_str(data, 'summary'),
        category=_optional_str(data, 'category'),
        resolved_at=_timestamp(data, 'resolved_at') if data.get('resolved_at') is not None else None,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="story-engine",
        description="Evaluate story confidence and state from a source ledger."
    )
    parser.add_argument("ledger", help="Path to a story ledger JSON file")
    parser.add_argument(
        "--now",
        help="Reference time (ISO 8601). Omit to evaluate without recency."
    )
    parser.add_argument(
        "--verified-sources",
        help="Path to a verified-source allow-list JSON file"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else None)

    config = EngineConfig.from_env()
    if args.verified_sources:
        config.verified_sources_path = args.verified_sources
    engine = StoryConfidenceEngine(config)

    try:
        with open(args.ledger, 'r', encoding='utf-8') as f:
            record = record_from_dict(json.load(f))
        reference_time = Timestamp.from_iso(args.now) if args.now else None
    except (OSError, ValueError, KeyError) as e:
        logger.error("Cannot read ledger %s: %s", args.ledger, e)
        return 2

    outcome = engine.evaluate_ledger(record.ledger, reference_time)
    if outcome.is_failure:
        logger.error("%s: %s", outcome.error.code.name, outcome.error.message)
        return 1

    response = map_story_detail(record, outcome.value, engine.registry)
    print(json.dumps(response.model_dump(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
