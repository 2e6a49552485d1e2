"""
Verified-Source Classifier

Decides whether an outlet counts as "verified" (a trusted primary news
organisation) for confidence scoring.

The allow-list is configuration, not code: it is loaded from
verified_sources.json (or a path given explicitly / via
STORY_ENGINE_VERIFIED_SOURCES) and injected into whoever needs it.

Matching is a case-insensitive substring test, so bylines such as
"Reuters via Yahoo News" classify as verified.
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import FrozenSet, Iterable, Optional, Union
import json
import logging
import os

logger = logging.getLogger(__name__)

ENV_ALLOW_LIST_PATH = "STORY_ENGINE_VERIFIED_SOURCES"
DEFAULT_ALLOW_LIST_PATH = Path(__file__).parent / "verified_sources.json"


def _canonical(name: str) -> str:
    return " ".join(name.lower().split())


@dataclass(frozen=True)
class VerifiedSourceRegistry:
    """
    Immutable allow-list of canonical outlet names.

    Names are stored lower-cased with collapsed whitespace.
    """
    names: FrozenSet[str]

    @classmethod
    def from_names(cls, names: Iterable[str]) -> VerifiedSourceRegistry:
        canonical = frozenset(_canonical(n) for n in names if n and n.strip())
        return cls(names=canonical)

    @classmethod
    def load(cls, config_path: Optional[Union[str, Path]] = None) -> VerifiedSourceRegistry:
        """
        Load registry from a JSON allow-list.

        Accepts either {"sources": {"<category>": [names...]}} or
        {"sources": [names...]}.
        """
        if config_path is None:
            config_path = os.environ.get(ENV_ALLOW_LIST_PATH) or DEFAULT_ALLOW_LIST_PATH

        with open(config_path, 'r', encoding='utf-8') as f:
            config = json.load(f)

        if not isinstance(config, dict) or 'sources' not in config:
            raise ValueError(f"Allow-list {config_path} has no 'sources' entry")

        sources = config['sources']
        if isinstance(sources, dict):
            groups = list(sources.values())
        elif isinstance(sources, list):
            groups = [sources]
        else:
            raise ValueError(f"Allow-list {config_path}: 'sources' must be a list or mapping")

        names = []
        for group in groups:
            if not isinstance(group, list) or not all(isinstance(n, str) for n in group):
                raise ValueError(f"Allow-list {config_path}: every group must be a list of strings")
            names.extend(group)

        registry = cls.from_names(names)
        logger.info("Loaded %d verified outlets from %s", len(registry), config_path)
        return registry

    def is_verified(self, source_name: Optional[str]) -> bool:
        """True if any canonical name is contained in source_name."""
        if not source_name:
            return False
        lowered = _canonical(source_name)
        return any(name in lowered for name in self.names)

    def count_verified(self, source_names: Iterable[Optional[str]]) -> int:
        return sum(1 for name in source_names if self.is_verified(name))

    def extend(self, names: Iterable[str]) -> VerifiedSourceRegistry:
        """Return a new registry with additional outlets."""
        return VerifiedSourceRegistry(names=self.names | VerifiedSourceRegistry.from_names(names).names)

    def __len__(self) -> int:
        return len(self.names)

    def __contains__(self, source_name: object) -> bool:
        return isinstance(source_name, str) and self.is_verified(source_name)


@lru_cache(maxsize=1)
def default_registry() -> VerifiedSourceRegistry:
    """Registry loaded once from the default configuration."""
    return VerifiedSourceRegistry.load()


def is_verified_source(source_name: Optional[str]) -> bool:
    """Classify an outlet name against the default allow-list."""
    return default_registry().is_verified(source_name)


__all__ = [
    'VerifiedSourceRegistry', 'default_registry', 'is_verified_source',
    'DEFAULT_ALLOW_LIST_PATH', 'ENV_ALLOW_LIST_PATH',
]
