"""
Engine Facade

The single entry point combining the state and confidence rules into one
ConfidenceResult, so callers invoke one function per story update.

DESIGN PRINCIPLES:
==================
1. evaluate() is a pure function of its ConfidenceInput
2. No I/O, no clock, no shared mutable state: safe from any thread
3. Configuration (thresholds, allow-list) is fixed at construction
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional
import logging
import os

from .contracts.base import Result, Timestamp
from .contracts.ledger import SourceLedger
from .contracts.signals import ConfidenceInput, ConfidenceResult
from .core.rules import (
    ConfidenceThresholds, build_confidence_rules, build_state_rules,
    classify_confidence, classify_state,
)
from .ledger import LedgerAggregator
from .verification import VerifiedSourceRegistry, ENV_ALLOW_LIST_PATH

logger = logging.getLogger(__name__)


@dataclass
class EngineConfig:
    """Unified configuration for the engine."""
    thresholds: ConfidenceThresholds = None
    verified_sources_path: Optional[str] = None

    def __post_init__(self):
        self.thresholds = self.thresholds or ConfidenceThresholds()

    @classmethod
    def from_env(cls) -> EngineConfig:
        """Configuration with the allow-list path taken from the environment."""
        return cls(verified_sources_path=os.environ.get(ENV_ALLOW_LIST_PATH) or None)


class StoryConfidenceEngine:
    """
    Story Confidence & State Engine.

    GUARANTEES:
    ===========
    1. evaluate(x) == evaluate(x) for identical input
    2. No hidden state between calls
    3. Never raises on degenerate input
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        registry: Optional[VerifiedSourceRegistry] = None,
        aggregator: Optional[LedgerAggregator] = None
    ):
        self._config = config or EngineConfig()
        self._state_rules = build_state_rules(self._config.thresholds)
        self._confidence_rules = build_confidence_rules(self._config.thresholds)

        if registry is None:
            if aggregator is not None:
                registry = aggregator.registry
            elif self._config.verified_sources_path:
                registry = VerifiedSourceRegistry.load(self._config.verified_sources_path)
        self._aggregator = aggregator or LedgerAggregator(registry=registry)

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def registry(self) -> VerifiedSourceRegistry:
        return self._aggregator.registry

    def evaluate(self, signals: ConfidenceInput) -> ConfidenceResult:
        """Classify a story's signals into a state and a confidence grade."""
        state_rule = classify_state(signals, self._state_rules)
        confidence_rule = classify_confidence(signals, self._confidence_rules)

        result = ConfidenceResult(
            level=confidence_rule.level,
            explanation=confidence_rule.explanation,
            story_state=state_rule.state,
            is_single_source=signals.is_single_source,
            state_rule=state_rule.name,
            confidence_rule=confidence_rule.name,
            source_count=signals.source_count,
            verified_source_count=signals.verified_source_count,
            has_contradictions=signals.has_contradictions,
        )
        logger.debug(
            "Evaluated %s -> %s/%s (rules %s, %s)",
            signals, result.level.value, result.story_state.value,
            state_rule.name, confidence_rule.name
        )
        return result

    def evaluate_ledger(
        self,
        ledger: SourceLedger,
        reference_time: Optional[Timestamp] = None
    ) -> Result:
        """
        Aggregate a ledger and evaluate it.

        Returns Result carrying the ConfidenceResult, or the aggregation
        Error (e.g. EMPTY_LEDGER).
        """
        aggregated = self._aggregator.aggregate(ledger, reference_time)
        if aggregated.is_failure:
            logger.info(
                "Skipping evaluation of story %s: %s",
                ledger.story_id, aggregated.error.code.name
            )
            return aggregated
        return Result.success(self.evaluate(aggregated.value))


@lru_cache(maxsize=1)
def default_engine() -> StoryConfidenceEngine:
    return StoryConfidenceEngine()


def calculate_confidence(signals: ConfidenceInput) -> ConfidenceResult:
    """Evaluate signals with the default thresholds and allow-list."""
    return default_engine().evaluate(signals)
