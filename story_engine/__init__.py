"""
Story Confidence & State Engine

Turns the per-source observations of a news story into a lifecycle state
and a confidence grade. The engine is a pure function of the signals it is
given; every result is a projection recoverable from the story's ledger.

LAYER STRUCTURE:
================

1. CONTRACTS (contracts/)
   - Immutable data crossing every boundary: SourceLedger, ConfidenceInput,
     ConfidenceResult, Error/Result

2. VERIFICATION (verification/)
   - Responsibility: Verified-outlet allow-list membership
   - Allow-list is configuration (JSON), injected at construction

3. LEDGER AGGREGATION (ledger/)
   - Responsibility: SourceLedger + reference time -> ConfidenceInput
   - MUST NOT: Read a clock, detect contradictions itself

4. CORE RULES (core/)
   - Responsibility: Ordered state and confidence rules
   - MUST NOT: Validate input, emit RESOLVED

5. ENGINE FACADE (engine.py)
   - One call per story update, no shared mutable state

6. CONSUMER MAPPINGS (api/, alerting/, presentation/)
   - Public read API serialization, verified-source alert threshold,
     badge view models

CONSTRAINTS ENFORCED:
=====================
- Immutability-first: all contracts are frozen dataclasses
- Deterministic: identical input always yields an identical result
- Explicit errors: rejected input is returned as Error data
- Reliability, not truth: confidence never adjudicates what happened
"""

from .contracts import (
    ConfidenceInput, ConfidenceLevel, ConfidenceResult, ContradictionFlag,
    Error, ErrorCode, Result, SourceLedger, SourceObservation, StoryState,
    Timestamp,
)
from .engine import EngineConfig, StoryConfidenceEngine, calculate_confidence
from .verification import VerifiedSourceRegistry, is_verified_source

__version__ = "0.1.0"

__all__ = [
    'ConfidenceInput', 'ConfidenceLevel', 'ConfidenceResult', 'ContradictionFlag',
    'Error', 'ErrorCode', 'Result', 'SourceLedger', 'SourceObservation', 'StoryState',
    'Timestamp',
    'EngineConfig', 'StoryConfidenceEngine', 'calculate_confidence',
    'VerifiedSourceRegistry', 'is_verified_source',
]
