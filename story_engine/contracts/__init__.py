"""
Contracts Module

This module defines the explicit data types that cross every boundary of
the engine. No layer may import implementation details from another layer;
all of them share these contracts.

DESIGN PRINCIPLES:
==================
1. All contract types are immutable (frozen dataclasses)
2. Errors are values (Error / Result), not exceptions
3. All timestamps use UTC and are never mutated
"""

from .base import Error, ErrorCode, Result, Timestamp
from .ledger import ContradictionFlag, SourceLedger, SourceObservation
from .signals import ConfidenceInput, ConfidenceLevel, ConfidenceResult, StoryState

__all__ = [
    'Error', 'ErrorCode', 'Result', 'Timestamp',
    'ContradictionFlag', 'SourceLedger', 'SourceObservation',
    'ConfidenceInput', 'ConfidenceLevel', 'ConfidenceResult', 'StoryState',
]
