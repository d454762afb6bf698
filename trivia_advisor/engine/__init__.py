"""Engine Layer - Venue Slug Matching

This module provides the venue slug matching engine:
- VenueMatcher: Main entry point (normalize → exact match → candidates → score → decide)
- CandidateRetriever: Bounded multi-strategy candidate lookup
- MatchOutcome: Standardized result format (redirect / suggestions / no match)
- MatchCacheAdapter: get-or-compute over the result cache
"""

from .cache_adapter import MatchCacheAdapter
from .candidates import CandidateRetriever, VenueCatalog
from .matcher import VenueMatcher
from .result import (
    MAX_SUGGESTIONS,
    REDIRECT_THRESHOLD,
    SUGGESTION_THRESHOLD,
    MatchKind,
    MatchOutcome,
)

__all__ = [
    "VenueMatcher",
    "CandidateRetriever",
    "VenueCatalog",
    "MatchCacheAdapter",
    "MatchOutcome",
    "MatchKind",
    "REDIRECT_THRESHOLD",
    "SUGGESTION_THRESHOLD",
    "MAX_SUGGESTIONS",
]
