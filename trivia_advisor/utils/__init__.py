"""Utilities package"""

# Hash utilities
from .hash_utils import hash_string, generate_match_cache_key

# Slug utilities
from .slug import (
    normalize_slug,
    strip_numeric_suffix,
    extract_venue_from_event_pattern,
    clean_special_chars,
    calculate_confidence,
    common_prefix_ratio,
    jaro_similarity,
)

__all__ = [
    "hash_string",
    "generate_match_cache_key",
    "normalize_slug",
    "strip_numeric_suffix",
    "extract_venue_from_event_pattern",
    "clean_special_chars",
    "calculate_confidence",
    "common_prefix_ratio",
    "jaro_similarity",
]
