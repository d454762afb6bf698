"""Venue slug package.

레거시(V1) URL 슬러그 정규화와 장소 슬러그 유사도 점수.
"""

from .normalize import (
    clean_special_chars,
    extract_venue_from_event_pattern,
    normalize_slug,
    strip_numeric_suffix,
)
from .similarity import calculate_confidence, common_prefix_ratio, jaro_similarity

__all__ = [
    "normalize_slug",
    "strip_numeric_suffix",
    "extract_venue_from_event_pattern",
    "clean_special_chars",
    "calculate_confidence",
    "common_prefix_ratio",
    "jaro_similarity",
]
