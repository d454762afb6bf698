"""Venue slug confidence scoring."""

from __future__ import annotations

from rapidfuzz.distance import Jaro

from .normalize import normalize_slug

# 가중치 (경험적으로 튜닝된 값, 합계가 1.0을 넘으므로 최종 점수는 1.0으로 캡)
EXACT_MATCH_BONUS = 0.40
PREFIX_EXTENSION_BONUS = 0.25
JARO_WEIGHT = 0.20
BEST_JARO_WEIGHT = 0.05
COMMON_PREFIX_WEIGHT = 0.15
CONTAINMENT_BONUS = 0.10

MAX_CONFIDENCE = 1.0


def jaro_similarity(a: str, b: str) -> float:
    """Jaro 유사도 (0.0~1.0)"""
    return float(Jaro.similarity(a, b))


def common_prefix_ratio(a: str, b: str) -> float:
    """공통 접두사 길이 / 짧은 문자열 길이

    예시:
    - ("phoenix", "phoenix") -> 1.0
    - ("phoen", "phoenix") -> 1.0
    - ("abc", "xyz") -> 0.0
    """
    min_len = min(len(a), len(b))
    if min_len == 0:
        return 0.0

    prefix_len = 0
    for ch_a, ch_b in zip(a, b):
        if ch_a != ch_b:
            break
        prefix_len += 1

    return prefix_len / min_len


def calculate_confidence(venue_slug: str, original_slug: str, normalized_slug: str) -> float:
    """후보 장소 슬러그와 검색 슬러그의 매칭 신뢰도 (0.0~1.0)

    점수 구성 (가산):
    - 정규화 후 완전 일치: +0.40
    - 후보가 검색어로 시작 (검색어 + 구분 접미사): +0.25
    - Jaro(후보, 정규화 슬러그) x 0.20
    - max(Jaro vs 정규화, Jaro vs 원본) x 0.05
    - 공통 접두사 비율 x 0.15
    - 한쪽이 다른 쪽을 포함: +0.10

    오타보다 "같은 장소명 + 다른 접미사"가 실제 실패 유형의 대부분이므로
    접두사/포함 관계에 가중치를 둡니다.

    Args:
        venue_slug: 후보 장소의 현재 슬러그
        original_slug: 요청 URL의 원본 슬러그
        normalized_slug: normalize_slug(original_slug)

    Returns:
        1.0으로 캡된 신뢰도
    """
    venue_normalized = normalize_slug(venue_slug)
    score = 0.0

    # 1. 정규화 후 완전 일치
    if venue_normalized == normalized_slug or venue_slug == normalized_slug:
        score += EXACT_MATCH_BONUS

    # 2. 검색어 + 접미사 형태
    extended = normalized_slug + "-"
    if (
        venue_slug.startswith(extended)
        or venue_normalized.startswith(extended)
        or (venue_slug.startswith(normalized_slug) and venue_slug != normalized_slug)
    ):
        score += PREFIX_EXTENSION_BONUS

    # 3. Jaro (정규화 슬러그 기준)
    jaro_normalized = jaro_similarity(venue_slug, normalized_slug)
    score += jaro_normalized * JARO_WEIGHT

    # 4. 원본 슬러그가 더 가까운 경우 보정
    jaro_original = jaro_similarity(venue_slug, original_slug)
    score += max(jaro_normalized, jaro_original) * BEST_JARO_WEIGHT

    # 5. 공통 접두사 비율
    score += common_prefix_ratio(venue_slug, normalized_slug) * COMMON_PREFIX_WEIGHT

    # 6. 포함 관계
    if normalized_slug in venue_slug or venue_slug in normalized_slug:
        score += CONTAINMENT_BONUS

    return min(score, MAX_CONFIDENCE)
