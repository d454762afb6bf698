"""Legacy venue slug normalization."""

from __future__ import annotations

import re
import string

# 하이픈 + 7자리 이상 숫자 (V1 타임스탬프/ID 접미사). 연도(2024) 같은 짧은 숫자는 유지
_NUMERIC_SUFFIX_RE = re.compile(r"-\d{7,}$")
_INVALID_CHARS_RE = re.compile(r"[^a-z0-9-]")
_HYPHEN_RUN_RE = re.compile(r"-+")

_EVENT_MARKER = "-at-"

# ASCII만 소문자화 (비ASCII 문자는 어차피 하이픈으로 치환되며, 길이가 늘지 않아야 함)
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def strip_numeric_suffix(slug: str) -> str:
    """숫자 ID 접미사 제거

    예시:
    - "albion-hotel-1759813035" -> "albion-hotel"
    - "venue-2024" -> "venue-2024" (7자리 미만은 유지)
    """
    return _NUMERIC_SUFFIX_RE.sub("", slug)


def extract_venue_from_event_pattern(slug: str) -> str:
    """이벤트형 슬러그에서 장소명 추출

    예시:
    - "00s-quiz-vol-1-at-border-city-ale-house" -> "border-city-ale-house"
    - "atlantic-hotel" -> "atlantic-hotel" ('-at-' 없음)

    마지막 '-at-' 뒤를 장소명으로 봅니다. 뒤에 아무것도 없으면 원본 유지.
    """
    _, marker, tail = slug.rpartition(_EVENT_MARKER)
    if not marker or not tail:
        return slug
    return tail


def clean_special_chars(slug: str) -> str:
    """허용 문자(a-z, 0-9, -) 외에는 하이픈으로 치환, 연속 하이픈 축약, 양끝 하이픈 제거"""
    cleaned = _INVALID_CHARS_RE.sub("-", slug)
    cleaned = _HYPHEN_RUN_RE.sub("-", cleaned)
    return cleaned.strip("-")


def _normalize_once(slug: str) -> str:
    value = slug.strip().translate(_ASCII_LOWER)
    value = strip_numeric_suffix(value)
    value = extract_venue_from_event_pattern(value)
    return clean_special_chars(value)


def normalize_slug(slug: str) -> str:
    """레거시 URL 슬러그를 현재 장소 슬러그 형태로 정규화합니다.

    📋 단계 (순서대로):
    1. 소문자화 + 공백 제거
    2. 숫자 ID 접미사 제거
    3. 이벤트 문구("...-at-장소명")에서 장소명 추출
    4. 특수문자 정리

    정리 단계가 새 패턴을 드러낼 수 있으므로(예: "foo-1234567.." -> "foo-1234567")
    결과가 더 이상 바뀌지 않을 때까지 반복합니다. 따라서 멱등이며,
    결과는 입력보다 길어지지 않습니다.

    Args:
        slug: URL 경로의 원본 슬러그

    Returns:
        정규화된 슬러그 (빈 입력이면 빈 문자열)
    """
    if not slug:
        return ""

    current = _normalize_once(slug)
    while True:
        again = _normalize_once(current)
        if again == current:
            return current
        current = again
