"""Candidate Retriever - 장소 카탈로그에서 후보 수집

여러 전략(부분 일치/원본 부분 일치/첫 단어 접두사)으로 후보를 모아
id 기준으로 중복을 제거합니다. 모든 쿼리는 건수 제한이 있습니다.
"""

from __future__ import annotations

import re
from typing import Any, List, Protocol

from trivia_advisor.core.logging import logger, sanitize_for_log

QUERY_LIMIT = 20
MAX_CANDIDATES = 50
# 이보다 짧은 검색어는 지나치게 넓은 LIKE 쿼리가 되므로 건너뜀
MIN_PATTERN_LENGTH = 3

_TOKEN_SPLIT_RE = re.compile(r"[\s-]+")


class VenueCatalog(Protocol):
    """매처가 사용하는 읽기 전용 카탈로그 인터페이스 (VenueRepository가 구현)"""

    def get_by_slug(self, slug: str) -> Any: ...

    def find_by_slug_contains(self, fragment: str, limit: int = QUERY_LIMIT) -> List[Any]: ...

    def find_by_slug_prefix(self, prefix: str, limit: int = QUERY_LIMIT) -> List[Any]: ...


def first_token(slug: str) -> str:
    """하이픈/공백으로 구분된 첫 단어"""
    for token in _TOKEN_SPLIT_RE.split(slug):
        if token:
            return token
    return ""


class CandidateRetriever:
    """후보 장소 수집기"""

    def __init__(self, catalog: VenueCatalog):
        self.catalog = catalog

    def retrieve(self, normalized_slug: str, original_slug: str) -> List[Any]:
        """정규화/원본 슬러그로 후보 장소를 모읍니다.

        1. 슬러그에 정규화 슬러그가 포함된 장소 (최대 20)
        2. 슬러그에 원본 슬러그가 포함된 장소 (최대 20, 정규화가 과했던 경우 대비)
        3. 첫 단어가 3자 이상이면 그 단어로 시작하는 장소 (최대 20)

        Returns:
            id 기준 중복 제거, 먼저 나온 순서 유지, 최대 50개
        """
        batches: List[List[Any]] = []

        if len(normalized_slug) >= MIN_PATTERN_LENGTH:
            batches.append(self.catalog.find_by_slug_contains(normalized_slug, limit=QUERY_LIMIT))

        if len(original_slug) >= MIN_PATTERN_LENGTH:
            batches.append(self.catalog.find_by_slug_contains(original_slug, limit=QUERY_LIMIT))

        token = first_token(normalized_slug)
        if len(token) >= MIN_PATTERN_LENGTH:
            batches.append(self.catalog.find_by_slug_prefix(token, limit=QUERY_LIMIT))

        seen: set[Any] = set()
        candidates: List[Any] = []
        for batch in batches:
            for venue in batch:
                if venue.id in seen:
                    continue
                seen.add(venue.id)
                candidates.append(venue)
                if len(candidates) >= MAX_CANDIDATES:
                    break
            if len(candidates) >= MAX_CANDIDATES:
                break

        logger.debug(
            f"[candidates] {len(candidates)} candidates for "
            f"'{sanitize_for_log(normalized_slug)}' (queries={len(batches)})"
        )
        return candidates
