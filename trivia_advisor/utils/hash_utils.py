"""해싱 유틸리티"""
import hashlib


def hash_string(text: str) -> str:
    """
    문자열을 MD5 해시로 변환

    Args:
        text: 해시할 문자열

    Returns:
        MD5 해시 문자열
    """
    return hashlib.md5(text.encode("utf-8")).hexdigest()


def generate_match_cache_key(missing_slug: str) -> str:
    """
    원본(정규화 전) 슬러그로 매칭 결과 캐시 키 생성

    Args:
        missing_slug: 요청 URL의 원본 슬러그

    Returns:
        캐시 키
    """
    return f"venue_match:{hash_string(missing_slug)}"
