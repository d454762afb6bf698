"""
입력 보안 검증
URL 슬러그 / 검색어 검증 함수
"""

from fastapi import Request
from trivia_advisor.core.exceptions import InvalidSlugException
from trivia_advisor.core.logging import logger, sanitize_for_log


class SecurityValidator:
    """입력 보안 검증"""

    MAX_SLUG_LENGTH = 255
    MAX_QUERY_LENGTH = 200

    # 제어 문자 (로그 위조/헤더 주입 방지)
    DANGEROUS_CHARS = ['\0', '\n', '\r', '\t']

    @staticmethod
    def validate_slug(slug: str) -> bool:
        """URL 슬러그 검증

        빈 슬러그는 허용합니다 (매처가 조회 없이 NO_MATCH로 처리).

        Raises:
            InvalidSlugException: 너무 길거나 제어 문자가 포함된 경우
        """
        if len(slug) > SecurityValidator.MAX_SLUG_LENGTH:
            raise InvalidSlugException(
                f"slug must be at most {SecurityValidator.MAX_SLUG_LENGTH} characters"
            )

        for char in SecurityValidator.DANGEROUS_CHARS:
            if char in slug:
                logger.warning(f"슬러그에 제어 문자 감지: {sanitize_for_log(slug)}")
                raise InvalidSlugException("slug contains control characters")

        return True

    @staticmethod
    def validate_query(query: str) -> bool:
        """검색어 검증

        Raises:
            ValueError: 유효하지 않은 입력
        """
        if not query or not query.strip():
            raise ValueError("검색어는 필수입니다")

        if len(query) > SecurityValidator.MAX_QUERY_LENGTH:
            raise ValueError(f"검색어는 {SecurityValidator.MAX_QUERY_LENGTH}자 이하여야 합니다")

        for char in SecurityValidator.DANGEROUS_CHARS:
            if char in query:
                raise ValueError("검색어에 허용되지 않는 문자가 포함되어 있습니다")

        return True


async def log_request(request: Request) -> None:
    """요청 로깅 (민감 정보 제외)

    Args:
        request: FastAPI Request 객체
    """
    method = request.method
    path = sanitize_for_log(request.url.path, max_length=200)

    query_params = {}
    for key, value in request.query_params.items():
        query_params[key] = sanitize_for_log(str(value), max_length=50)

    if query_params:
        logger.debug(f"{method} {path}?{query_params}")
    else:
        logger.debug(f"{method} {path}")
