"""로깅 설정 (Security Enhanced)"""
import logging
import sys
import os
from trivia_advisor.core.config import settings


# Production 환경에서는 DEBUG 로그 비활성화
IS_PRODUCTION = os.getenv("ENVIRONMENT", "development") == "production"


def setup_logging() -> logging.Logger:
    """로거 초기화 및 설정"""

    logger = logging.getLogger("trivia_advisor")

    # Production에서는 최소 INFO 레벨
    log_level = settings.log_level.upper()
    if IS_PRODUCTION and log_level == "DEBUG":
        log_level = "INFO"

    logger.setLevel(getattr(logging, log_level))

    # 콘솔 핸들러
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, log_level))

    # 포맷터
    if IS_PRODUCTION:
        # Production: 최소 정보만
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
    else:
        # Development: 상세 정보
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    console_handler.setFormatter(formatter)

    if not logger.handlers:
        logger.addHandler(console_handler)

    return logger


logger = setup_logging()


def sanitize_for_log(value: str, max_length: int = 100) -> str:
    """로그에 남기기 전에 외부 입력(URL 슬러그 등)을 정리

    - 제어 문자는 로그 위조를 막기 위해 공백으로 치환
    - 민감한 단어가 보이면 통째로 마스킹
    - 길이 초과 시 절단

    Args:
        value: 로깅할 문자열
        max_length: 최대 길이

    Returns:
        정리된 문자열
    """
    if not value:
        return "[empty]"

    result = "".join(ch if ch.isprintable() else " " for ch in value)

    # 민감한 패턴 마스킹
    patterns_to_mask = ('password', 'token', 'api_key', 'secret')
    lowered = result.lower()
    for pattern in patterns_to_mask:
        if pattern in lowered:
            result = '***'
            break

    # 길이 초과 시 절단
    if len(result) > max_length:
        result = result[:max_length] + "..."

    return result
