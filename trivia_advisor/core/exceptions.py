"""커스텀 예외 정의 (Structured Exception Hierarchy)"""
from typing import Any, Optional


# 기본 예외 클래스
class TriviaAdvisorException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# 캐시 관련 예외
class CacheException(TriviaAdvisorException):
    """캐시 관련 예외"""
    def __init__(self, message: str, error_code: str = "CACHE_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "CACHE_ERROR", details)


class CacheConnectionException(CacheException):
    """캐시 연결 실패"""
    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Failed to connect to cache: {reason}"
        super().__init__(message, "CACHE_CONNECTION_ERROR", details)


class CacheSerializationException(CacheException):
    """캐시 직렬화/역직렬화 오류"""
    def __init__(self, operation: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Cache {operation} failed: {reason}"
        super().__init__(message, "CACHE_SERIALIZATION_ERROR",
                        details or {"operation": operation, "reason": reason})


# 데이터베이스 관련 예외
class DatabaseException(TriviaAdvisorException):
    """데이터베이스 관련 예외"""
    def __init__(self, message: str, error_code: str = "DB_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "DB_ERROR", details)


class CatalogUnavailableException(DatabaseException):
    """장소 카탈로그(외부 DB) 조회 불가

    '그런 장소가 없음'(NO_MATCH)과 '지금은 판단할 수 없음'을 구분하기 위해 사용합니다.
    """
    def __init__(self, operation: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Venue catalog unavailable during '{operation}': {reason}"
        super().__init__(message, "CATALOG_UNAVAILABLE",
                        details or {"operation": operation, "reason": reason})


# 유효성 검증 관련 예외
class ValidationException(TriviaAdvisorException):
    """유효성 검증 예외"""
    def __init__(self, field: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Validation failed for '{field}': {reason}"
        super().__init__(message, "VALIDATION_ERROR",
                        details or {"field": field, "reason": reason})


class InvalidSlugException(ValidationException):
    """유효하지 않은 URL 슬러그"""
    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        super().__init__("slug", reason, details)
