"""테스트 자산(데이터) 레이어

규칙:
- 로직 없음 (단순 dict/list/primitive)
- DB/네트워크 의존 없음
"""

from .venues import COUNTRIES, CITIES, VENUES
from .slug_cases import NORMALIZE_CASES

__all__ = [
    "COUNTRIES",
    "CITIES",
    "VENUES",
    "NORMALIZE_CASES",
]
