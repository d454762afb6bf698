"""Trivia Advisor - 읽기 전용 퀴즈 장소 서비스"""

__version__ = "1.0.0"
