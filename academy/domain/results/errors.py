"""
결과 도메인 오류 — 순수 파이썬
"""
from __future__ import annotations

from academy.domain.shared.errors import ConflictError, NotFoundError


class AlreadyCompleted(ConflictError):
    """(user, quiz) 당 결과는 1개. 재제출은 덮어쓰지 않고 거부."""
    code = "QUIZ_ALREADY_COMPLETED"
    default_message = "이미 응시를 완료한 퀴즈입니다."


class ResultNotFound(NotFoundError):
    code = "RESULT_NOT_FOUND"
    default_message = "퀴즈 결과를 찾을 수 없습니다."
