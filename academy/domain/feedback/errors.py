"""
피드백 도메인 오류 — 순수 파이썬
"""
from __future__ import annotations

from academy.domain.shared.errors import ConflictError, NotFoundError


class FeedbackExists(ConflictError):
    """(user, lesson) 당 피드백 1개."""
    code = "FEEDBACK_EXISTS"
    default_message = "이미 이 레슨에 피드백을 남겼습니다."


class FeedbackNotFound(NotFoundError):
    code = "FEEDBACK_NOT_FOUND"
    default_message = "피드백을 찾을 수 없습니다."
