"""
퀴즈/레슨 도메인 오류 — 순수 파이썬
"""
from __future__ import annotations

from academy.domain.shared.errors import ConflictError, InvalidInputError, NotFoundError


class QuizNotFound(NotFoundError):
    code = "QUIZ_NOT_FOUND"
    default_message = "퀴즈를 찾을 수 없습니다."


class LessonNotFound(NotFoundError):
    code = "LESSON_NOT_FOUND"
    default_message = "레슨을 찾을 수 없습니다."


class LessonReferenced(ConflictError):
    """레슨을 참조하는 퀴즈가 남아 있으면 삭제 불가."""
    code = "LESSON_REFERENCED"
    default_message = "이 레슨을 참조하는 퀴즈가 있어 삭제할 수 없습니다."


class InvalidQuestionSet(InvalidInputError):
    code = "INVALID_QUESTION_SET"
    default_message = "문항 구성이 올바르지 않습니다."
