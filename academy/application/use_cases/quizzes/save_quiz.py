"""
퀴즈 생성/수정 Use Case — 문항 세트는 항상 "전부 삭제 후 전부 삽입"

트랜잭션 경계는 UoW. 검증 실패 / 레슨 없음 / 퀴즈 없음 시
아무것도 쓰지 않은 상태로 rollback 된다.
"""
from __future__ import annotations

import logging
from typing import Optional

from academy.application.ports.unit_of_work import UnitOfWork
from academy.domain.quizzes.entities import MAX_OPTIONS, MIN_OPTIONS, QuizDraft
from academy.domain.quizzes.errors import InvalidQuestionSet, LessonNotFound, QuizNotFound

logger = logging.getLogger(__name__)


def validate_draft(draft: QuizDraft) -> None:
    """직렬화 계층 검증과 별개로 도메인 불변식만 다시 확인."""
    if not draft.questions:
        raise InvalidQuestionSet("퀴즈에는 최소 1개의 문항이 필요합니다.")

    for pos, q in enumerate(draft.questions, start=1):
        n = len(q.options or [])
        if n < MIN_OPTIONS or n > MAX_OPTIONS:
            raise InvalidQuestionSet(
                f"{pos}번 문항: 보기는 {MIN_OPTIONS}~{MAX_OPTIONS}개여야 합니다."
            )
        if not (0 <= int(q.correct_index) < n):
            raise InvalidQuestionSet(f"{pos}번 문항: 정답 인덱스가 보기 범위를 벗어났습니다.")
        if int(q.points) < 1:
            raise InvalidQuestionSet(f"{pos}번 문항: 배점은 1 이상이어야 합니다.")


def create_quiz(uow: UnitOfWork, draft: QuizDraft, *, created_by_id: Optional[int]) -> int:
    validate_draft(draft)

    with uow:
        if draft.lesson_id is not None and not uow.quizzes.lesson_exists(draft.lesson_id):
            raise LessonNotFound()

        quiz_id = uow.quizzes.create(draft, created_by_id)
        uow.quizzes.replace_questions(quiz_id, list(draft.questions))

    logger.info("quiz created: quiz_id=%s questions=%s", quiz_id, len(draft.questions))
    return quiz_id


def replace_quiz(uow: UnitOfWork, quiz_id: int, draft: QuizDraft) -> int:
    validate_draft(draft)

    with uow:
        if not uow.quizzes.exists(quiz_id):
            raise QuizNotFound()
        if draft.lesson_id is not None and not uow.quizzes.lesson_exists(draft.lesson_id):
            raise LessonNotFound()

        uow.quizzes.update(quiz_id, draft)
        uow.quizzes.replace_questions(quiz_id, list(draft.questions))

    logger.info("quiz replaced: quiz_id=%s questions=%s", quiz_id, len(draft.questions))
    return quiz_id
