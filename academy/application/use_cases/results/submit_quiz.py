"""
퀴즈 제출 Use Case — 도메인/포트만 사용 (Django 미사용)

🔥 한 번의 UoW(트랜잭션) 안에서
  1) 퀴즈 + 문항 로드 (없으면 QuizNotFound)
  2) (user, quiz) 결과 존재 여부 확인 (있으면 AlreadyCompleted)
  3) 채점
  4) Result 1행 삽입
예외가 나면 UoW가 rollback 하므로 부분 결과는 절대 남지 않는다.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from academy.application.ports.unit_of_work import UnitOfWork
from academy.domain.quizzes.errors import QuizNotFound
from academy.domain.results.entities import QuizAttempt
from academy.domain.results.errors import AlreadyCompleted
from academy.domain.results.scoring import score_answers

logger = logging.getLogger(__name__)


def _normalize_answers(answers) -> List[Dict[str, Any]]:
    # 저장은 입력 그대로 (순서/중복 유지)
    return [dict(a) for a in (answers or [])]


def submit_quiz(
    uow: UnitOfWork,
    *,
    user_id: int,
    quiz_id: int,
    answers: Optional[List[Dict[str, Any]]],
    now: Optional[datetime] = None,
) -> QuizAttempt:
    if now is None:
        now = datetime.now(timezone.utc)

    payload = _normalize_answers(answers)

    with uow:
        quiz = uow.quizzes.get_with_questions(quiz_id)
        if quiz is None:
            raise QuizNotFound()

        if uow.results.exists_for(user_id, quiz.id):
            logger.info("quiz already completed: user_id=%s quiz_id=%s", user_id, quiz.id)
            raise AlreadyCompleted()

        outcome = score_answers(quiz.questions, payload)

        attempt = uow.results.add(
            user_id=user_id,
            quiz_id=quiz.id,
            score=outcome.score,
            total_points=outcome.total_points,
            answers=payload,
            completed_at=now,
        )

    logger.info(
        "quiz submitted: result_id=%s user_id=%s quiz_id=%s score=%s/%s",
        attempt.id,
        user_id,
        quiz.id,
        outcome.score,
        outcome.total_points,
    )
    return replace(attempt, quiz_title=quiz.title)
