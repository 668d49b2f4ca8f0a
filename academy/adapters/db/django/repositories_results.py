"""
Result Repository — Django ORM 구현 (메서드 내부에서만 apps.domains.results import)
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List

from academy.domain.results.entities import QuizAttempt
from academy.domain.results.errors import AlreadyCompleted

logger = logging.getLogger(__name__)


def _model_to_entity(m) -> QuizAttempt:
    return QuizAttempt(
        id=m.id,
        user_id=m.user_id,
        quiz_id=m.quiz_id,
        score=int(m.score or 0),
        total_points=int(m.total_points or 0),
        answers=list(m.answers or []),
        completed_at=m.completed_at,
    )


class DjangoResultRepository:
    """ResultRepository 구현. (user, quiz) unique 는 DB 제약이 최종 판정."""

    def exists_for(self, user_id: int, quiz_id: int) -> bool:
        from apps.domains.results.models import QuizResult
        return QuizResult.objects.filter(user_id=user_id, quiz_id=quiz_id).exists()

    def add(
        self,
        *,
        user_id: int,
        quiz_id: int,
        score: int,
        total_points: int,
        answers: List[Dict[str, Any]],
        completed_at: datetime,
    ) -> QuizAttempt:
        from django.db import IntegrityError, transaction
        from apps.domains.results.models import QuizResult

        # savepoint: 동시 제출로 unique 위반이 나도 바깥 트랜잭션은 살아 있게
        try:
            with transaction.atomic():
                m = QuizResult.objects.create(
                    user_id=user_id,
                    quiz_id=quiz_id,
                    score=score,
                    total_points=total_points,
                    answers=answers,
                    completed_at=completed_at,
                )
        except IntegrityError:
            logger.warning(
                "duplicate quiz result rejected by unique constraint: user_id=%s quiz_id=%s",
                user_id,
                quiz_id,
            )
            raise AlreadyCompleted()

        return _model_to_entity(m)
