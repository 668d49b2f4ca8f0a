"""
Repository 포트 — 영속화 추상화 (Django/ORM 미사용)
"""
from __future__ import annotations

from abc import abstractmethod
from datetime import datetime
from typing import Any, Dict, List, Optional, Protocol

from academy.domain.quizzes.entities import QuestionDraft, QuizDefinition, QuizDraft
from academy.domain.results.entities import QuizAttempt


class QuizRepository(Protocol):
    """퀴즈 + 문항 영속화. 트랜잭션 경계는 UoW가 잡는다."""

    @abstractmethod
    def get_with_questions(self, quiz_id: int) -> Optional[QuizDefinition]:
        """퀴즈 + 정렬된 문항 키. 없으면 None."""
        ...

    @abstractmethod
    def exists(self, quiz_id: int) -> bool:
        ...

    @abstractmethod
    def lesson_exists(self, lesson_id: int) -> bool:
        ...

    @abstractmethod
    def create(self, draft: QuizDraft, created_by_id: Optional[int]) -> int:
        """퀴즈 행 생성. 새 quiz_id 반환 (문항은 replace_questions로)."""
        ...

    @abstractmethod
    def update(self, quiz_id: int, draft: QuizDraft) -> None:
        """메타 정보(title/description/lesson)만 갱신."""
        ...

    @abstractmethod
    def replace_questions(self, quiz_id: int, questions: List[QuestionDraft]) -> None:
        """기존 문항 전부 삭제 후 전부 삽입 (호출자가 트랜잭션 안에 있어야 함)."""
        ...


class ResultRepository(Protocol):
    """퀴즈 결과 영속화. (user_id, quiz_id) unique 는 저장소가 강제."""

    @abstractmethod
    def exists_for(self, user_id: int, quiz_id: int) -> bool:
        ...

    @abstractmethod
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
        """
        결과 1행 삽입.
        unique 위반이면 AlreadyCompleted 를 던진다 (동시 제출 경합).
        """
        ...
