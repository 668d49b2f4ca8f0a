"""
Quiz Repository — Django ORM 구현 (메서드 내부에서만 apps.domains.* import)
"""
from __future__ import annotations

from typing import List, Optional

from academy.domain.quizzes.entities import (
    QuestionDraft,
    QuestionKey,
    QuizDefinition,
    QuizDraft,
)


class DjangoQuizRepository:
    """QuizRepository 구현. 트랜잭션은 호출자(UoW)가 잡는다."""

    def get_with_questions(self, quiz_id: int) -> Optional[QuizDefinition]:
        from apps.domains.quizzes.models import Question, Quiz

        quiz = Quiz.objects.filter(id=quiz_id).only("id", "title").first()
        if quiz is None:
            return None

        rows = (
            Question.objects.filter(quiz_id=quiz.id)
            .order_by("order", "id")
            .values_list("id", "correct_index", "points")
        )
        return QuizDefinition(
            id=quiz.id,
            title=quiz.title,
            questions=[
                QuestionKey(id=qid, correct_index=int(correct), points=int(points))
                for qid, correct, points in rows
            ],
        )

    def exists(self, quiz_id: int) -> bool:
        from apps.domains.quizzes.models import Quiz
        return Quiz.objects.filter(id=quiz_id).exists()

    def lesson_exists(self, lesson_id: int) -> bool:
        from apps.domains.lessons.models import Lesson
        return Lesson.objects.filter(id=lesson_id).exists()

    def create(self, draft: QuizDraft, created_by_id: Optional[int]) -> int:
        from apps.domains.quizzes.models import Quiz

        quiz = Quiz.objects.create(
            title=draft.title,
            description=draft.description or "",
            lesson_id=draft.lesson_id,
            created_by_id=created_by_id,
        )
        return quiz.id

    def update(self, quiz_id: int, draft: QuizDraft) -> None:
        from apps.domains.quizzes.models import Quiz

        quiz = Quiz.objects.select_for_update().get(id=quiz_id)
        quiz.title = draft.title
        quiz.description = draft.description or ""
        quiz.lesson_id = draft.lesson_id
        quiz.save(update_fields=["title", "description", "lesson", "updated_at"])

    def replace_questions(self, quiz_id: int, questions: List[QuestionDraft]) -> None:
        from apps.domains.quizzes.models import Question

        Question.objects.filter(quiz_id=quiz_id).delete()
        Question.objects.bulk_create(
            [
                Question(
                    quiz_id=quiz_id,
                    order=pos,
                    question_text=q.question_text,
                    options=list(q.options),
                    correct_index=int(q.correct_index),
                    points=int(q.points),
                )
                for pos, q in enumerate(questions, start=1)
            ]
        )
