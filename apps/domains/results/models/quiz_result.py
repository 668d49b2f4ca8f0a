from __future__ import annotations

from django.conf import settings
from django.db import models
from django.utils import timezone


class QuizResult(models.Model):
    """
    퀴즈 응시 결과 SSOT

    - (user, quiz) 당 1개 (unique). 재응시/덮어쓰기 없음
    - answers 는 제출 payload 그대로 보관 (상세 화면에서 문항별 재구성)
    - score / total_points 는 제출 시점 문항 기준으로 확정
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="quiz_results",
    )

    quiz = models.ForeignKey(
        "quizzes.Quiz",
        on_delete=models.CASCADE,
        related_name="results",
    )

    # 점수
    score = models.PositiveIntegerField(default=0)
    total_points = models.PositiveIntegerField(default=0)

    # 제출 원본
    # 예: [{"question_id": 12, "selected_index": 0}, {"question_id": 13, "selected_index": 2}]
    answers = models.JSONField(default=list, blank=True)

    completed_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "results_quiz_result"
        unique_together = ("user", "quiz")
        ordering = ["-completed_at", "-id"]
        indexes = [
            models.Index(
                fields=["quiz", "score", "completed_at"],
                name="results_quiz_score_idx",
            ),
            models.Index(
                fields=["user", "completed_at"],
                name="results_user_completed_idx",
            ),
        ]

    def __str__(self):
        return f"{self.user_id} - {self.quiz_id} ({self.score}/{self.total_points})"
