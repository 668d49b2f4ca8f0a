from django.conf import settings
from django.db import models

from apps.core.models import BaseModel


class Quiz(BaseModel):
    """
    퀴즈 정의 (문항은 Question, 결과는 results.QuizResult)

    - lesson 은 선택. 레슨 삭제는 퀴즈가 남아 있으면 막힌다 (PROTECT)
    - 퀴즈 삭제 시 문항/결과 CASCADE
    """

    title = models.CharField(max_length=200)
    description = models.CharField(max_length=500, blank=True, default="")

    lesson = models.ForeignKey(
        "lessons.Lesson",
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="quizzes",
    )

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="quizzes_created",
    )

    class Meta:
        db_table = "quizzes_quiz"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return self.title
