from django.db import models

from .quiz import Quiz


class Question(models.Model):
    """
    퀴즈 문항 정의

    options      : 보기 문자열 목록 (2~6개)
    correct_index: 0-based 정답 보기 위치
    order        : 퀴즈 내 순서 (1부터)
    """

    quiz = models.ForeignKey(
        Quiz,
        on_delete=models.CASCADE,
        related_name="questions",
    )

    order = models.PositiveIntegerField()
    question_text = models.TextField()
    options = models.JSONField(default=list)
    correct_index = models.PositiveSmallIntegerField()
    points = models.PositiveIntegerField(default=1)

    class Meta:
        db_table = "quizzes_question"
        unique_together = ("quiz", "order")
        ordering = ["order", "id"]

    def __str__(self):
        return f"{self.quiz} Q{self.order}"
