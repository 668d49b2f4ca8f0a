from django.conf import settings
from django.db import models

from apps.core.models import TimestampModel


# ========================================================
# Feedback
# ========================================================

class Feedback(TimestampModel):
    """
    레슨 평가 (별점 1~5 + 코멘트)

    - (user, lesson) 당 1개
    - 레슨/사용자 삭제 시 함께 삭제
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="feedback",
    )
    lesson = models.ForeignKey(
        "lessons.Lesson",
        on_delete=models.CASCADE,
        related_name="feedback",
    )

    rating = models.PositiveSmallIntegerField()
    comment = models.TextField(max_length=1000, blank=True, default="")

    class Meta:
        db_table = "feedback_feedback"
        unique_together = ("user", "lesson")
        ordering = ["-created_at", "-id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(rating__gte=1) & models.Q(rating__lte=5),
                name="feedback_rating_1_5",
            ),
        ]
        indexes = [
            models.Index(fields=["lesson", "created_at"], name="feedback_lesson_created_idx"),
        ]

    def __str__(self):
        return f"{self.user_id} → {self.lesson_id} ({self.rating})"
