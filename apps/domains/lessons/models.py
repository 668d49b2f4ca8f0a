from django.conf import settings
from django.db import models

from apps.core.models import TimestampModel


# ========================================================
# Lesson
# ========================================================

class Lesson(TimestampModel):
    """
    학습 단위 (영상 + 본문)

    - 퀴즈가 참조 중이면 삭제 불가 (Quiz.lesson = PROTECT)
    - 피드백은 레슨과 함께 삭제 (Feedback.lesson = CASCADE)
    """

    class Level(models.TextChoices):
        BEGINNER = "beginner", "Beginner"
        INTERMEDIATE = "intermediate", "Intermediate"
        ADVANCED = "advanced", "Advanced"

    title = models.CharField(max_length=200)
    description = models.CharField(max_length=500, blank=True, default="")
    content = models.TextField()
    video_url = models.URLField(max_length=500, blank=True, default="")
    level = models.CharField(
        max_length=20,
        choices=Level.choices,
        default=Level.BEGINNER,
    )

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="lessons_created",
    )

    class Meta:
        db_table = "lessons_lesson"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["level", "created_at"], name="lessons_level_created_idx"),
        ]

    def __str__(self):
        return self.title
