from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("quizzes", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="QuizResult",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("score", models.PositiveIntegerField(default=0)),
                ("total_points", models.PositiveIntegerField(default=0)),
                ("answers", models.JSONField(blank=True, default=list)),
                ("completed_at", models.DateTimeField(default=django.utils.timezone.now)),
                (
                    "quiz",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="results",
                        to="quizzes.quiz",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="quiz_results",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "results_quiz_result",
                "ordering": ["-completed_at", "-id"],
                "unique_together": {("user", "quiz")},
                "indexes": [
                    models.Index(
                        fields=["quiz", "score", "completed_at"],
                        name="results_quiz_score_idx",
                    ),
                    models.Index(
                        fields=["user", "completed_at"],
                        name="results_user_completed_idx",
                    ),
                ],
            },
        ),
    ]
