# apps/api/v1/urls.py
from django.urls import path, include

urlpatterns = [
    # =========================
    # Core (auth / users)
    # =========================
    path("", include("apps.core.urls")),

    # =========================
    # Domain APIs
    # =========================
    path("lessons/", include("apps.domains.lessons.urls")),
    path("quizzes/", include("apps.domains.quizzes.urls")),
    path("quiz-results/", include("apps.domains.results.urls")),
    path("feedback/", include("apps.domains.feedback.urls")),
]
