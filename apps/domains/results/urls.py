# PATH: apps/domains/results/urls.py

from django.urls import path

from apps.domains.results.views import (
    AdminQuizResultsView,
    AdminQuizStatisticsView,
    QuizResultDetailView,
    QuizSubmitView,
    UserQuizHistoryView,
)

urlpatterns = [
    # ======================================================
    # Student
    # ======================================================
    path("", QuizSubmitView.as_view(), name="quiz-result-submit"),
    path("users/<str:user_id>/", UserQuizHistoryView.as_view(), name="quiz-result-user-history"),

    # ======================================================
    # Admin
    # ======================================================
    path("quizzes/<str:quiz_id>/", AdminQuizResultsView.as_view(), name="quiz-result-leaderboard"),
    path(
        "quizzes/<str:quiz_id>/statistics/",
        AdminQuizStatisticsView.as_view(),
        name="quiz-result-statistics",
    ),

    # ======================================================
    # Owner / Admin
    # ======================================================
    path("<str:result_id>/", QuizResultDetailView.as_view(), name="quiz-result-detail"),
]
