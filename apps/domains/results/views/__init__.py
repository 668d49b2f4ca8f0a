# PATH: apps/domains/results/views/__init__.py

# ======================================================
# Student-facing
# ======================================================
from .submit_quiz_view import QuizSubmitView
from .user_history_view import UserQuizHistoryView
from .result_detail_view import QuizResultDetailView

# ======================================================
# Admin-facing
# ======================================================
from .quiz_results_view import AdminQuizResultsView, AdminQuizStatisticsView

__all__ = [
    "QuizSubmitView",
    "UserQuizHistoryView",
    "QuizResultDetailView",
    "AdminQuizResultsView",
    "AdminQuizStatisticsView",
]
