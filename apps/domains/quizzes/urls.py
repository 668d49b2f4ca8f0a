# PATH: apps/domains/quizzes/urls.py

from django.urls import path, include
from rest_framework.routers import SimpleRouter

from apps.domains.quizzes.views.quiz_view import QuizViewSet

router = SimpleRouter()
router.register(r"", QuizViewSet, basename="quizzes")

urlpatterns = [
    path("", include(router.urls)),
]
