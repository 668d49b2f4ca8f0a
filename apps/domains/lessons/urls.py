from django.urls import path, include
from rest_framework.routers import SimpleRouter

from .views import LessonViewSet

router = SimpleRouter()

# =========================
# Lesson Domain
# =========================
router.register(r"", LessonViewSet, basename="lessons")

urlpatterns = [
    path("", include(router.urls)),
]
