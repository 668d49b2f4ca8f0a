"""
Core Repository — User, Lesson 조회/생성.
ORM 접근은 메서드 내부에서만 lazy import.
"""
from __future__ import annotations

from typing import Any, Optional

# ---------------------------------------------------------------------------
# User
# ---------------------------------------------------------------------------


def user_get_by_id(user_id) -> Optional[Any]:
    """인증 게이트용. 비활성 사용자도 반환 (판정은 호출자)."""
    from django.contrib.auth import get_user_model
    return get_user_model().objects.filter(id=user_id).first()


def user_get_by_username(username: str) -> Optional[Any]:
    from django.contrib.auth import get_user_model
    if not (username or "").strip():
        return None
    return get_user_model().objects.filter(username=username.strip()).first()


def user_exists(user_id) -> bool:
    from django.contrib.auth import get_user_model
    return get_user_model().objects.filter(id=user_id).exists()


def user_get_or_create(username: str, defaults: dict) -> tuple[Any, bool]:
    from django.contrib.auth import get_user_model
    return get_user_model().objects.get_or_create(username=username, defaults=defaults)


# ---------------------------------------------------------------------------
# Lesson
# ---------------------------------------------------------------------------


def lesson_get_or_create(title: str, defaults: dict) -> tuple[Any, bool]:
    from apps.domains.lessons.models import Lesson
    return Lesson.objects.get_or_create(title=title, defaults=defaults)


def lesson_exists(lesson_id) -> bool:
    from apps.domains.lessons.models import Lesson
    return Lesson.objects.filter(id=lesson_id).exists()


# ---------------------------------------------------------------------------
# Quiz / Feedback (seed 용)
# ---------------------------------------------------------------------------


def quiz_exists_by_title(title: str) -> bool:
    from apps.domains.quizzes.models import Quiz
    return Quiz.objects.filter(title=title).exists()


def feedback_get_or_create(*, user, lesson, defaults: dict) -> tuple[Any, bool]:
    from apps.domains.feedback.models import Feedback
    return Feedback.objects.get_or_create(user=user, lesson=lesson, defaults=defaults)
