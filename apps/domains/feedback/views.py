# PATH: apps/domains/feedback/views.py

import logging
from collections import OrderedDict

from django.db import IntegrityError, transaction

from rest_framework.viewsets import ModelViewSet
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from academy.adapters.db.django import repositories_core as core_repo
from academy.domain.feedback.errors import FeedbackExists, FeedbackNotFound
from academy.domain.quizzes.errors import LessonNotFound
from academy.domain.shared.ids import parse_id
from apps.api.common.mixins import ParsedLookupMixin
from apps.api.common.pagination import PageLimitPagination
from apps.core.permissions import IsAdmin, IsSelfOrAdmin
from apps.domains.lessons.models import Lesson

from .models import Feedback
from .serializers import FeedbackSerializer
from .services.feedback_stats_service import FeedbackStatsService

logger = logging.getLogger(__name__)


class FeedbackViewSet(ParsedLookupMixin, ModelViewSet):
    """
    GET    /feedback/                      admin
    POST   /feedback/                      로그인 사용자 ((user, lesson) 당 1개)
    GET    /feedback/{id}/                 작성자 또는 admin
    PUT    /feedback/{id}/                 작성자 또는 admin (레슨 변경 가능)
    DELETE /feedback/{id}/                 작성자 또는 admin
    GET    /feedback/my-feedback/          로그인 사용자
    GET    /feedback/lesson/{lesson_id}/   공개 — 목록 + 별점 통계
    """

    serializer_class = FeedbackSerializer
    not_found_error = FeedbackNotFound
    pagination_class = PageLimitPagination
    http_method_names = ["get", "post", "put", "delete", "head", "options"]

    def get_queryset(self):
        return Feedback.objects.select_related("user", "lesson").order_by("-created_at", "-id")

    def get_permissions(self):
        if self.action == "lesson":
            return [AllowAny()]
        if self.action == "list":
            return [IsAuthenticated(), IsAdmin()]
        if self.action in ("create", "my_feedback"):
            return [IsAuthenticated()]
        return [IsAuthenticated(), IsSelfOrAdmin()]

    # -------------------------------------------------
    # write
    # -------------------------------------------------
    @staticmethod
    def _ensure_lesson(lesson_id: int) -> None:
        if not core_repo.lesson_exists(lesson_id):
            raise LessonNotFound()

    def perform_create(self, serializer):
        user = self.request.user
        lesson_id = serializer.validated_data["lesson_id"]
        self._ensure_lesson(lesson_id)

        if Feedback.objects.filter(user_id=user.id, lesson_id=lesson_id).exists():
            raise FeedbackExists()
        try:
            with transaction.atomic():
                feedback = serializer.save(user=user)
        except IntegrityError:
            raise FeedbackExists()
        logger.info("feedback created: feedback_id=%s lesson_id=%s user_id=%s", feedback.id, lesson_id, user.id)

    def perform_update(self, serializer):
        instance = serializer.instance
        lesson_id = serializer.validated_data.get("lesson_id", instance.lesson_id)
        if lesson_id != instance.lesson_id:
            self._ensure_lesson(lesson_id)
            if (
                Feedback.objects.filter(user_id=instance.user_id, lesson_id=lesson_id)
                .exclude(id=instance.id)
                .exists()
            ):
                raise FeedbackExists()
        try:
            with transaction.atomic():
                serializer.save()
        except IntegrityError:
            raise FeedbackExists()

    # -------------------------------------------------
    # read (extra)
    # -------------------------------------------------
    @action(detail=False, methods=["get"], url_path="my-feedback")
    def my_feedback(self, request):
        qs = self.get_queryset().filter(user_id=request.user.id)
        page = self.paginate_queryset(qs)
        return self.get_paginated_response(self.get_serializer(page, many=True).data)

    @action(detail=False, methods=["get"], url_path=r"lesson/(?P<lesson_id>[^/]+)")
    def lesson(self, request, lesson_id=None):
        """
        레슨 피드백 목록 + 별점 통계
        GET /api/v1/feedback/lesson/{lesson_id}/
        """
        lesson_id = parse_id(lesson_id, label="lesson_id")
        lesson = Lesson.objects.filter(id=lesson_id).only("id", "title").first()
        if lesson is None:
            raise LessonNotFound()

        page = self.paginate_queryset(self.get_queryset().filter(lesson_id=lesson_id))
        return Response(
            OrderedDict(
                [
                    ("lesson", {"id": lesson.id, "title": lesson.title}),
                    ("statistics", FeedbackStatsService.lesson_statistics(lesson_id=lesson_id)),
                    ("results", self.get_serializer(page, many=True).data),
                    ("pagination", self.paginator.get_pagination_meta()),
                ]
            )
        )
