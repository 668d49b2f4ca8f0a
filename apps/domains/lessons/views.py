# PATH: apps/domains/lessons/views.py

import logging

from django.db import transaction
from django.db.models import Count, Q
from django.db.models.deletion import ProtectedError

from rest_framework.viewsets import ModelViewSet
from rest_framework.filters import SearchFilter
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from django_filters.rest_framework import DjangoFilterBackend

from academy.domain.quizzes.errors import LessonNotFound, LessonReferenced
from academy.domain.shared.errors import InvalidInputError
from apps.api.common.mixins import ParsedLookupMixin
from apps.api.common.pagination import PageLimitPagination
from apps.core.permissions import IsAdmin

from .filters import LessonFilter
from .models import Lesson
from .serializers import LessonSerializer

logger = logging.getLogger(__name__)

PUBLIC_ACTIONS = {"list", "retrieve", "search"}


class LessonViewSet(ParsedLookupMixin, ModelViewSet):
    """
    GET    /lessons/                  공개 (?level=, ?search=, ?page=, ?limit=)
    GET    /lessons/{id}/             공개
    GET    /lessons/search/{query}/   공개
    POST/PUT/PATCH/DELETE             admin
    """

    serializer_class = LessonSerializer
    not_found_error = LessonNotFound
    pagination_class = PageLimitPagination

    filter_backends = [DjangoFilterBackend, SearchFilter]
    filterset_class = LessonFilter
    search_fields = ["title", "description", "content"]

    def get_queryset(self):
        return (
            Lesson.objects.select_related("created_by")
            .annotate(quiz_count=Count("quizzes"))
            .order_by("-created_at", "-id")
        )

    def get_permissions(self):
        if self.action in PUBLIC_ACTIONS:
            return [AllowAny()]
        return [IsAuthenticated(), IsAdmin()]

    def perform_create(self, serializer):
        lesson = serializer.save(created_by=self.request.user)
        logger.info("lesson created: lesson_id=%s by=%s", lesson.id, self.request.user.id)

    def perform_destroy(self, instance):
        """
        🔐 퀴즈가 참조 중이면 409 (LESSON_REFERENCED)
        피드백은 CASCADE 로 함께 삭제
        """
        lesson_id = instance.pk
        with transaction.atomic():
            if instance.quizzes.exists():
                raise LessonReferenced()
            try:
                instance.delete()
            except ProtectedError:
                # 확인 직후 다른 요청이 퀴즈를 붙인 경우
                raise LessonReferenced()
        logger.info("lesson deleted: lesson_id=%s by=%s", lesson_id, self.request.user.id)

    @action(detail=False, methods=["get"], url_path=r"search/(?P<query>[^/]+)")
    def search(self, request, query=None):
        """
        제목/본문/설명 부분 일치 검색
        GET /api/v1/lessons/search/{query}/
        """
        query = (query or "").strip()
        if not query:
            raise InvalidInputError("검색어가 필요합니다.", code="SEARCH_QUERY_REQUIRED")

        qs = self.get_queryset().filter(
            Q(title__icontains=query)
            | Q(content__icontains=query)
            | Q(description__icontains=query)
        )
        page = self.paginate_queryset(qs)
        serializer = self.get_serializer(page, many=True)
        return self.get_paginated_response(serializer.data)
