# PATH: apps/domains/quizzes/views/quiz_view.py
"""
Quiz CRUD

GET    /quizzes/                       공개 (문항 수/총점/레슨/작성자 포함)
GET    /quizzes/{id}/                  공개 (정답은 admin 에게만)
GET    /quizzes/lesson/{lesson_id}/    공개
POST   /quizzes/                       admin — 퀴즈 + 문항 생성 (트랜잭션)
PUT    /quizzes/{id}/                  admin — 메타 갱신 + 문항 세트 교체 (트랜잭션)
DELETE /quizzes/{id}/                  admin — 문항/결과 CASCADE
"""
from __future__ import annotations

import logging

from django.db.models import Count, Prefetch, Sum
from django.db.models.functions import Coalesce

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.viewsets import ModelViewSet

from drf_yasg.utils import swagger_auto_schema

from academy.adapters.db.django import repositories_core as core_repo
from academy.adapters.db.django.uow import DjangoUnitOfWork
from academy.application.use_cases.quizzes.save_quiz import create_quiz, replace_quiz
from academy.domain.quizzes.errors import LessonNotFound, QuizNotFound
from academy.domain.shared.ids import parse_id
from apps.api.common.mixins import ParsedLookupMixin
from apps.api.common.pagination import PageLimitPagination
from apps.core.models import User
from apps.core.permissions import IsAdmin
from apps.domains.quizzes.models import Question, Quiz
from apps.domains.quizzes.serializers.quiz import (
    QuizDetailSerializer,
    QuizListSerializer,
    QuizWriteSerializer,
)

logger = logging.getLogger(__name__)

PUBLIC_ACTIONS = {"list", "retrieve", "by_lesson"}


class QuizViewSet(ParsedLookupMixin, ModelViewSet):
    not_found_error = QuizNotFound
    pagination_class = PageLimitPagination
    http_method_names = ["get", "post", "put", "delete", "head", "options"]

    def get_queryset(self):
        qs = (
            Quiz.objects.select_related("lesson", "created_by")
            .annotate(
                question_count=Count("questions"),
                total_points=Coalesce(Sum("questions__points"), 0),
            )
            .order_by("-created_at", "-id")
        )
        if self.action in ("retrieve", "create", "update"):
            qs = qs.prefetch_related(
                Prefetch("questions", queryset=Question.objects.order_by("order", "id"))
            )
        return qs

    def get_permissions(self):
        if self.action in PUBLIC_ACTIONS:
            return [AllowAny()]
        return [IsAuthenticated(), IsAdmin()]

    def get_serializer_class(self):
        if self.action == "retrieve":
            return QuizDetailSerializer
        if self.action in ("create", "update"):
            return QuizWriteSerializer
        return QuizListSerializer

    def get_serializer_context(self):
        ctx = super().get_serializer_context()
        user = self.request.user
        ctx["include_answers"] = bool(
            user and user.is_authenticated and getattr(user, "role", None) == User.Role.ADMIN
        )
        return ctx

    def _detail_response(self, quiz_id: int, status_code=status.HTTP_200_OK):
        quiz = self.get_queryset().get(id=quiz_id)
        data = QuizDetailSerializer(quiz, context=self.get_serializer_context()).data
        return Response(data, status=status_code)

    @swagger_auto_schema(request_body=QuizWriteSerializer, responses={201: QuizDetailSerializer})
    def create(self, request, *args, **kwargs):
        serializer = QuizWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        quiz_id = create_quiz(
            DjangoUnitOfWork(),
            serializer.to_draft(),
            created_by_id=request.user.id,
        )
        return self._detail_response(quiz_id, status.HTTP_201_CREATED)

    @swagger_auto_schema(request_body=QuizWriteSerializer, responses={200: QuizDetailSerializer})
    def update(self, request, *args, **kwargs):
        quiz_id = parse_id(kwargs.get(self.lookup_url_kwarg or self.lookup_field))
        serializer = QuizWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        replace_quiz(DjangoUnitOfWork(), quiz_id, serializer.to_draft())
        return self._detail_response(quiz_id)

    def perform_destroy(self, instance):
        quiz_id = instance.pk
        instance.delete()
        logger.info("quiz deleted: quiz_id=%s by=%s", quiz_id, self.request.user.id)

    @action(detail=False, methods=["get"], url_path=r"lesson/(?P<lesson_id>[^/]+)")
    def by_lesson(self, request, lesson_id=None):
        """
        레슨에 연결된 퀴즈 목록
        GET /api/v1/quizzes/lesson/{lesson_id}/
        """
        lesson_id = parse_id(lesson_id, label="lesson_id")
        if not core_repo.lesson_exists(lesson_id):
            raise LessonNotFound()

        qs = self.get_queryset().filter(lesson_id=lesson_id)
        page = self.paginate_queryset(qs)
        serializer = QuizListSerializer(page, many=True, context=self.get_serializer_context())
        return self.get_paginated_response(serializer.data)
