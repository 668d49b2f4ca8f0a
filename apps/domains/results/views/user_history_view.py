# PATH: apps/domains/results/views/user_history_view.py
"""
User Quiz History

GET /quiz-results/users/{user_id}/?page=&limit=

- 본인 또는 admin
- 최신 응시 순, 퀴즈/레슨 제목 포함
"""

from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated

from academy.adapters.db.django import repositories_core as core_repo
from academy.domain.accounts.errors import UserNotFound
from academy.domain.shared.ids import parse_id
from apps.api.common.pagination import PageLimitPagination
from apps.core.permissions import IsSelfOrAdmin
from apps.domains.results.serializers.quiz_result import UserHistoryRowSerializer
from apps.domains.results.services.result_stats_service import ResultStatsService


class UserQuizHistoryView(APIView):
    permission_classes = [IsAuthenticated, IsSelfOrAdmin]
    owner_url_kwarg = "user_id"

    def get(self, request, user_id):
        user_id = parse_id(user_id, label="user_id")
        if not core_repo.user_exists(user_id):
            raise UserNotFound()

        qs = ResultStatsService.user_history_queryset(user_id=user_id)

        paginator = PageLimitPagination()
        page = paginator.paginate_queryset(qs, request, view=self)
        return paginator.get_paginated_response(
            UserHistoryRowSerializer(page, many=True).data
        )
