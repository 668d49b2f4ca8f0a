# PATH: apps/domains/results/views/result_detail_view.py
"""
Quiz Result Detail

GET    /quiz-results/{result_id}/   응시자 본인 또는 admin — 결과 + 문항별 채점 내역
DELETE /quiz-results/{result_id}/   admin
"""

import logging

from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated

from academy.domain.results.errors import ResultNotFound
from academy.domain.shared.ids import parse_id
from apps.core.permissions import IsAdmin, IsSelfOrAdmin
from apps.domains.results.models import QuizResult
from apps.domains.results.serializers.quiz_result import QuizResultSerializer
from apps.domains.results.services.result_stats_service import ResultStatsService

logger = logging.getLogger(__name__)


class QuizResultDetailView(APIView):

    def get_permissions(self):
        if self.request.method == "DELETE":
            return [IsAuthenticated(), IsAdmin()]
        return [IsAuthenticated(), IsSelfOrAdmin()]

    def get_object(self, result_id) -> QuizResult:
        result = (
            QuizResult.objects.select_related("quiz", "quiz__lesson", "user")
            .filter(id=parse_id(result_id, label="result_id"))
            .first()
        )
        if result is None:
            raise ResultNotFound()
        self.check_object_permissions(self.request, result)
        return result

    def get(self, request, result_id):
        result = self.get_object(result_id)

        data = QuizResultSerializer(result).data
        data["quiz_description"] = result.quiz.description
        data["lesson_title"] = result.quiz.lesson.title if result.quiz.lesson_id else None
        data["username"] = result.user.username

        return Response(
            {
                "result": data,
                "detailed_answers": ResultStatsService.detailed_answers(result),
            }
        )

    def delete(self, request, result_id):
        result = self.get_object(result_id)
        rid = result.id
        result.delete()
        logger.info("quiz result deleted: result_id=%s by=%s", rid, request.user.id)
        return Response(status=status.HTTP_204_NO_CONTENT)
