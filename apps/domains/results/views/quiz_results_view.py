# PATH: apps/domains/results/views/quiz_results_view.py
"""
Quiz Results (admin)

GET /quiz-results/quizzes/{quiz_id}/             리더보드 페이지 + 요약 통계
GET /quiz-results/quizzes/{quiz_id}/statistics/  요약 통계만

✅ 단일 진실: ResultStatsService
- rank 는 ROW_NUMBER() 윈도우 → 페이지와 무관한 전역 순위
"""

from collections import OrderedDict

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated

from academy.domain.quizzes.errors import QuizNotFound
from academy.domain.shared.ids import parse_id
from apps.api.common.pagination import PageLimitPagination
from apps.core.permissions import IsAdmin
from apps.domains.quizzes.models import Quiz
from apps.domains.results.serializers.quiz_result import (
    LeaderboardRowSerializer,
    QuizStatisticsSerializer,
)
from apps.domains.results.services.result_stats_service import ResultStatsService


def _get_quiz(quiz_id) -> Quiz:
    quiz = Quiz.objects.filter(id=parse_id(quiz_id, label="quiz_id")).only("id", "title").first()
    if quiz is None:
        raise QuizNotFound()
    return quiz


class AdminQuizResultsView(APIView):
    permission_classes = [IsAuthenticated, IsAdmin]

    def get(self, request, quiz_id):
        quiz = _get_quiz(quiz_id)

        paginator = PageLimitPagination()
        page = paginator.paginate_queryset(
            ResultStatsService.leaderboard_queryset(quiz_id=quiz.id),
            request,
            view=self,
        )
        stats = ResultStatsService.quiz_statistics(quiz_id=quiz.id)

        return Response(
            OrderedDict(
                [
                    ("quiz", {"id": quiz.id, "title": quiz.title}),
                    ("statistics", QuizStatisticsSerializer(stats).data),
                    ("results", LeaderboardRowSerializer(page, many=True).data),
                    ("pagination", paginator.get_pagination_meta()),
                ]
            )
        )


class AdminQuizStatisticsView(APIView):
    permission_classes = [IsAuthenticated, IsAdmin]

    def get(self, request, quiz_id):
        quiz = _get_quiz(quiz_id)
        stats = ResultStatsService.quiz_statistics(quiz_id=quiz.id)
        return Response(
            {
                "quiz": {"id": quiz.id, "title": quiz.title},
                "statistics": QuizStatisticsSerializer(stats).data,
            }
        )
