# apps/domains/results/services/result_stats_service.py
from __future__ import annotations

from typing import Dict, List

from django.db.models import (
    Avg,
    Case,
    Count,
    F,
    FloatField,
    Max,
    Min,
    Value,
    When,
    Window,
)
from django.db.models.functions import Cast, RowNumber

from academy.domain.results.scoring import answer_map
from apps.domains.results.models import QuizResult


# 행 단위 백분율 (total_points = 0 이면 0)
PERCENTAGE_EXPR = Case(
    When(
        total_points__gt=0,
        then=Cast(F("score"), FloatField()) * Value(100.0) / Cast(F("total_points"), FloatField()),
    ),
    default=Value(0.0),
    output_field=FloatField(),
)

# 리더보드 정렬: 점수 desc → 먼저 끝낸 사람 → id
LEADERBOARD_ORDER = [F("score").desc(), F("completed_at").asc(), F("id").asc()]


def _round2(v) -> float:
    return round(float(v or 0.0), 2)


class ResultStatsService:
    """
    퀴즈 결과 집계 단일 진실

    🔥 기준:
    - QuizResult 만 사용 (요청마다 재계산, 캐시 없음)
    - 백분율은 행 단위로 계산 후 집계 (총점 가중 평균 아님)
    """

    # ======================================================
    # A) 퀴즈 요약 통계
    # ======================================================
    @staticmethod
    def quiz_statistics(*, quiz_id: int) -> Dict:
        agg = QuizResult.objects.filter(quiz_id=int(quiz_id)).aggregate(
            total_attempts=Count("id"),
            average_percentage=Avg(PERCENTAGE_EXPR),
            highest_percentage=Max(PERCENTAGE_EXPR),
            lowest_percentage=Min(PERCENTAGE_EXPR),
        )

        return {
            "total_attempts": int(agg["total_attempts"] or 0),
            "average_percentage": _round2(agg["average_percentage"]),
            "highest_percentage": _round2(agg["highest_percentage"]),
            "lowest_percentage": _round2(agg["lowest_percentage"]),
        }

    # ======================================================
    # B) 리더보드 (rank = ROW_NUMBER 윈도우, 페이지와 무관한 전역 순위)
    # ======================================================
    @staticmethod
    def leaderboard_queryset(*, quiz_id: int):
        return (
            QuizResult.objects.filter(quiz_id=int(quiz_id))
            .select_related("user")
            .annotate(rank=Window(expression=RowNumber(), order_by=LEADERBOARD_ORDER))
            .order_by(*LEADERBOARD_ORDER)
        )

    # ======================================================
    # C) 사용자 응시 이력 (최신순)
    # ======================================================
    @staticmethod
    def user_history_queryset(*, user_id: int):
        return (
            QuizResult.objects.filter(user_id=int(user_id))
            .select_related("quiz", "quiz__lesson")
            .order_by("-completed_at", "-id")
        )

    # ======================================================
    # D) 단일 결과 문항별 재구성
    # ======================================================
    @staticmethod
    def detailed_answers(result: QuizResult) -> List[Dict]:
        """
        현재 문항 + 저장된 제출 payload 로 문항별 채점 내역을 다시 만든다.
        답하지 않은 문항은 selected_index = None.
        """
        selected_by_question = answer_map(result.answers)

        rows = []
        for q in result.quiz.questions.all().order_by("order", "id"):
            selected = selected_by_question.get(int(q.id))
            rows.append(
                {
                    "question_id": q.id,
                    "question_text": q.question_text,
                    "options": list(q.options or []),
                    "correct_index": q.correct_index,
                    "selected_index": selected,
                    "points": q.points,
                    "is_correct": selected is not None and selected == int(q.correct_index),
                }
            )
        return rows
