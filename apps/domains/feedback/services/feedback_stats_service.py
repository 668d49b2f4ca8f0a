# apps/domains/feedback/services/feedback_stats_service.py
from __future__ import annotations

from collections import OrderedDict
from typing import Dict

from django.db.models import Avg, Count, Q

from apps.domains.feedback.models import Feedback

STARS = (5, 4, 3, 2, 1)


class FeedbackStatsService:
    """
    레슨 별점 통계

    - average_rating: 소수 1자리 반올림, 피드백 없으면 0
    - rating_breakdown: 5 → 1 순서
    """

    @staticmethod
    def lesson_statistics(*, lesson_id: int) -> Dict:
        agg = Feedback.objects.filter(lesson_id=int(lesson_id)).aggregate(
            average_rating=Avg("rating"),
            total_feedback=Count("id"),
            **{f"star_{n}": Count("id", filter=Q(rating=n)) for n in STARS},
        )

        return {
            "average_rating": round(float(agg["average_rating"] or 0.0), 1),
            "total_feedback": int(agg["total_feedback"] or 0),
            "rating_breakdown": OrderedDict(
                (str(n), int(agg[f"star_{n}"] or 0)) for n in STARS
            ),
        }
