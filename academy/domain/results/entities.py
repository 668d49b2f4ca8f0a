"""
결과 도메인 엔티티 — 순수 파이썬
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from academy.domain.results.scoring import percentage


@dataclass(frozen=True)
class QuizAttempt:
    """저장 완료된 1회 응시 (Result 행의 스냅샷)."""
    id: int
    user_id: int
    quiz_id: int
    score: int
    total_points: int
    answers: List[Dict[str, Any]] = field(default_factory=list)
    completed_at: Optional[datetime] = None
    quiz_title: str = ""

    @property
    def percentage(self) -> int:
        return percentage(self.score, self.total_points)
