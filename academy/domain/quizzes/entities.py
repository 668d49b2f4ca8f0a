"""
퀴즈 도메인 엔티티 — 순수 파이썬 (Django/ORM 미사용)

QuestionKey  : 채점에 필요한 최소 정보 (정답 인덱스, 배점)
QuizDefinition : 퀴즈 + 정렬된 문항 키 목록
QuestionDraft  : 생성/교체 시 입력되는 문항 정의
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


MIN_OPTIONS = 2
MAX_OPTIONS = 6


@dataclass(frozen=True)
class QuestionKey:
    id: int
    correct_index: int
    points: int = 1


@dataclass(frozen=True)
class QuizDefinition:
    id: int
    title: str
    questions: List[QuestionKey] = field(default_factory=list)

    @property
    def total_points(self) -> int:
        return sum(int(q.points) for q in self.questions)


@dataclass(frozen=True)
class QuestionDraft:
    question_text: str
    options: List[str]
    correct_index: int
    points: int = 1


@dataclass(frozen=True)
class QuizDraft:
    title: str
    description: str = ""
    lesson_id: Optional[int] = None
    questions: List[QuestionDraft] = field(default_factory=list)
