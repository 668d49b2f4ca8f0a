"""
퀴즈 채점 규칙 — 순수 파이썬 (Django/ORM 미사용)

🔥 규칙
- 퀴즈의 "모든" 문항 배점이 total_points 에 들어간다 (답안 유무 무관)
- 제출 답안의 selected_index == 문항 correct_index 이면 배점만큼 score
- 같은 question_id 가 여러 번 오면 마지막 값이 이긴다
- 퀴즈에 속하지 않는 question_id 는 조용히 무시
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional

from academy.domain.quizzes.entities import QuestionKey


@dataclass(frozen=True)
class ScoreOutcome:
    score: int
    total_points: int


def percentage(score: int, total_points: int) -> int:
    """
    score / total_points * 100 을 반올림(half-up)한 정수.
    total_points 가 0 이면 0 (0 나누기 없음).
    """
    score = int(score or 0)
    total_points = int(total_points or 0)
    if total_points <= 0:
        return 0
    # floor(100 * score / total + 0.5) 를 정수 연산으로
    return (200 * score + total_points) // (2 * total_points)


def _as_int(v: Any) -> Optional[int]:
    if isinstance(v, bool):
        return None
    try:
        return int(v)
    except (TypeError, ValueError):
        return None


def answer_map(answers: Optional[Iterable[Mapping[str, Any]]]) -> Dict[int, int]:
    """
    [{"question_id": 1, "selected_index": 0}, ...] → {1: 0, ...}
    저장된 payload 를 다시 읽을 때도 사용하므로 형식이 깨진 항목은 건너뛴다.
    """
    out: Dict[int, int] = {}
    for a in answers or []:
        if not isinstance(a, Mapping):
            continue
        qid = _as_int(a.get("question_id"))
        selected = _as_int(a.get("selected_index"))
        if qid is None or selected is None:
            continue
        out[qid] = selected
    return out


def score_answers(
    questions: Iterable[QuestionKey],
    answers: Optional[Iterable[Mapping[str, Any]]],
) -> ScoreOutcome:
    selected_by_question = answer_map(answers)

    score = 0
    total_points = 0
    for q in questions:
        points = int(q.points or 0)
        total_points += points

        selected = selected_by_question.get(int(q.id))
        if selected is not None and selected == int(q.correct_index):
            score += points

    return ScoreOutcome(score=score, total_points=total_points)
