"""
도메인 공통: ID 파싱 / 요청 ID 생성 (외부 라이브러리 없음)
"""
from __future__ import annotations

import uuid
from typing import Any

from academy.domain.shared.errors import InvalidId


def generate_request_id() -> str:
    """로그/추적용 짧은 요청 ID."""
    return str(uuid.uuid4())[:8]


def parse_id(value: Any, *, label: str = "id") -> int:
    """
    URL/바디로 들어온 식별자를 양의 정수로 변환.
    숫자가 아니거나 0 이하이면 InvalidId.
    """
    if isinstance(value, bool):
        raise InvalidId(f"{label} 값이 올바르지 않습니다.")
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError):
        raise InvalidId(f"{label} 값이 올바르지 않습니다.")
    if parsed <= 0:
        raise InvalidId(f"{label} 값이 올바르지 않습니다.")
    return parsed
