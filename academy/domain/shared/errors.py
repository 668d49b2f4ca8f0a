"""
도메인 공통 오류 — 순수 파이썬 (Django/DRF 미사용)

모든 도메인 오류는 다음을 가진다:
  - code    : 클라이언트가 분기할 수 있는 고정 문자열 (예: QUIZ_NOT_FOUND)
  - kind    : 오류 분류 (validation / not_found / conflict / unavailable)
  - message : 사람이 읽는 메시지

HTTP 상태 매핑은 apps.api.common.exceptions 에서만 수행한다.
"""
from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    kind = "error"
    code = "DOMAIN_ERROR"
    default_message = "요청을 처리할 수 없습니다."

    def __init__(self, message: Optional[str] = None, *, code: Optional[str] = None):
        self.message = str(message or self.default_message)
        if code:
            self.code = str(code)
        super().__init__(self.message)


class InvalidInputError(DomainError):
    kind = "validation"
    code = "VALIDATION_ERROR"
    default_message = "입력값이 올바르지 않습니다."


class InvalidId(InvalidInputError):
    code = "INVALID_ID"
    default_message = "ID 형식이 올바르지 않습니다."


class NotFoundError(DomainError):
    kind = "not_found"
    code = "NOT_FOUND"
    default_message = "대상을 찾을 수 없습니다."


class ConflictError(DomainError):
    kind = "conflict"
    code = "CONFLICT"
    default_message = "이미 존재하거나 충돌하는 요청입니다."


class UnavailableError(DomainError):
    kind = "unavailable"
    code = "SERVICE_UNAVAILABLE"
    default_message = "저장소를 일시적으로 사용할 수 없습니다."


class StorageTimeout(UnavailableError):
    code = "DB_TIMEOUT"
    default_message = "저장소 응답 시간이 초과되었습니다."
