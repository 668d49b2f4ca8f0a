"""
계정 도메인 오류 — 순수 파이썬
"""
from __future__ import annotations

from academy.domain.shared.errors import ConflictError, NotFoundError


class UserExists(ConflictError):
    code = "USER_EXISTS"
    default_message = "이미 사용 중인 아이디 또는 이메일입니다."


class UserNotFound(NotFoundError):
    code = "USER_NOT_FOUND"
    default_message = "사용자를 찾을 수 없습니다."
