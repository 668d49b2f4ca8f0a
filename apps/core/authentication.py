# apps/core/authentication.py
"""
Access Control Gate — SimpleJWT JWTAuthentication 확장

Authorization: Bearer <access token>

🔥 실패 코드 (모두 401)
- 헤더 없음            : 인증 클래스는 None 반환 → 보호된 뷰에서 NotAuthenticated (TOKEN_MISSING)
- 서명 OK + exp 경과   : TOKEN_EXPIRED
- 서명/구조/헤더 불량  : INVALID_TOKEN
- 토큰 주체 row 없음   : USER_NOT_FOUND
- 비활성 사용자        : USER_INACTIVE
"""
from __future__ import annotations

import jwt
from django.utils.translation import gettext_lazy as _
from rest_framework import HTTP_HEADER_ENCODING
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken
from rest_framework_simplejwt.settings import api_settings

from academy.adapters.db.django import repositories_core as core_repo


# --------------------------------------------------
# Gate errors
# --------------------------------------------------

class GateAuthenticationFailed(AuthenticationFailed):
    error_code = "AUTHENTICATION_FAILED"


class TokenExpired(GateAuthenticationFailed):
    error_code = "TOKEN_EXPIRED"
    default_detail = _("토큰이 만료되었습니다.")


class TokenInvalid(GateAuthenticationFailed):
    error_code = "INVALID_TOKEN"
    default_detail = _("유효하지 않은 토큰입니다.")


class TokenUserNotFound(GateAuthenticationFailed):
    error_code = "USER_NOT_FOUND"
    default_detail = _("토큰의 사용자를 찾을 수 없습니다.")


class UserInactive(GateAuthenticationFailed):
    error_code = "USER_INACTIVE"
    default_detail = _("비활성화된 계정입니다.")


class InvalidCredentials(GateAuthenticationFailed):
    error_code = "INVALID_CREDENTIALS"
    default_detail = _("로그인 아이디 또는 비밀번호가 올바르지 않습니다.")


def classify_token_error(raw_token) -> GateAuthenticationFailed:
    """
    simplejwt 는 만료/위조를 모두 InvalidToken 으로 묶는다.
    서명 검증은 통과하고 exp 만 지난 경우를 PyJWT 로 다시 구분.
    """
    try:
        jwt.decode(
            raw_token,
            api_settings.SIGNING_KEY,
            algorithms=[api_settings.ALGORITHM],
        )
    except jwt.ExpiredSignatureError:
        return TokenExpired()
    except jwt.PyJWTError:
        return TokenInvalid()
    # 서명/만료는 정상이지만 토큰 타입 등이 맞지 않음 (refresh 를 access 로 사용 등)
    return TokenInvalid()


class AccessTokenAuthentication(JWTAuthentication):
    """DEFAULT_AUTHENTICATION_CLASSES 첫 번째 — 401 응답에 WWW-Authenticate 헤더를 붙인다."""

    def get_raw_token(self, header):
        parts = header.split()
        if not parts:
            return None

        header_types = {t.encode(HTTP_HEADER_ENCODING) for t in api_settings.AUTH_HEADER_TYPES}
        if parts[0] not in header_types or len(parts) != 2:
            # Authorization 헤더는 있는데 "Bearer <token>" 형식이 아님
            raise TokenInvalid()
        return parts[1]

    def get_validated_token(self, raw_token):
        try:
            return super().get_validated_token(raw_token)
        except InvalidToken:
            raise classify_token_error(raw_token)

    def get_user(self, validated_token):
        try:
            user_id = validated_token[api_settings.USER_ID_CLAIM]
        except KeyError:
            raise TokenInvalid()

        user = core_repo.user_get_by_id(user_id)
        if user is None:
            raise TokenUserNotFound()
        if not user.is_active:
            raise UserInactive()
        return user
