# apps/api/common/exceptions.py
"""
DRF EXCEPTION_HANDLER — 모든 API 오류를 단일 포맷으로

    {"detail": "<메시지>", "code": "<CODE>"}            # 일반
    {"detail": ..., "code": "VALIDATION_ERROR", "errors": {...}}  # 검증 실패

🔥 매핑
- academy.domain DomainError  : kind → HTTP status (code 는 그대로)
- DRF APIException            : status 유지, code 정규화
- django OperationalError     : 503 (SERVICE_UNAVAILABLE / DB_TIMEOUT)
- 그 외                        : None 반환 → UnhandledExceptionMiddleware 가 500
"""
from __future__ import annotations

import logging

from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.db import OperationalError
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from academy.domain.shared.errors import DomainError, StorageTimeout, UnavailableError

logger = logging.getLogger(__name__)


DOMAIN_KIND_STATUS = {
    "validation": status.HTTP_400_BAD_REQUEST,
    "not_found": status.HTTP_404_NOT_FOUND,
    "conflict": status.HTTP_409_CONFLICT,
    "unavailable": status.HTTP_503_SERVICE_UNAVAILABLE,
}

# DRF 기본 예외 → 고정 code
DRF_EXCEPTION_CODES = [
    (exceptions.NotAuthenticated, "TOKEN_MISSING"),
    (exceptions.AuthenticationFailed, "AUTHENTICATION_FAILED"),
    (exceptions.PermissionDenied, "ACCESS_DENIED"),
    (exceptions.NotFound, "NOT_FOUND"),
    (exceptions.MethodNotAllowed, "METHOD_NOT_ALLOWED"),
    (exceptions.NotAcceptable, "NOT_ACCEPTABLE"),
    (exceptions.UnsupportedMediaType, "UNSUPPORTED_MEDIA_TYPE"),
    (exceptions.ParseError, "PARSE_ERROR"),
    (exceptions.Throttled, "THROTTLED"),
    (exceptions.ValidationError, "VALIDATION_ERROR"),
]

TIMEOUT_MARKERS = ("statement timeout", "canceling statement", "timeout expired", "timed out")


def _error_body(detail, code, errors=None) -> dict:
    body = {"detail": str(detail), "code": str(code)}
    if errors is not None:
        body["errors"] = errors
    return body


def _storage_error(exc: OperationalError) -> UnavailableError:
    text = str(exc).lower()
    if any(marker in text for marker in TIMEOUT_MARKERS):
        return StorageTimeout()
    return UnavailableError()


def domain_error_response(exc: DomainError) -> Response:
    http_status = DOMAIN_KIND_STATUS.get(exc.kind, status.HTTP_400_BAD_REQUEST)
    return Response(_error_body(exc.message, exc.code), status=http_status)


def _drf_code(exc: exceptions.APIException) -> str:
    # 인증/권한 클래스에서 명시한 code 가 있으면 우선
    explicit = getattr(exc, "error_code", None)
    if explicit:
        return explicit
    # permission.code 처럼 raise 시 넘긴 대문자 code
    codes = exc.get_codes()
    if isinstance(codes, str) and codes.isupper():
        return codes
    for klass, code in DRF_EXCEPTION_CODES:
        if isinstance(exc, klass):
            return code
    return "ERROR"


def _drf_detail(exc: exceptions.APIException) -> str:
    detail = exc.detail
    if isinstance(detail, dict):
        detail = detail.get("detail", None) or "입력값이 올바르지 않습니다."
    elif isinstance(detail, list):
        detail = detail[0] if detail else "입력값이 올바르지 않습니다."
    return str(detail)


def api_exception_handler(exc, context):
    # -------------------------------------------------
    # 1) 도메인 오류
    # -------------------------------------------------
    if isinstance(exc, DomainError):
        if exc.kind == "unavailable":
            logger.warning("storage unavailable: %s", exc.code)
        return domain_error_response(exc)

    # -------------------------------------------------
    # 2) 저장소 장애 (연결 실패 / statement_timeout)
    # -------------------------------------------------
    if isinstance(exc, OperationalError):
        logger.warning("database operational error: %s", exc.__class__.__name__)
        return domain_error_response(_storage_error(exc))

    # -------------------------------------------------
    # 3) DRF / Django 기본 예외
    # -------------------------------------------------
    if isinstance(exc, Http404):
        exc = exceptions.NotFound()
    elif isinstance(exc, DjangoPermissionDenied):
        exc = exceptions.PermissionDenied()

    response = drf_exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, exceptions.APIException):
        code = _drf_code(exc)
        errors = None
        if isinstance(exc, exceptions.ValidationError):
            errors = exc.detail if isinstance(exc.detail, (dict, list)) else [exc.detail]
            detail = "입력값이 올바르지 않습니다."
        else:
            detail = _drf_detail(exc)
        response.data = _error_body(detail, code, errors)

    return response
