"""
공통 API 뷰
"""
import logging

from django.db import DatabaseError, connection
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def health_check(request):
    """
    헬스체크 엔드포인트

    Returns:
        - 200: 모든 시스템 정상
        - 503: 데이터베이스 연결 실패
    """
    try:
        # 데이터베이스 연결 확인
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError:
        logger.warning("health check: database unreachable", exc_info=True)
        return JsonResponse({
            "status": "unhealthy",
            "service": "quiz-api",
            "database": "disconnected",
        }, status=503)

    return JsonResponse({
        "status": "healthy",
        "service": "quiz-api",
        "database": "connected",
    }, status=200)


def route_not_found(request, exception=None):
    """
    handler404 — 등록되지 않은 경로도 API 오류 포맷으로
    (DEBUG=False 일 때만 Django 가 사용)
    """
    return JsonResponse({
        "detail": "요청한 경로를 찾을 수 없습니다.",
        "code": "ROUTE_NOT_FOUND",
    }, status=404)
