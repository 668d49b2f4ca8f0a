import json
from unittest import mock

import pytest
from django.core.cache import cache
from django.db import OperationalError
from django.http import Http404
from django.test import RequestFactory
from rest_framework import exceptions
from rest_framework.throttling import AnonRateThrottle

from academy.domain.quizzes.errors import QuizNotFound
from academy.domain.results.errors import AlreadyCompleted
from academy.domain.shared.errors import InvalidId
from apps.api.common.exceptions import api_exception_handler
from apps.api.common.middleware import UnhandledExceptionMiddleware
from apps.domains.lessons.views import LessonViewSet


class TestExceptionHandler:
    def test_domain_errors_map_by_kind(self):
        for exc, status, code in [
            (InvalidId(), 400, "INVALID_ID"),
            (QuizNotFound(), 404, "QUIZ_NOT_FOUND"),
            (AlreadyCompleted(), 409, "QUIZ_ALREADY_COMPLETED"),
        ]:
            res = api_exception_handler(exc, {})
            assert res.status_code == status
            assert res.data == {"detail": exc.message, "code": code}

    def test_operational_error_is_503(self):
        res = api_exception_handler(OperationalError("could not connect to server"), {})
        assert res.status_code == 503
        assert res.data["code"] == "SERVICE_UNAVAILABLE"

    def test_statement_timeout(self):
        res = api_exception_handler(OperationalError("canceling statement due to statement timeout"), {})
        assert res.status_code == 503
        assert res.data["code"] == "DB_TIMEOUT"

    def test_http404(self):
        res = api_exception_handler(Http404(), {})
        assert res.status_code == 404
        assert res.data["code"] == "NOT_FOUND"

    def test_permission_code_passes_through(self):
        res = api_exception_handler(exceptions.PermissionDenied("nope", code="ADMIN_REQUIRED"), {})
        assert res.status_code == 403
        assert res.data == {"detail": "nope", "code": "ADMIN_REQUIRED"}

    def test_validation_error_keeps_field_errors(self):
        res = api_exception_handler(exceptions.ValidationError({"rating": ["bad"]}), {})
        assert res.status_code == 400
        assert res.data["code"] == "VALIDATION_ERROR"
        assert res.data["errors"] == {"rating": ["bad"]}

    def test_unknown_exception_is_left_to_middleware(self):
        assert api_exception_handler(RuntimeError("boom"), {}) is None


class TestUnhandledExceptionMiddleware:
    def test_returns_500_without_internals(self, settings):
        settings.CORS_ALLOWED_ORIGINS = ["http://localhost:3000"]
        request = RequestFactory().get("/api/v1/lessons/", HTTP_ORIGIN="http://localhost:3000")
        middleware = UnhandledExceptionMiddleware(lambda r: None)

        res = middleware.process_exception(request, RuntimeError("SELECT secret FROM table"))

        assert res.status_code == 500
        body = json.loads(res.content)
        assert body["code"] == "INTERNAL_ERROR"
        assert body["reference"]
        assert "secret" not in res.content.decode()
        assert res["Access-Control-Allow-Origin"] == "http://localhost:3000"


@pytest.mark.django_db
class TestHealthCheck:
    def test_healthy(self, client):
        res = client.get("/health/")
        assert res.status_code == 200
        assert res.json()["database"] == "connected"

    def test_database_down(self, client):
        with mock.patch("apps.api.common.views.connection") as conn:
            conn.cursor.side_effect = OperationalError("down")
            res = client.get("/health/")
        assert res.status_code == 503
        assert res.json()["status"] == "unhealthy"


@pytest.mark.django_db
class TestUnknownRoute:
    def test_json_404(self, client):
        res = client.get("/api/v1/does-not-exist/")
        assert res.status_code == 404
        assert res.json()["code"] == "ROUTE_NOT_FOUND"


class TwoPerMinuteAnonThrottle(AnonRateThrottle):
    rate = "2/min"


@pytest.mark.django_db
class TestRateLimiting:
    def test_third_request_throttled(self, client):
        cache.clear()
        with mock.patch.object(LessonViewSet, "throttle_classes", [TwoPerMinuteAnonThrottle]):
            codes = [client.get("/api/v1/lessons/").status_code for _ in range(2)]
            res = client.get("/api/v1/lessons/")
        cache.clear()

        assert codes == [200, 200]
        assert res.status_code == 429
        assert res.json()["code"] == "THROTTLED"
