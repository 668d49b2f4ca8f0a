from datetime import timedelta
from types import SimpleNamespace

import pytest
from rest_framework_simplejwt.tokens import AccessToken, RefreshToken

from apps.core.models import User
from apps.core.permissions import IsAdmin, IsSelfOrAdmin, IsStudent

PROFILE_URL = "/api/v1/auth/profile/"


def _get(api_client, url, header=None):
    if header is not None:
        api_client.credentials(HTTP_AUTHORIZATION=header)
    return api_client.get(url)


@pytest.mark.django_db
class TestTokenVerification:
    def test_valid_token_resolves_user(self, api_client, student):
        token = AccessToken.for_user(student)
        res = _get(api_client, PROFILE_URL, f"Bearer {token}")
        assert res.status_code == 200
        assert res.data["id"] == student.id
        assert res.data["role"] == "student"

    def test_missing_token(self, api_client):
        res = api_client.get(PROFILE_URL)
        assert res.status_code == 401
        assert res.data["code"] == "TOKEN_MISSING"
        assert "detail" in res.data

    def test_expired_token(self, api_client, student):
        token = AccessToken.for_user(student)
        token.set_exp(lifetime=-timedelta(seconds=5))
        res = _get(api_client, PROFILE_URL, f"Bearer {token}")
        assert res.status_code == 401
        assert res.data["code"] == "TOKEN_EXPIRED"

    def test_garbage_token(self, api_client):
        res = _get(api_client, PROFILE_URL, "Bearer not-a-jwt")
        assert res.status_code == 401
        assert res.data["code"] == "INVALID_TOKEN"

    def test_wrong_scheme(self, api_client, student):
        token = AccessToken.for_user(student)
        res = _get(api_client, PROFILE_URL, f"Token {token}")
        assert res.status_code == 401
        assert res.data["code"] == "INVALID_TOKEN"

    def test_refresh_token_is_not_an_access_token(self, api_client, student):
        refresh = RefreshToken.for_user(student)
        res = _get(api_client, PROFILE_URL, f"Bearer {refresh}")
        assert res.status_code == 401
        assert res.data["code"] == "INVALID_TOKEN"

    def test_deleted_user(self, api_client, student):
        token = AccessToken.for_user(student)
        student.delete()
        res = _get(api_client, PROFILE_URL, f"Bearer {token}")
        assert res.status_code == 401
        assert res.data["code"] == "USER_NOT_FOUND"

    def test_inactive_user(self, api_client, student):
        token = AccessToken.for_user(student)
        student.is_active = False
        student.save(update_fields=["is_active"])
        res = _get(api_client, PROFILE_URL, f"Bearer {token}")
        assert res.status_code == 401
        assert res.data["code"] == "USER_INACTIVE"

    def test_bad_token_rejected_on_public_route(self, api_client):
        res = _get(api_client, "/api/v1/lessons/", "Bearer broken")
        assert res.status_code == 401


@pytest.mark.django_db
class TestRoleChecks:
    def test_admin_required(self, student_client):
        res = student_client.get("/api/v1/users/")
        assert res.status_code == 403
        assert res.data["code"] == "ADMIN_REQUIRED"

    def test_admin_passes(self, admin_client):
        res = admin_client.get("/api/v1/users/")
        assert res.status_code == 200

    def test_self_or_admin(self, student_client, student, other_student, admin_client):
        assert student_client.get(f"/api/v1/users/{student.id}/").status_code == 200

        res = student_client.get(f"/api/v1/users/{other_student.id}/")
        assert res.status_code == 403
        assert res.data["code"] == "ACCESS_DENIED"

        assert admin_client.get(f"/api/v1/users/{other_student.id}/").status_code == 200

    def test_non_numeric_id(self, admin_client):
        res = admin_client.get("/api/v1/users/abc/")
        assert res.status_code == 400
        assert res.data["code"] == "INVALID_ID"


class TestPermissionClasses:
    def _request(self, role):
        return SimpleNamespace(user=SimpleNamespace(is_authenticated=True, role=role, id=1))

    def test_student_only(self):
        assert IsStudent().has_permission(self._request(User.Role.STUDENT), None)
        assert not IsStudent().has_permission(self._request(User.Role.ADMIN), None)
        assert IsStudent.code == "STUDENT_REQUIRED"

    def test_admin_only(self):
        assert IsAdmin().has_permission(self._request(User.Role.ADMIN), None)
        assert not IsAdmin().has_permission(self._request(User.Role.STUDENT), None)

    def test_anonymous(self):
        request = SimpleNamespace(user=SimpleNamespace(is_authenticated=False))
        assert not IsAdmin().has_permission(request, None)
        assert not IsSelfOrAdmin().has_permission(request, None)

    def test_owner_by_object(self):
        request = self._request(User.Role.STUDENT)
        assert IsSelfOrAdmin().has_object_permission(request, None, SimpleNamespace(user_id=1))
        assert not IsSelfOrAdmin().has_object_permission(request, None, SimpleNamespace(user_id=2))
