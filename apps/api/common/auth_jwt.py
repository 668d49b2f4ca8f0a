# JWT 발급 (로그인). 응답에 토큰 + 사용자 정보를 함께 싣는다.
from __future__ import annotations

import logging

from django.contrib.auth.models import update_last_login
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.views import TokenObtainPairView

from academy.adapters.db.django import repositories_core as core_repo
from apps.core.authentication import InvalidCredentials, UserInactive

logger = logging.getLogger(__name__)


class LoginTokenObtainPairSerializer(TokenObtainPairSerializer):
    """아이디/비밀번호 확인 후 access/refresh + user 반환."""

    def validate(self, attrs):
        from apps.core.serializers import UserSerializer

        username = (attrs.get("username") or "").strip()
        password = attrs.get("password") or ""

        user = core_repo.user_get_by_username(username)
        if not user or not user.check_password(password):
            logger.info("login failed: username=%s", username)
            raise InvalidCredentials()
        if not user.is_active:
            raise UserInactive()

        refresh = self.get_token(user)
        if api_settings.UPDATE_LAST_LOGIN:
            update_last_login(None, user)

        return {
            "refresh": str(refresh),
            "access": str(refresh.access_token),
            "user": UserSerializer(user).data,
        }


class LoginTokenObtainPairView(TokenObtainPairView):
    serializer_class = LoginTokenObtainPairSerializer

    def get_authenticate_header(self, request):
        # authentication_classes = () 라서 기본값이 없으면 DRF 가 401 을 403 으로 바꾼다
        return '{} realm="api"'.format(api_settings.AUTH_HEADER_TYPES[0])
