# apps/core/views.py

import logging

from django.contrib.auth import get_user_model
from django.db.models import Count, Q
from django.utils import timezone

from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken

from drf_yasg.utils import swagger_auto_schema

from academy.domain.accounts.errors import UserNotFound
from apps.api.common.mixins import ParsedLookupMixin
from apps.api.common.pagination import PageLimitPagination
from apps.core.permissions import IsAdmin, IsSelfOrAdmin
from apps.core.serializers import (
    RegisterSerializer,
    RoleUpdateSerializer,
    UserSerializer,
)

logger = logging.getLogger(__name__)

User = get_user_model()


def _token_pair(user) -> dict:
    refresh = RefreshToken.for_user(user)
    return {
        "refresh": str(refresh),
        "access": str(refresh.access_token),
    }


# --------------------------------------------------
# Auth: /auth/register/
# --------------------------------------------------

class RegisterView(APIView):
    permission_classes = [AllowAny]

    @swagger_auto_schema(request_body=RegisterSerializer, responses={201: UserSerializer})
    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()

        logger.info("user registered: user_id=%s", user.id)
        return Response(
            {"user": UserSerializer(user).data, **_token_pair(user)},
            status=status.HTTP_201_CREATED,
        )


# --------------------------------------------------
# Auth: /auth/profile/
# --------------------------------------------------

class ProfileView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(responses={200: UserSerializer})
    def get(self, request):
        return Response(UserSerializer(request.user).data)


# --------------------------------------------------
# Users (admin / self)
# --------------------------------------------------

class UserViewSet(ParsedLookupMixin, viewsets.ReadOnlyModelViewSet):
    """
    GET  /users/                 admin
    GET  /users/{id}/            본인 또는 admin
    PUT  /users/{id}/role/       admin
    GET  /users/stats/overview/  admin
    """

    serializer_class = UserSerializer
    not_found_error = UserNotFound
    pagination_class = PageLimitPagination
    owner_url_kwarg = "pk"

    def get_queryset(self):
        return User.objects.all().order_by("-date_joined", "-id")

    def get_permissions(self):
        if self.action == "retrieve":
            return [IsAuthenticated(), IsSelfOrAdmin()]
        return [IsAuthenticated(), IsAdmin()]

    @swagger_auto_schema(request_body=RoleUpdateSerializer, responses={200: UserSerializer})
    @action(detail=True, methods=["put"], url_path="role")
    def role(self, request, pk=None):
        user = self.get_object()
        serializer = RoleUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user.role = serializer.validated_data["role"]
        user.save(update_fields=["role", "updated_at"])

        logger.info("user role changed: user_id=%s role=%s by=%s", user.id, user.role, request.user.id)
        return Response(UserSerializer(user).data)

    @action(detail=False, methods=["get"], url_path="stats/overview")
    def stats_overview(self, request):
        today = timezone.localdate()
        stats = User.objects.aggregate(
            total_users=Count("id"),
            students=Count("id", filter=Q(role=User.Role.STUDENT)),
            admins=Count("id", filter=Q(role=User.Role.ADMIN)),
            registered_today=Count("id", filter=Q(date_joined__date=today)),
        )
        return Response({k: int(v or 0) for k, v in stats.items()})
