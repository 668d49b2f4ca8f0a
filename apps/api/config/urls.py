from django.contrib import admin
from django.urls import path, include

from drf_yasg import openapi
from drf_yasg.views import get_schema_view
from rest_framework import permissions

from apps.api.common.views import health_check


schema_view = get_schema_view(
    openapi.Info(
        title="Quiz API",
        default_version="v1",
        description="레슨 / 퀴즈 / 결과 / 피드백 API",
    ),
    public=True,
    permission_classes=[permissions.AllowAny],
)


handler404 = "apps.api.common.views.route_not_found"

urlpatterns = [
    # =========================
    # Admin
    # =========================
    path("admin/", admin.site.urls),

    # =========================
    # Health (인증 없음)
    # =========================
    path("health/", health_check, name="health"),

    # =========================
    # API v1
    # =========================
    path("api/v1/", include("apps.api.v1.urls")),

    # =========================
    # Docs
    # =========================
    path("swagger/", schema_view.with_ui("swagger", cache_timeout=0), name="schema-swagger"),
    path("redoc/", schema_view.with_ui("redoc", cache_timeout=0), name="schema-redoc"),
]
