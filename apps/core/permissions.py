#apps/core/permissions.py

from rest_framework.permissions import BasePermission

from academy.domain.shared.ids import parse_id
from apps.core.models import User


def _role(request):
    user = request.user
    if not (user and user.is_authenticated):
        return None
    return getattr(user, "role", None)


class IsAdmin(BasePermission):
    """
    관리자 전용 Permission
    """
    message = "관리자 권한이 필요합니다."
    code = "ADMIN_REQUIRED"

    def has_permission(self, request, view):
        return _role(request) == User.Role.ADMIN


class IsStudent(BasePermission):
    """
    학생 전용 Permission
    """
    message = "학생 계정이 필요합니다."
    code = "STUDENT_REQUIRED"

    def has_permission(self, request, view):
        return _role(request) == User.Role.STUDENT


class IsSelfOrAdmin(BasePermission):
    """
    본인 또는 관리자

    - view.owner_url_kwarg 가 있으면 그 URL kwarg 를 대상 사용자 id 로 판정
    - 객체 단위 판정은 obj.user_id / obj.id 기준
    """
    message = "본인 또는 관리자만 접근할 수 있습니다."
    code = "ACCESS_DENIED"

    def has_permission(self, request, view):
        role = _role(request)
        if role is None:
            return False
        if role == User.Role.ADMIN:
            return True

        key = getattr(view, "owner_url_kwarg", None)
        kwargs = getattr(view, "kwargs", None) or {}
        if key and key in kwargs:
            # 숫자가 아닌 id 는 권한 판정 전에 INVALID_ID (400)
            return parse_id(kwargs[key], label=key) == request.user.id
        return True

    def has_object_permission(self, request, view, obj):
        if _role(request) == User.Role.ADMIN:
            return True
        owner_id = getattr(obj, "user_id", None)
        if owner_id is None and isinstance(obj, User):
            owner_id = obj.id
        return owner_id == request.user.id
