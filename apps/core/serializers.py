# apps/core/serializers.py

import re

from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError, transaction
from django.db.models import Q
from rest_framework import serializers

from academy.domain.accounts.errors import UserExists

User = get_user_model()

USERNAME_RE = re.compile(r"^[A-Za-z0-9]+$")


# ------------------------------------
# User Base
# ------------------------------------

class UserSerializer(serializers.ModelSerializer):
    created_at = serializers.DateTimeField(source="date_joined", read_only=True)

    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "email",
            "role",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class UserBriefSerializer(serializers.ModelSerializer):
    """다른 리소스에 끼워 넣는 최소 정보"""
    class Meta:
        model = User
        fields = ["id", "username", "email"]


# ------------------------------------
# Register
# ------------------------------------

class RegisterSerializer(serializers.Serializer):
    username = serializers.CharField(min_length=3, max_length=30)
    email = serializers.EmailField()
    password = serializers.CharField(min_length=6, max_length=50, write_only=True)

    def validate_username(self, value):
        value = value.strip()
        if not USERNAME_RE.match(value):
            raise serializers.ValidationError("아이디는 영문/숫자만 사용할 수 있습니다.")
        return value

    def validate_email(self, value):
        return value.strip().lower()

    def validate(self, attrs):
        exists = User.objects.filter(
            Q(username=attrs["username"]) | Q(email__iexact=attrs["email"])
        ).exists()
        if exists:
            raise UserExists()

        try:
            validate_password(
                attrs["password"],
                user=User(username=attrs["username"], email=attrs["email"]),
            )
        except DjangoValidationError as e:
            raise serializers.ValidationError({"password": list(e.messages)})
        return attrs

    def create(self, validated_data):
        # 자가 가입은 항상 student (역할 승격은 관리자 API)
        try:
            with transaction.atomic():
                return User.objects.create_user(
                    username=validated_data["username"],
                    email=validated_data["email"],
                    password=validated_data["password"],
                    role=User.Role.STUDENT,
                )
        except IntegrityError:
            raise UserExists()


# ------------------------------------
# Role
# ------------------------------------

class RoleUpdateSerializer(serializers.Serializer):
    role = serializers.ChoiceField(choices=User.Role.choices)
