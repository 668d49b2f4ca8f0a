# PATH: apps/api/config/settings/test.py
from .base import *

# ==================================================
# TEST MODE (pytest-django)
# ==================================================

DEBUG = False
ALLOWED_HOSTS = ["*"]

SECRET_KEY = "test-secret-key"
SIMPLE_JWT["SIGNING_KEY"] = "test-jwt-secret"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# 빠른 해시 (테스트 전용)
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

LOGGING["root"]["level"] = "WARNING"

# 테스트 간 캐시 공유로 429 가 나지 않게
REST_FRAMEWORK["DEFAULT_THROTTLE_CLASSES"] = []
