from .base import *

DEBUG = True
ALLOWED_HOSTS = ["*"]

# 로컬 프론트 어디서든
CORS_ALLOW_ALL_ORIGINS = True

# 🔴 base 설정 유지 + 브라우저 API 화면용 렌더러만 추가
REST_FRAMEWORK["DEFAULT_RENDERER_CLASSES"] = [
    "rest_framework.renderers.JSONRenderer",
    "rest_framework.renderers.BrowsableAPIRenderer",
]

LOGGING["root"]["level"] = os.getenv("LOG_LEVEL", "DEBUG").upper()
