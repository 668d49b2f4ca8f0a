# PATH: apps/domains/feedback/apps.py
# 역할: feedback 도메인 앱 설정(AppConfig)

from django.apps import AppConfig


class FeedbackConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.domains.feedback"
    label = "feedback"
