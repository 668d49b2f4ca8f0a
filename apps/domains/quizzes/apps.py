# PATH: apps/domains/quizzes/apps.py
# 역할: quizzes 도메인 앱 설정(AppConfig)

from django.apps import AppConfig


class QuizzesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.domains.quizzes"
    label = "quizzes"
