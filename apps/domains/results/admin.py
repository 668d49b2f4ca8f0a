# domains/results/admin.py

from django.contrib import admin
from apps.domains.results.models import QuizResult


@admin.register(QuizResult)
class QuizResultAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "quiz", "score", "total_points", "completed_at")
    list_filter = ("quiz",)
    search_fields = ("user__username", "quiz__title")
    ordering = ("-completed_at",)
