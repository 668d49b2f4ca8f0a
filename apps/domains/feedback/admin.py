# domains/feedback/admin.py

from django.contrib import admin
from .models import Feedback


@admin.register(Feedback)
class FeedbackAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "lesson", "rating", "created_at")
    list_filter = ("rating",)
    search_fields = ("user__username", "lesson__title", "comment")
    ordering = ("-id",)
