# domains/lessons/admin.py

from django.contrib import admin
from .models import Lesson


# --------------------------------------------------
# Lesson
# --------------------------------------------------

@admin.register(Lesson)
class LessonAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "title",
        "level",
        "created_by",
        "created_at",
    )
    list_display_links = ("id", "title")
    list_filter = ("level",)
    search_fields = ("title", "description", "content")
    ordering = ("-id",)
