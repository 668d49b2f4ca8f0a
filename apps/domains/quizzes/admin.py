# domains/quizzes/admin.py

from django.contrib import admin
from apps.domains.quizzes.models import Quiz, Question


class QuestionInline(admin.TabularInline):
    model = Question
    extra = 0
    ordering = ("order", "id")


@admin.register(Quiz)
class QuizAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "lesson", "created_by", "created_at")
    list_display_links = ("id", "title")
    search_fields = ("title", "description")
    inlines = [QuestionInline]
    ordering = ("-id",)


@admin.register(Question)
class QuestionAdmin(admin.ModelAdmin):
    list_display = ("id", "quiz", "order", "correct_index", "points")
    list_filter = ("quiz",)
