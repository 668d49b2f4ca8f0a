# -*- coding: utf-8 -*-

import django_filters

from .models import Lesson


# ==================================================
# Lesson Filter
# ==================================================

class LessonFilter(django_filters.FilterSet):
    level = django_filters.ChoiceFilter(choices=Lesson.Level.choices)
    created_by = django_filters.NumberFilter(field_name="created_by_id")

    class Meta:
        model = Lesson
        fields = []
