from rest_framework import serializers

from .models import Lesson


class LessonSerializer(serializers.ModelSerializer):
    created_by_username = serializers.CharField(
        source="created_by.username",
        read_only=True,
        default=None,
    )
    quiz_count = serializers.IntegerField(read_only=True, required=False)

    class Meta:
        model = Lesson
        fields = [
            "id",
            "title",
            "description",
            "content",
            "video_url",
            "level",
            "created_by",
            "created_by_username",
            "quiz_count",
            "created_at",
            "updated_at",
        ]
        read_only_fields = [
            "id",
            "created_by",
            "created_by_username",
            "quiz_count",
            "created_at",
            "updated_at",
        ]

    def validate_title(self, value):
        value = (value or "").strip()
        if not value:
            raise serializers.ValidationError("제목은 비워둘 수 없습니다.")
        return value
