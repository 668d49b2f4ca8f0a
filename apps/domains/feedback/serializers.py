from rest_framework import serializers

from .models import Feedback


class FeedbackSerializer(serializers.ModelSerializer):
    username = serializers.CharField(source="user.username", read_only=True)
    lesson_id = serializers.IntegerField(min_value=1)
    lesson_title = serializers.CharField(source="lesson.title", read_only=True)
    rating = serializers.IntegerField(min_value=1, max_value=5)
    comment = serializers.CharField(max_length=1000, required=False, allow_blank=True, default="")

    class Meta:
        model = Feedback
        fields = [
            "id",
            "user",
            "username",
            "lesson_id",
            "lesson_title",
            "rating",
            "comment",
            "created_at",
            "updated_at",
        ]
        read_only_fields = [
            "id",
            "user",
            "username",
            "lesson_title",
            "created_at",
            "updated_at",
        ]
        # (user, lesson) unique 는 뷰에서 409 로 처리
        validators = []
