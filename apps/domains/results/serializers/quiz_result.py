from rest_framework import serializers

from academy.domain.results.scoring import percentage
from apps.domains.results.models import QuizResult


# ======================================================
# Input
# ======================================================

class AnswerInputSerializer(serializers.Serializer):
    question_id = serializers.IntegerField(min_value=1)
    selected_index = serializers.IntegerField(min_value=0)


class QuizSubmitSerializer(serializers.Serializer):
    """
    POST /quiz-results/
    {"quiz_id": 3, "answers": [{"question_id": 12, "selected_index": 0}, ...]}

    answers 는 빈 목록 허용 (전 문항 0점 처리)
    """
    quiz_id = serializers.IntegerField(min_value=1)
    answers = AnswerInputSerializer(many=True, allow_empty=True)


# ======================================================
# Output
# ======================================================

class _PercentageMixin(serializers.Serializer):
    percentage = serializers.SerializerMethodField()

    def get_percentage(self, obj) -> int:
        return percentage(obj.score, obj.total_points)


class QuizResultSerializer(_PercentageMixin, serializers.ModelSerializer):
    quiz_title = serializers.CharField(source="quiz.title", read_only=True)

    class Meta:
        model = QuizResult
        fields = [
            "id",
            "user",
            "quiz",
            "quiz_title",
            "score",
            "total_points",
            "percentage",
            "answers",
            "completed_at",
        ]
        read_only_fields = fields


class LeaderboardRowSerializer(_PercentageMixin, serializers.ModelSerializer):
    rank = serializers.IntegerField(read_only=True)
    user_id = serializers.IntegerField(read_only=True)
    username = serializers.CharField(source="user.username", read_only=True)
    email = serializers.EmailField(source="user.email", read_only=True)

    class Meta:
        model = QuizResult
        fields = [
            "rank",
            "id",
            "user_id",
            "username",
            "email",
            "score",
            "total_points",
            "percentage",
            "completed_at",
        ]
        read_only_fields = fields


class UserHistoryRowSerializer(_PercentageMixin, serializers.ModelSerializer):
    quiz_id = serializers.IntegerField(read_only=True)
    quiz_title = serializers.CharField(source="quiz.title", read_only=True)
    quiz_description = serializers.CharField(source="quiz.description", read_only=True)
    lesson_id = serializers.IntegerField(source="quiz.lesson_id", read_only=True, default=None)
    lesson_title = serializers.CharField(source="quiz.lesson.title", read_only=True, default=None)

    class Meta:
        model = QuizResult
        fields = [
            "id",
            "quiz_id",
            "quiz_title",
            "quiz_description",
            "lesson_id",
            "lesson_title",
            "score",
            "total_points",
            "percentage",
            "completed_at",
        ]
        read_only_fields = fields


class QuizStatisticsSerializer(serializers.Serializer):
    total_attempts = serializers.IntegerField()
    average_percentage = serializers.FloatField()
    highest_percentage = serializers.FloatField()
    lowest_percentage = serializers.FloatField()


class SubmissionResultSerializer(serializers.Serializer):
    """submit_quiz 결과 (QuizAttempt) 응답 — QuizResultSerializer 와 같은 모양"""
    id = serializers.IntegerField()
    user = serializers.IntegerField(source="user_id")
    quiz = serializers.IntegerField(source="quiz_id")
    quiz_title = serializers.CharField()
    score = serializers.IntegerField()
    total_points = serializers.IntegerField()
    percentage = serializers.IntegerField()
    answers = serializers.ListField(child=serializers.DictField())
    completed_at = serializers.DateTimeField()
