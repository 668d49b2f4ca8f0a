from rest_framework import serializers

from academy.domain.quizzes.entities import MAX_OPTIONS, MIN_OPTIONS, QuestionDraft
from apps.domains.quizzes.models import Question


class QuestionSerializer(serializers.ModelSerializer):
    """관리자용 (정답 포함)"""
    class Meta:
        model = Question
        fields = [
            "id",
            "order",
            "question_text",
            "options",
            "correct_index",
            "points",
        ]
        read_only_fields = fields


class QuestionPublicSerializer(serializers.ModelSerializer):
    """응시자용 — correct_index 제외"""
    class Meta:
        model = Question
        fields = [
            "id",
            "order",
            "question_text",
            "options",
            "points",
        ]
        read_only_fields = fields


class QuestionInputSerializer(serializers.Serializer):
    """생성/교체 입력. 순서는 배열 순서를 그대로 사용."""

    question_text = serializers.CharField()
    options = serializers.ListField(
        child=serializers.CharField(allow_blank=False),
        min_length=MIN_OPTIONS,
        max_length=MAX_OPTIONS,
    )
    correct_index = serializers.IntegerField(min_value=0)
    points = serializers.IntegerField(min_value=1, required=False, default=1)

    def validate(self, attrs):
        if attrs["correct_index"] >= len(attrs["options"]):
            raise serializers.ValidationError(
                {"correct_index": "정답 인덱스가 보기 범위를 벗어났습니다."}
            )
        return attrs

    @staticmethod
    def to_draft(attrs) -> QuestionDraft:
        return QuestionDraft(
            question_text=attrs["question_text"],
            options=list(attrs["options"]),
            correct_index=int(attrs["correct_index"]),
            points=int(attrs.get("points") or 1),
        )
