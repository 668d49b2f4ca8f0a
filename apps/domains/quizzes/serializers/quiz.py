from rest_framework import serializers

from academy.domain.quizzes.entities import QuizDraft
from apps.domains.quizzes.models import Quiz

from .question import (
    QuestionInputSerializer,
    QuestionPublicSerializer,
    QuestionSerializer,
)


class QuizListSerializer(serializers.ModelSerializer):
    lesson_title = serializers.CharField(source="lesson.title", read_only=True, default=None)
    created_by_username = serializers.CharField(
        source="created_by.username",
        read_only=True,
        default=None,
    )
    question_count = serializers.IntegerField(read_only=True, default=0)
    total_points = serializers.IntegerField(read_only=True, default=0)

    class Meta:
        model = Quiz
        fields = [
            "id",
            "title",
            "description",
            "lesson",
            "lesson_title",
            "created_by",
            "created_by_username",
            "question_count",
            "total_points",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class QuizDetailSerializer(QuizListSerializer):
    """
    문항 포함 상세.
    context["include_answers"] 가 True 일 때만 correct_index 노출 (관리자)
    """
    questions = serializers.SerializerMethodField()

    class Meta(QuizListSerializer.Meta):
        fields = QuizListSerializer.Meta.fields + ["questions"]
        read_only_fields = fields

    def get_questions(self, obj):
        questions = obj.questions.all()
        if self.context.get("include_answers"):
            return QuestionSerializer(questions, many=True).data
        return QuestionPublicSerializer(questions, many=True).data


class QuizWriteSerializer(serializers.Serializer):
    """
    POST / PUT 입력 — 문항 세트 전체를 받는다 (부분 수정 없음)
    """
    title = serializers.CharField(max_length=200)
    description = serializers.CharField(max_length=500, required=False, allow_blank=True, default="")
    lesson_id = serializers.IntegerField(min_value=1, required=False, allow_null=True, default=None)
    questions = QuestionInputSerializer(many=True, allow_empty=False)

    def validate_title(self, value):
        value = (value or "").strip()
        if not value:
            raise serializers.ValidationError("제목은 비워둘 수 없습니다.")
        return value

    def to_draft(self) -> QuizDraft:
        data = self.validated_data
        return QuizDraft(
            title=data["title"],
            description=data.get("description") or "",
            lesson_id=data.get("lesson_id"),
            questions=[QuestionInputSerializer.to_draft(q) for q in data["questions"]],
        )
