# PATH: apps/domains/results/views/submit_quiz_view.py
"""
Quiz Submission

POST /quiz-results/
{"quiz_id": 3, "answers": [{"question_id": 12, "selected_index": 0}, ...]}

- 채점/저장은 submit_quiz use case (단일 트랜잭션)
- 이미 응시한 퀴즈 → 409 QUIZ_ALREADY_COMPLETED
"""

from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated

from drf_yasg.utils import swagger_auto_schema

from academy.adapters.db.django.uow import DjangoUnitOfWork
from academy.application.use_cases.results.submit_quiz import submit_quiz
from apps.domains.results.serializers.quiz_result import (
    QuizSubmitSerializer,
    SubmissionResultSerializer,
)


class QuizSubmitView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        request_body=QuizSubmitSerializer,
        responses={201: SubmissionResultSerializer},
    )
    def post(self, request):
        serializer = QuizSubmitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        # 검증은 serializer, 저장은 제출된 answers 원본 그대로
        attempt = submit_quiz(
            DjangoUnitOfWork(),
            user_id=request.user.id,
            quiz_id=serializer.validated_data["quiz_id"],
            answers=list(request.data["answers"]),
        )
        return Response(
            SubmissionResultSerializer(attempt).data,
            status=status.HTTP_201_CREATED,
        )
