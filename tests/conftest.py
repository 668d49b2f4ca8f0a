import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from apps.core.models import User
from apps.domains.lessons.models import Lesson
from apps.domains.quizzes.models import Question, Quiz


def bearer(user) -> str:
    return "Bearer " + str(RefreshToken.for_user(user).access_token)


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_user(db):
    def _make(username, *, role=User.Role.STUDENT, password="pass12345", **extra):
        return User.objects.create_user(
            username=username,
            email=extra.pop("email", f"{username}@example.com"),
            password=password,
            role=role,
            **extra,
        )
    return _make


@pytest.fixture
def admin_user(make_user):
    return make_user("admin", role=User.Role.ADMIN, is_staff=True)


@pytest.fixture
def student(make_user):
    return make_user("john")


@pytest.fixture
def other_student(make_user):
    return make_user("jane")


@pytest.fixture
def client_for(api_client):
    """client_for(user) → 해당 사용자 access token 이 붙은 APIClient"""
    def _client(user):
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=bearer(user))
        return client
    return _client


@pytest.fixture
def admin_client(client_for, admin_user):
    return client_for(admin_user)


@pytest.fixture
def student_client(client_for, student):
    return client_for(student)


@pytest.fixture
def lesson(admin_user):
    return Lesson.objects.create(
        title="Introduction to JavaScript",
        description="basics",
        content="variables, types, functions",
        level=Lesson.Level.BEGINNER,
        created_by=admin_user,
    )


@pytest.fixture
def make_quiz(db):
    """
    make_quiz([(options, correct_index, points), ...]) → Quiz
    문항 순서는 목록 순서
    """
    def _make(questions, *, title="Quiz", lesson=None, created_by=None):
        quiz = Quiz.objects.create(title=title, lesson=lesson, created_by=created_by)
        for order, (options, correct_index, points) in enumerate(questions, start=1):
            Question.objects.create(
                quiz=quiz,
                order=order,
                question_text=f"Q{order}",
                options=list(options),
                correct_index=correct_index,
                points=points,
            )
        return quiz
    return _make


@pytest.fixture
def two_question_quiz(make_quiz, lesson, admin_user):
    """배점 1 (정답 0), 배점 2 (정답 1) → 총점 3"""
    return make_quiz(
        [(["a", "b", "c"], 0, 1), (["a", "b", "c"], 1, 2)],
        title="JavaScript Basics Quiz",
        lesson=lesson,
        created_by=admin_user,
    )
