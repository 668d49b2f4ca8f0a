import pytest

from apps.domains.quizzes.models import Question, Quiz
from apps.domains.results.models import QuizResult


def _payload(lesson_id=None, **overrides):
    data = {
        "title": "JavaScript Basics Quiz",
        "description": "fundamentals",
        "lesson_id": lesson_id,
        "questions": [
            {"question_text": "declare?", "options": ["var name;", "v name;"], "correct_index": 0, "points": 1},
            {"question_text": "typeof null?", "options": ["null", "object", "undefined"], "correct_index": 1, "points": 2},
        ],
    }
    data.update(overrides)
    return data


@pytest.mark.django_db
class TestQuizRead:
    def test_list_counts(self, api_client, two_question_quiz):
        res = api_client.get("/api/v1/quizzes/")
        assert res.status_code == 200
        row = res.data["results"][0]
        assert row["question_count"] == 2
        assert row["total_points"] == 3
        assert row["lesson_title"] == "Introduction to JavaScript"
        assert row["created_by_username"] == "admin"

    def test_detail_hides_answers_from_students(self, api_client, student_client, two_question_quiz):
        for client in (api_client, student_client):
            questions = client.get(f"/api/v1/quizzes/{two_question_quiz.id}/").data["questions"]
            assert [q["order"] for q in questions] == [1, 2]
            assert all("correct_index" not in q for q in questions)

    def test_detail_shows_answers_to_admin(self, admin_client, two_question_quiz):
        questions = admin_client.get(f"/api/v1/quizzes/{two_question_quiz.id}/").data["questions"]
        assert [q["correct_index"] for q in questions] == [0, 1]

    def test_missing(self, api_client, db):
        res = api_client.get("/api/v1/quizzes/555/")
        assert res.status_code == 404
        assert res.data["code"] == "QUIZ_NOT_FOUND"

    def test_by_lesson(self, api_client, two_question_quiz, make_quiz, lesson):
        make_quiz([(["a", "b"], 0, 1)], title="Unlinked")
        res = api_client.get(f"/api/v1/quizzes/lesson/{lesson.id}/")
        assert res.status_code == 200
        assert [r["id"] for r in res.data["results"]] == [two_question_quiz.id]

        res = api_client.get("/api/v1/quizzes/lesson/999/")
        assert res.data["code"] == "LESSON_NOT_FOUND"


@pytest.mark.django_db
class TestQuizWrite:
    def test_create(self, admin_client, admin_user, lesson):
        res = admin_client.post("/api/v1/quizzes/", _payload(lesson.id), format="json")
        assert res.status_code == 201
        assert res.data["question_count"] == 2
        assert res.data["total_points"] == 3
        assert res.data["created_by"] == admin_user.id
        assert [q["question_text"] for q in res.data["questions"]] == ["declare?", "typeof null?"]

    def test_create_requires_admin(self, student_client):
        res = student_client.post("/api/v1/quizzes/", _payload(), format="json")
        assert res.status_code == 403
        assert not Quiz.objects.exists()

    def test_create_unknown_lesson_writes_nothing(self, admin_client):
        res = admin_client.post("/api/v1/quizzes/", _payload(lesson_id=999), format="json")
        assert res.status_code == 404
        assert res.data["code"] == "LESSON_NOT_FOUND"
        assert not Quiz.objects.exists()

    @pytest.mark.parametrize(
        "question",
        [
            {"question_text": "q", "options": ["only"], "correct_index": 0},
            {"question_text": "q", "options": list("abcdefg"), "correct_index": 0},
            {"question_text": "q", "options": ["a", "b"], "correct_index": 2},
            {"question_text": "q", "options": ["a", "b"], "correct_index": 0, "points": 0},
        ],
    )
    def test_create_rejects_bad_questions(self, admin_client, question):
        res = admin_client.post("/api/v1/quizzes/", _payload(questions=[question]), format="json")
        assert res.status_code == 400
        assert res.data["code"] == "VALIDATION_ERROR"
        assert not Quiz.objects.exists()

    def test_create_requires_questions(self, admin_client):
        res = admin_client.post("/api/v1/quizzes/", _payload(questions=[]), format="json")
        assert res.status_code == 400

    def test_update_replaces_question_set(self, admin_client, two_question_quiz):
        old_ids = set(two_question_quiz.questions.values_list("id", flat=True))
        payload = _payload(
            title="Renamed",
            questions=[{"question_text": "only one", "options": ["x", "y"], "correct_index": 1, "points": 5}],
        )
        res = admin_client.put(f"/api/v1/quizzes/{two_question_quiz.id}/", payload, format="json")
        assert res.status_code == 200
        assert res.data["title"] == "Renamed"
        assert res.data["lesson"] is None
        assert [q["question_text"] for q in res.data["questions"]] == ["only one"]
        assert res.data["total_points"] == 5
        assert not Question.objects.filter(id__in=old_ids).exists()

    def test_update_failure_keeps_old_questions(self, admin_client, two_question_quiz):
        res = admin_client.put(
            f"/api/v1/quizzes/{two_question_quiz.id}/",
            _payload(lesson_id=999),
            format="json",
        )
        assert res.status_code == 404
        assert two_question_quiz.questions.count() == 2

    def test_update_missing(self, admin_client):
        res = admin_client.put("/api/v1/quizzes/999/", _payload(), format="json")
        assert res.status_code == 404
        assert res.data["code"] == "QUIZ_NOT_FOUND"

    def test_patch_not_allowed(self, admin_client, two_question_quiz):
        res = admin_client.patch(f"/api/v1/quizzes/{two_question_quiz.id}/", {"title": "x"}, format="json")
        assert res.status_code == 405
        assert res.data["code"] == "METHOD_NOT_ALLOWED"

    def test_delete_cascades(self, admin_client, two_question_quiz, student):
        QuizResult.objects.create(user=student, quiz=two_question_quiz, score=0, total_points=3)
        assert admin_client.delete(f"/api/v1/quizzes/{two_question_quiz.id}/").status_code == 204
        assert not Question.objects.exists()
        assert not QuizResult.objects.exists()
