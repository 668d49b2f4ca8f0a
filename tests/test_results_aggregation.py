from datetime import timedelta

import pytest
from django.utils import timezone

from apps.domains.results.models import QuizResult
from apps.domains.results.services.result_stats_service import ResultStatsService


@pytest.fixture
def attempts(make_user, two_question_quiz):
    """
    bob   3/3 (늦게)  → rank 2
    amy   3/3 (먼저)  → rank 1
    carl  2/3         → rank 3
    dan   0/3         → rank 4
    """
    base = timezone.now() - timedelta(hours=1)
    rows = {}
    for name, score, minutes in [("bob", 3, 10), ("amy", 3, 5), ("carl", 2, 1), ("dan", 0, 0)]:
        rows[name] = QuizResult.objects.create(
            user=make_user(name),
            quiz=two_question_quiz,
            score=score,
            total_points=3,
            answers=[],
            completed_at=base + timedelta(minutes=minutes),
        )
    return rows


@pytest.mark.django_db
class TestQuizStatistics:
    def test_empty(self, two_question_quiz):
        stats = ResultStatsService.quiz_statistics(quiz_id=two_question_quiz.id)
        assert stats == {
            "total_attempts": 0,
            "average_percentage": 0.0,
            "highest_percentage": 0.0,
            "lowest_percentage": 0.0,
        }

    def test_per_row_percentages(self, attempts, two_question_quiz):
        stats = ResultStatsService.quiz_statistics(quiz_id=two_question_quiz.id)
        assert stats["total_attempts"] == 4
        # (100 + 100 + 66.67 + 0) / 4
        assert stats["average_percentage"] == pytest.approx(66.67, abs=0.01)
        assert stats["highest_percentage"] == 100.0
        assert stats["lowest_percentage"] == 0.0

    def test_zero_total_rows_count_as_zero(self, make_quiz, student):
        quiz = make_quiz([])
        QuizResult.objects.create(user=student, quiz=quiz, score=0, total_points=0, answers=[])
        stats = ResultStatsService.quiz_statistics(quiz_id=quiz.id)
        assert stats["total_attempts"] == 1
        assert stats["average_percentage"] == 0.0


@pytest.mark.django_db
class TestLeaderboard:
    def test_ordering_and_rank(self, attempts, two_question_quiz):
        rows = list(ResultStatsService.leaderboard_queryset(quiz_id=two_question_quiz.id))
        assert [r.user.username for r in rows] == ["amy", "bob", "carl", "dan"]
        assert [r.rank for r in rows] == [1, 2, 3, 4]

    def test_api_page_keeps_global_rank(self, admin_client, attempts, two_question_quiz):
        res = admin_client.get(f"/api/v1/quiz-results/quizzes/{two_question_quiz.id}/?page=2&limit=2")
        assert res.status_code == 200
        assert [r["username"] for r in res.data["results"]] == ["carl", "dan"]
        assert [r["rank"] for r in res.data["results"]] == [3, 4]
        assert res.data["results"][0]["percentage"] == 67
        assert res.data["pagination"] == {"page": 2, "limit": 2, "total": 4, "pages": 2}
        assert res.data["statistics"]["total_attempts"] == 4
        assert res.data["quiz"]["id"] == two_question_quiz.id

    def test_out_of_range_page_is_empty(self, admin_client, attempts, two_question_quiz):
        res = admin_client.get(f"/api/v1/quiz-results/quizzes/{two_question_quiz.id}/?page=9")
        assert res.status_code == 200
        assert res.data["results"] == []

    def test_bad_paging_params_fall_back(self, admin_client, attempts, two_question_quiz):
        res = admin_client.get(f"/api/v1/quiz-results/quizzes/{two_question_quiz.id}/?page=x&limit=-3")
        assert res.data["pagination"]["page"] == 1
        assert res.data["pagination"]["limit"] == 10

    def test_limit_capped(self, admin_client, two_question_quiz):
        res = admin_client.get(f"/api/v1/quiz-results/quizzes/{two_question_quiz.id}/?limit=1000")
        assert res.data["pagination"]["limit"] == 100
        assert res.data["pagination"]["pages"] == 0

    def test_admin_only(self, student_client, two_question_quiz):
        res = student_client.get(f"/api/v1/quiz-results/quizzes/{two_question_quiz.id}/")
        assert res.status_code == 403
        assert res.data["code"] == "ADMIN_REQUIRED"

    def test_unknown_quiz(self, admin_client):
        assert admin_client.get("/api/v1/quiz-results/quizzes/999/").data["code"] == "QUIZ_NOT_FOUND"
        res = admin_client.get("/api/v1/quiz-results/quizzes/abc/")
        assert res.status_code == 400
        assert res.data["code"] == "INVALID_ID"

    def test_statistics_endpoint(self, admin_client, attempts, two_question_quiz):
        res = admin_client.get(f"/api/v1/quiz-results/quizzes/{two_question_quiz.id}/statistics/")
        assert res.status_code == 200
        assert res.data["statistics"]["highest_percentage"] == 100.0


@pytest.mark.django_db
class TestUserHistory:
    def test_newest_first_with_titles(self, student_client, student, make_quiz, lesson):
        older = make_quiz([(["a", "b"], 0, 1)], title="Older", lesson=lesson)
        newer = make_quiz([(["a", "b"], 0, 1)], title="Newer")
        now = timezone.now()
        QuizResult.objects.create(user=student, quiz=older, score=1, total_points=1, completed_at=now - timedelta(days=1))
        QuizResult.objects.create(user=student, quiz=newer, score=0, total_points=1, completed_at=now)

        res = student_client.get(f"/api/v1/quiz-results/users/{student.id}/")
        assert res.status_code == 200
        titles = [r["quiz_title"] for r in res.data["results"]]
        assert titles == ["Newer", "Older"]
        assert res.data["results"][1]["lesson_title"] == lesson.title
        assert res.data["results"][0]["lesson_title"] is None
        assert res.data["pagination"]["total"] == 2

    def test_other_user_forbidden(self, student_client, other_student):
        res = student_client.get(f"/api/v1/quiz-results/users/{other_student.id}/")
        assert res.status_code == 403
        assert res.data["code"] == "ACCESS_DENIED"

    def test_admin_can_read_and_missing_user(self, admin_client, student):
        assert admin_client.get(f"/api/v1/quiz-results/users/{student.id}/").status_code == 200
        res = admin_client.get("/api/v1/quiz-results/users/9999/")
        assert res.status_code == 404
        assert res.data["code"] == "USER_NOT_FOUND"


@pytest.mark.django_db
class TestResultDetail:
    @pytest.fixture
    def result(self, student, two_question_quiz):
        q1, q2 = two_question_quiz.questions.order_by("order")
        return QuizResult.objects.create(
            user=student,
            quiz=two_question_quiz,
            score=1,
            total_points=3,
            answers=[{"question_id": q1.id, "selected_index": 0}],
        )

    def test_owner_sees_breakdown(self, student_client, result, two_question_quiz):
        res = student_client.get(f"/api/v1/quiz-results/{result.id}/")
        assert res.status_code == 200
        assert res.data["result"]["percentage"] == 33
        assert res.data["result"]["lesson_title"] == "Introduction to JavaScript"
        assert res.data["result"]["username"] == "john"

        first, second = res.data["detailed_answers"]
        assert first["selected_index"] == 0 and first["is_correct"] is True
        assert second["selected_index"] is None and second["is_correct"] is False
        assert second["correct_index"] == 1
        assert second["points"] == 2

    def test_other_student_forbidden(self, client_for, other_student, result):
        res = client_for(other_student).get(f"/api/v1/quiz-results/{result.id}/")
        assert res.status_code == 403
        assert res.data["code"] == "ACCESS_DENIED"

    def test_admin_and_not_found(self, admin_client, result):
        assert admin_client.get(f"/api/v1/quiz-results/{result.id}/").status_code == 200
        res = admin_client.get("/api/v1/quiz-results/9999/")
        assert res.status_code == 404
        assert res.data["code"] == "RESULT_NOT_FOUND"

    def test_delete_is_admin_only(self, student_client, admin_client, result):
        assert student_client.delete(f"/api/v1/quiz-results/{result.id}/").status_code == 403
        assert admin_client.delete(f"/api/v1/quiz-results/{result.id}/").status_code == 204
        assert not QuizResult.objects.filter(id=result.id).exists()
