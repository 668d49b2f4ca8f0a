import pytest

from apps.domains.feedback.models import Feedback
from apps.domains.lessons.models import Lesson

LESSON = {
    "title": "HTML Fundamentals",
    "description": "Master the building blocks of web pages",
    "content": "Elements, attributes and semantic markup.",
    "video_url": "https://www.youtube.com/embed/UB1O30fR-EE",
    "level": "beginner",
}


@pytest.mark.django_db
class TestLessonRead:
    def test_public_list_with_quiz_count(self, api_client, lesson, make_quiz):
        make_quiz([(["a", "b"], 0, 1)], lesson=lesson)
        res = api_client.get("/api/v1/lessons/")
        assert res.status_code == 200
        assert res.data["results"][0]["quiz_count"] == 1
        assert res.data["results"][0]["created_by_username"] == "admin"
        assert res.data["pagination"]["total"] == 1

    def test_level_filter(self, api_client, admin_user):
        Lesson.objects.create(title="A", content="x", level=Lesson.Level.BEGINNER)
        Lesson.objects.create(title="B", content="x", level=Lesson.Level.ADVANCED)
        res = api_client.get("/api/v1/lessons/?level=advanced")
        assert [r["title"] for r in res.data["results"]] == ["B"]

    def test_search_param_and_route(self, api_client, lesson):
        Lesson.objects.create(title="CSS", content="flexbox and grid")
        assert [r["title"] for r in api_client.get("/api/v1/lessons/?search=flexbox").data["results"]] == ["CSS"]

        res = api_client.get("/api/v1/lessons/search/javascript/")
        assert res.status_code == 200
        assert [r["id"] for r in res.data["results"]] == [lesson.id]

    def test_blank_search(self, api_client, db):
        res = api_client.get("/api/v1/lessons/search/%20/")
        assert res.status_code == 400
        assert res.data["code"] == "SEARCH_QUERY_REQUIRED"

    def test_detail_and_missing(self, api_client, lesson):
        assert api_client.get(f"/api/v1/lessons/{lesson.id}/").data["title"] == lesson.title
        res = api_client.get("/api/v1/lessons/9999/")
        assert res.status_code == 404
        assert res.data["code"] == "LESSON_NOT_FOUND"
        assert api_client.get("/api/v1/lessons/x1/").data["code"] == "INVALID_ID"


@pytest.mark.django_db
class TestLessonWrite:
    def test_create_sets_creator(self, admin_client, admin_user):
        res = admin_client.post("/api/v1/lessons/", LESSON, format="json")
        assert res.status_code == 201
        assert res.data["created_by"] == admin_user.id
        assert res.data["level"] == "beginner"

    def test_create_validation(self, admin_client):
        res = admin_client.post("/api/v1/lessons/", {**LESSON, "title": "  ", "level": "expert"}, format="json")
        assert res.status_code == 400
        assert set(res.data["errors"]) >= {"title", "level"}

    def test_student_cannot_write(self, student_client, lesson):
        assert student_client.post("/api/v1/lessons/", LESSON, format="json").status_code == 403
        assert student_client.delete(f"/api/v1/lessons/{lesson.id}/").status_code == 403

    def test_partial_update(self, admin_client, lesson):
        res = admin_client.patch(f"/api/v1/lessons/{lesson.id}/", {"level": "advanced"}, format="json")
        assert res.status_code == 200
        assert res.data["level"] == "advanced"

    def test_delete_referenced_by_quiz(self, admin_client, lesson, make_quiz):
        make_quiz([(["a", "b"], 0, 1)], lesson=lesson)
        res = admin_client.delete(f"/api/v1/lessons/{lesson.id}/")
        assert res.status_code == 409
        assert res.data["code"] == "LESSON_REFERENCED"
        assert Lesson.objects.filter(id=lesson.id).exists()

    def test_delete_cascades_feedback(self, admin_client, lesson, student):
        Feedback.objects.create(user=student, lesson=lesson, rating=5)
        assert admin_client.delete(f"/api/v1/lessons/{lesson.id}/").status_code == 204
        assert not Feedback.objects.exists()
