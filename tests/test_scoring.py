import pytest

from academy.domain.quizzes.entities import QuestionDraft, QuestionKey, QuizDraft
from academy.domain.quizzes.errors import InvalidQuestionSet
from academy.domain.results.scoring import answer_map, percentage, score_answers
from academy.domain.shared.errors import InvalidId
from academy.domain.shared.ids import parse_id
from academy.application.use_cases.quizzes.save_quiz import validate_draft


QUESTIONS = [QuestionKey(id=1, correct_index=0, points=1), QuestionKey(id=2, correct_index=1, points=2)]


class TestPercentage:
    def test_rounds_half_up(self):
        assert percentage(2, 3) == 67
        assert percentage(1, 3) == 33
        assert percentage(1, 8) == 13  # 12.5
        assert percentage(3, 3) == 100

    def test_zero_total_is_zero(self):
        assert percentage(0, 0) == 0
        assert percentage(5, 0) == 0


class TestScoreAnswers:
    def test_all_correct(self):
        out = score_answers(QUESTIONS, [{"question_id": 1, "selected_index": 0}, {"question_id": 2, "selected_index": 1}])
        assert (out.score, out.total_points, percentage(out.score, out.total_points)) == (3, 3, 100)

    def test_partially_correct(self):
        out = score_answers(QUESTIONS, [{"question_id": 1, "selected_index": 1}, {"question_id": 2, "selected_index": 1}])
        assert (out.score, out.total_points, percentage(out.score, out.total_points)) == (2, 3, 67)

    def test_no_answers_counts_full_total(self):
        out = score_answers(QUESTIONS, [])
        assert (out.score, out.total_points, percentage(out.score, out.total_points)) == (0, 3, 0)

    def test_foreign_question_ignored(self):
        out = score_answers(QUESTIONS, [{"question_id": 99, "selected_index": 0}])
        assert (out.score, out.total_points) == (0, 3)

    def test_last_answer_wins(self):
        answers = [
            {"question_id": 2, "selected_index": 1},
            {"question_id": 2, "selected_index": 0},
        ]
        assert score_answers(QUESTIONS, answers).score == 0

    def test_quiz_without_questions(self):
        out = score_answers([], [{"question_id": 1, "selected_index": 0}])
        assert (out.score, out.total_points, percentage(out.score, out.total_points)) == (0, 0, 0)


class TestAnswerMap:
    def test_skips_malformed_entries(self):
        answers = [
            {"question_id": "3", "selected_index": "2"},
            {"question_id": None, "selected_index": 1},
            {"question_id": 4},
            "garbage",
            {"question_id": True, "selected_index": 0},
        ]
        assert answer_map(answers) == {3: 2}


class TestParseId:
    def test_valid(self):
        assert parse_id("12") == 12
        assert parse_id(7) == 7

    @pytest.mark.parametrize("raw", ["abc", "", "0", "-1", None, True, "1.5"])
    def test_invalid(self, raw):
        with pytest.raises(InvalidId):
            parse_id(raw)


class TestValidateDraft:
    def _draft(self, **q):
        fields = {"question_text": "Q", "options": ["a", "b"], "correct_index": 0, "points": 1}
        fields.update(q)
        return QuizDraft(title="T", questions=[QuestionDraft(**fields)])

    def test_valid(self):
        validate_draft(self._draft())

    def test_requires_questions(self):
        with pytest.raises(InvalidQuestionSet, match="최소 1개"):
            validate_draft(QuizDraft(title="T"))

    def test_option_count(self):
        with pytest.raises(InvalidQuestionSet):
            validate_draft(self._draft(options=["a"]))
        with pytest.raises(InvalidQuestionSet):
            validate_draft(self._draft(options=list("abcdefg")))

    def test_correct_index_must_address_option(self):
        with pytest.raises(InvalidQuestionSet, match="정답 인덱스"):
            validate_draft(self._draft(correct_index=2))

    def test_points_positive(self):
        with pytest.raises(InvalidQuestionSet, match="배점"):
            validate_draft(self._draft(points=0))
