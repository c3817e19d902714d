"""
Tests for Score Calculator and question types
"""

from fractions import Fraction

import pytest

from quizgrader.core.config import GradingConfig
from quizgrader.evaluation.scoring import ScoreCalculator, exact_ratio, round_half_up
from quizgrader.evaluation.types import (
    Question, QuestionType, SubmittedAnswer, collect_answers, normalize_difficulty
)


class TestRoundHalfUp:
    """Test cases for round-half-up."""

    @pytest.mark.parametrize("value, expected", [
        (0.0, 0), (0.49, 0), (0.5, 1), (1.5, 2), (2.5, 3), (59.5, 60), (66.666, 67), (100.0, 100),
        (Fraction(63, 2), 32), (Fraction(2300, 40), 58), (0.49999999999999994, 0),
    ])
    def test_rounding(self, value, expected):
        assert round_half_up(value) == expected


class TestScoreCalculator:
    """Test cases for ScoreCalculator."""

    def setup_method(self):
        self.calculator = ScoreCalculator()

    @pytest.mark.parametrize("question_type, expected", [
        (QuestionType.SINGLE_CHOICE, 2),
        (QuestionType.FILL_BLANK, 3),
        (QuestionType.SHORT_ANSWER, 5),
        (QuestionType.CALCULATION, 10),
        (QuestionType.UNKNOWN, 1),
    ])
    def test_base_score_per_type(self, question_type, expected):
        assert self.calculator.base_score(question_type, 1) == expected

    def test_base_score_scales_with_difficulty(self):
        assert self.calculator.base_score(QuestionType.CALCULATION, 3) == 30
        assert self.calculator.base_score(QuestionType.UNKNOWN, 4) == 4

    @pytest.mark.parametrize("difficulty", [None, 0, -2, "abc"])
    def test_missing_or_non_positive_difficulty_defaults_to_one(self, difficulty):
        assert self.calculator.base_score(QuestionType.FILL_BLANK, difficulty) == 3

    def test_exact_types_award_full_base(self):
        assert self.calculator.awarded_score(QuestionType.SINGLE_CHOICE, 6, True, 1.0) == 6
        assert self.calculator.awarded_score(QuestionType.UNKNOWN, 2, True, 1.0) == 2

    def test_partial_types_scale_by_accuracy(self):
        assert self.calculator.awarded_score(QuestionType.FILL_BLANK, 3, True, 0.5) == 2
        assert self.calculator.awarded_score(QuestionType.SHORT_ANSWER, 10, True, 0.75) == 8
        assert self.calculator.awarded_score(QuestionType.CALCULATION, 10, True, 1 / 3) == 3

    def test_exact_half_rounds_up_despite_float_accuracy(self):
        # 45 * 0.7 is 31.499999999999996 in floats; 7/10 of 45 is 31.5
        assert self.calculator.awarded_score(QuestionType.SHORT_ANSWER, 45, True, 7 / 10) == 32
        assert self.calculator.awarded_score(QuestionType.FILL_BLANK, 9, True, 1 / 2) == 5

    def test_exact_ratio(self):
        assert exact_ratio(7 / 10) == Fraction(7, 10)
        assert exact_ratio(1 / 3) == Fraction(1, 3)
        assert exact_ratio(1.0) == 1

    def test_incorrect_awards_nothing(self):
        for question_type in QuestionType:
            assert self.calculator.awarded_score(question_type, 10, False, 0.25) == 0

    def test_custom_multipliers(self):
        calculator = ScoreCalculator(GradingConfig(type_multipliers={"single_choice": 4}))
        assert calculator.base_score(QuestionType.SINGLE_CHOICE, 2) == 8
        # types not overridden keep their default multiplier
        assert calculator.base_score(QuestionType.FILL_BLANK, 2) == 6
        assert calculator.base_score(QuestionType.CALCULATION, 1) == 10
        assert calculator.base_score(QuestionType.UNKNOWN, 2) == 2


class TestQuestionType:
    """Test cases for QuestionType parsing."""

    @pytest.mark.parametrize("label, expected", [
        ("single_choice", QuestionType.SINGLE_CHOICE),
        ("single-choice", QuestionType.SINGLE_CHOICE),
        ("Fill Blank", QuestionType.FILL_BLANK),
        ("short_answer", QuestionType.SHORT_ANSWER),
        ("CALCULATION", QuestionType.CALCULATION),
        ("单选题", QuestionType.SINGLE_CHOICE),
        ("填空题", QuestionType.FILL_BLANK),
        ("简答题", QuestionType.SHORT_ANSWER),
        ("计算题", QuestionType.CALCULATION),
        ("essay", QuestionType.UNKNOWN),
        (None, QuestionType.UNKNOWN),
    ])
    def test_parse(self, label, expected):
        assert QuestionType.parse(label) == expected

    def test_partial_credit_types(self):
        assert QuestionType.FILL_BLANK.is_partial_credit
        assert QuestionType.CALCULATION.is_partial_credit
        assert not QuestionType.SINGLE_CHOICE.is_partial_credit
        assert not QuestionType.UNKNOWN.is_partial_credit


class TestQuestion:
    """Test cases for the Question value object."""

    def test_defaults_and_normalization(self):
        question = Question(id=7, question_type="填空题", correct_answer=None, difficulty=0)
        assert question.id == "7"
        assert question.question_type == QuestionType.FILL_BLANK
        assert question.correct_answer == ""
        assert question.difficulty == 1

    def test_immutable(self):
        question = Question(id="q1", question_type=QuestionType.SINGLE_CHOICE, correct_answer="A")
        with pytest.raises(AttributeError):
            question.correct_answer = "B"

    def test_normalize_difficulty(self):
        assert normalize_difficulty(3) == 3
        assert normalize_difficulty("2") == 2
        assert normalize_difficulty(None) == 1
        assert normalize_difficulty(float("nan")) == 1

    def test_numeric_correct_answer_kept_as_text(self):
        question = Question(id="q9", question_type=QuestionType.CALCULATION, correct_answer=0)
        assert question.correct_answer == "0"


class TestSubmittedAnswers:
    """Test cases for SubmittedAnswer and collect_answers."""

    def test_none_text_becomes_empty(self):
        answer = SubmittedAnswer(question_id=3, raw_text=None)
        assert answer.question_id == "3"
        assert answer.raw_text == ""

    def test_collect_from_mapping(self):
        collected = collect_answers({"q1": "B", 2: None})
        assert collected == {"q1": SubmittedAnswer("q1", "B"), "2": SubmittedAnswer("2", "")}

    def test_collect_from_answers_last_wins(self):
        collected = collect_answers([SubmittedAnswer("q1", "A"), SubmittedAnswer("q1", "C")])
        assert collected["q1"].raw_text == "C"

    def test_text_is_not_trimmed(self):
        assert collect_answers({"q1": " B "})["q1"].raw_text == " B "
