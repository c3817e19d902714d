"""
Tests for the Question Bank Loader
"""

import pytest

from quizgrader.core.exceptions import InvalidInputError
from quizgrader.evaluation.types import QuestionType
from quizgrader.storage.loader import load_questions_file


class TestLoadQuestionsFile:
    """Test cases for load_questions_file."""

    def test_csv(self, tmp_path):
        path = tmp_path / "bank.csv"
        path.write_text(
            "id,type,correct_answer,difficulty,content\n"
            "q1,单选题,B,,Which one?\n"
            'q2,fill_blank,"牛顿,万有引力",2,\n'
            "q3,calculation,007,3,\n",
            encoding="utf-8",
        )

        questions = load_questions_file(path)

        assert [q.id for q in questions] == ["q1", "q2", "q3"]
        assert questions[0].question_type == QuestionType.SINGLE_CHOICE
        assert questions[0].difficulty == 1
        assert questions[0].content == "Which one?"
        assert questions[1].correct_answer == "牛顿,万有引力"
        assert questions[1].difficulty == 2
        # answers stay text
        assert questions[2].correct_answer == "007"

    def test_csv_missing_columns(self, tmp_path):
        path = tmp_path / "bank.csv"
        path.write_text("id,type\nq1,single_choice\n", encoding="utf-8")

        with pytest.raises(InvalidInputError, match="correct_answer"):
            load_questions_file(path)

    def test_yaml_list(self, tmp_path):
        path = tmp_path / "bank.yaml"
        path.write_text(
            "- id: q1\n"
            "  type: short_answer\n"
            "  correct_answer: |\n"
            "    释放氧气\n"
            "    需要光照\n"
            "  difficulty: 2\n",
            encoding="utf-8",
        )

        [question] = load_questions_file(path)

        assert question.question_type == QuestionType.SHORT_ANSWER
        assert question.correct_answer == "释放氧气\n需要光照\n"
        assert question.difficulty == 2

    def test_yaml_mapping_with_questions_key(self, tmp_path):
        path = tmp_path / "bank.yml"
        path.write_text(
            "questions:\n"
            "  - {id: 1, type: essay, correct_answer: x}\n",
            encoding="utf-8",
        )

        [question] = load_questions_file(path)

        assert question.id == "1"
        assert question.question_type == QuestionType.UNKNOWN

    def test_falsy_yaml_answers_kept(self, tmp_path):
        path = tmp_path / "bank.yaml"
        path.write_text(
            "- {id: c1, type: calculation, correct_answer: 0}\n"
            "- {id: c2, type: single_choice, correct_answer: false}\n"
            "- {id: c3, type: fill_blank}\n",
            encoding="utf-8",
        )

        questions = load_questions_file(path)

        assert [q.correct_answer for q in questions] == ["0", "False", ""]

    def test_row_without_type_rejected(self, tmp_path):
        path = tmp_path / "bank.yaml"
        path.write_text("- {id: q1, correct_answer: A}\n", encoding="utf-8")

        with pytest.raises(InvalidInputError):
            load_questions_file(path)

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "bank.txt"
        path.write_text("q1 B", encoding="utf-8")

        with pytest.raises(InvalidInputError):
            load_questions_file(path)
