"""
Unit tests for question models.
"""

import pytest

from paint_by_answer.core.models import AnswerOption, Color, MultipleQuestion

RED = Color("Red", "#FF0000")
BLUE = Color("Blue", "#0000FF")


class TestSingleQuestion:
    """Tests for SingleQuestion."""

    def test_properties_when_single_then_exposes_one_option(self, make_single):
        # Arrange
        question = make_single(answer="42")

        # Act & Assert
        assert question.type == "single"
        assert question.options == (question.option,)
        assert question.correct_option is question.option
        assert question.correct_option_id == question.option.id
        assert question.answers == ("42",)

    def test_answers_when_blank_then_empty(self, make_single):
        assert make_single(answer="  ").answers == ()

    def test_color_of_option_when_own_option_then_question_color(self, make_single):
        question = make_single(color=RED)
        assert question.color_of_option(question.option.id) == RED
        assert question.color_of_option("other") is None


class TestMultipleQuestion:
    """Tests for MultipleQuestion."""

    def test_correct_option_when_id_matches_then_returns_option(self, make_multiple):
        question = make_multiple(correct_index=2)
        assert question.correct_option == question.options[2]
        assert question.type == "multiple"

    def test_correct_option_when_id_unknown_then_none(self):
        question = MultipleQuestion(
            id="m",
            text="",
            options=(AnswerOption("o1", "", "x"),),
            correct_option_id="missing",
        )
        assert question.correct_option is None

    def test_init_when_no_options_then_raises_error(self):
        with pytest.raises(ValueError, match="at least one option"):
            MultipleQuestion(id="m", text="", options=(), correct_option_id="")

    def test_color_of_option_when_missing_color_then_none(self, make_multiple):
        question = make_multiple(colors=(RED, None, BLUE, None))
        assert question.color_of_option(question.options[0].id) == RED
        assert question.color_of_option(question.options[1].id) is None

    def test_answers_when_some_blank_then_skipped(self, make_multiple):
        question = make_multiple(answers=("a", "", "c", " "))
        assert question.answers == ("a", "c")
