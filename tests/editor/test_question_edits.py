"""
Unit tests for question edit helpers.
"""

import dataclasses

import pytest

from paint_by_answer.core.models import SCHOOL_PALETTE, AnswerOption, BrushTool, Color, MultipleQuestion, SingleQuestion
from paint_by_answer.editor.questions import (
    brush_for,
    dropped_tokens,
    new_single_question,
    option_letter,
    renamed_tokens,
    retype,
    to_multiple,
    to_single,
)

RED = Color("Red", "#FF0000")


class TestNewQuestion:
    """Tests for new_single_question()."""

    def test_new_when_palette_partly_used_then_first_free_color(self):
        question = new_single_question("q9", used={SCHOOL_PALETTE[0].value})
        assert question.color == SCHOOL_PALETTE[1]
        assert question.option.answer == ""

    def test_new_when_palette_exhausted_then_first_palette_color(self):
        question = new_single_question("q9", used={c.value for c in SCHOOL_PALETTE})
        assert question.color == SCHOOL_PALETTE[0]


class TestRetype:
    """Tests for to_multiple(), to_single() and retype()."""

    def test_to_multiple_when_single_then_four_unique_tokens(self, make_single):
        # Act
        question = to_multiple(make_single("q1"), used={SCHOOL_PALETTE[0].value})

        # Assert
        assert isinstance(question, MultipleQuestion)
        assert [o.answer for o in question.options] == ["q1-a", "q1-b", "q1-c", "q1-d"]
        assert question.correct_option_id == question.options[0].id
        assert [question.option_colors[o.id] for o in question.options] == list(SCHOOL_PALETTE[1:5])

    def test_to_multiple_when_existing_text_then_kept_by_position(self, make_single):
        single = make_single("q1")
        single = dataclasses.replace(single, option=dataclasses.replace(single.option, text="first"))
        assert to_multiple(single).options[0].text == "first"

    def test_to_multiple_when_palette_exhausted_then_cycles(self, make_single):
        question = to_multiple(make_single("q1"), used={c.value for c in SCHOOL_PALETTE})
        colors = [question.option_colors[o.id] for o in question.options]
        assert colors == list(SCHOOL_PALETTE[:4])

    def test_to_single_when_multiple_then_first_option_and_color(self, make_multiple):
        multiple = make_multiple()
        single = to_single(multiple)
        assert isinstance(single, SingleQuestion)
        assert single.option == multiple.options[0]
        assert single.color == multiple.option_colors[multiple.options[0].id]

    def test_retype_when_same_type_then_unchanged(self, make_single):
        single = make_single()
        assert retype(single, "single") is single

    def test_retype_when_unknown_type_then_raises(self, make_single):
        with pytest.raises(ValueError, match="essay"):
            retype(make_single(), "essay")

    def test_option_letter_when_index_then_lowercase_letter(self):
        assert [option_letter(i) for i in range(4)] == ["a", "b", "c", "d"]


class TestBrushFor:
    """Tests for brush_for()."""

    def test_brush_when_single_then_token_and_color(self, make_single):
        assert brush_for(make_single(answer="A", color=RED)) == BrushTool("A", RED)

    def test_brush_when_multiple_then_correct_option(self, make_multiple):
        question = make_multiple(correct_index=2)
        tool = brush_for(question)
        assert tool.answer == "m1-c"
        assert tool.color == question.option_colors[question.options[2].id]

    def test_brush_when_blank_answer_then_none(self, make_single):
        assert brush_for(make_single(answer="")) is None

    def test_brush_when_no_color_then_none(self, make_single):
        assert brush_for(make_single(color=None)) is None


class TestTokenChanges:
    """Tests for renamed_tokens() and dropped_tokens()."""

    def test_renamed_when_single_answer_changed_then_pair(self, make_single):
        assert renamed_tokens(make_single(answer="32"), make_single(answer="34")) == [("32", "34")]

    def test_renamed_when_old_answer_blank_then_nothing(self, make_single):
        assert renamed_tokens(make_single(answer=""), make_single(answer="34")) == []

    def test_renamed_when_correct_option_changed_then_pair(self, make_multiple):
        before = make_multiple(correct_index=0)
        after = make_multiple(correct_index=1)
        assert renamed_tokens(before, after) == [("m1-a", "m1-b")]

    def test_renamed_when_type_changed_then_nothing(self, make_single, make_multiple):
        assert renamed_tokens(make_single("m1"), make_multiple("m1")) == []

    def test_dropped_when_removed_then_all_tokens(self, make_multiple):
        assert dropped_tokens(make_multiple(), None) == {"m1-a", "m1-b", "m1-c", "m1-d"}

    def test_dropped_when_retyped_then_missing_tokens(self, make_single, make_multiple):
        assert dropped_tokens(make_multiple(), make_single("m1", answer="m1-a")) == {"m1-b", "m1-c", "m1-d"}
