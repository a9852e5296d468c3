"""
Unit Tests for Serialization Utilities

Tests conversion between stored activity rows and core models.
"""

import json

import pytest

from paint_by_answer.core.models import Activity, Color, GridSnapshot, MultipleQuestion, SingleQuestion
from paint_by_answer.core.schemas.validator import ValidationError
from paint_by_answer.core.utils.serialization import (
    activity_from_payload,
    activity_to_payload,
    deserialize_grid,
    parse_stored_color,
    question_from_payload,
    question_to_payload,
    serialize_grid,
)

RED_JSON = json.dumps({"name": "Red", "value": "#FF0000"})
BLUE_JSON = json.dumps({"name": "Blue", "value": "#0000FF"})


@pytest.fixture
def stored_activity():
    """Activity row as the external store returns it."""
    return {
        "id": 42,
        "title": "Fractions",
        "grid_size": 10,
        "grid_data": ["1/2"] + [""] * 99,
        "category_id": None,
        "questions": [
            {
                "id": 1,
                "text": "1/4 + 1/4",
                "type": "single",
                "correct_option_id": 10,
                "answer_options": [{"id": 10, "text": "", "answer": "1/2", "color": RED_JSON}],
            },
            {
                "id": 2,
                "text": "Largest?",
                "type": "multiple",
                "correct_option_id": 21,
                "answer_options": [
                    {"id": 20, "text": "1/3", "answer": "2-a", "color": RED_JSON},
                    {"id": 21, "text": "1/2", "answer": "2-b", "color": "{not json"},
                    {"id": 22, "text": "1/5", "answer": "2-c", "color": BLUE_JSON},
                ],
            },
        ],
    }


class TestGridSerialization:
    """Tests for grid serialization."""

    def test_grid_when_round_tripped_then_blank_cells_preserved(self):
        # Arrange
        grid = GridSnapshot.from_cells(2, ["A", "", "", "B"])

        # Act
        data = serialize_grid(grid)
        loaded = deserialize_grid(data)

        # Assert
        assert data == {"size": 2, "cells": ["A", "", "", "B"]}
        assert loaded == grid

    def test_deserialize_when_length_mismatch_then_raises_error(self):
        with pytest.raises(ValueError):
            deserialize_grid({"size": 2, "cells": ["A"]})


class TestParseStoredColor:
    """Tests for parse_stored_color()."""

    def test_parse_when_json_string_then_color(self):
        assert parse_stored_color(RED_JSON) == Color("Red", "#FF0000")

    def test_parse_when_mapping_then_color(self):
        assert parse_stored_color({"name": "Red", "value": "#FF0000"}) == Color("Red", "#FF0000")

    @pytest.mark.parametrize(
        "raw",
        [None, "", "{not json", json.dumps({"name": "x"}), json.dumps({"name": "x", "value": "blue"}), "[]"],
    )
    def test_parse_when_malformed_then_none(self, raw):
        assert parse_stored_color(raw) is None


class TestQuestionPayload:
    """Tests for question row conversion."""

    def test_from_payload_when_single_then_color_from_first_option(self, stored_activity):
        # Act
        question = question_from_payload(stored_activity["questions"][0])

        # Assert
        assert isinstance(question, SingleQuestion)
        assert question.id == "1"
        assert question.option.answer == "1/2"
        assert question.color == Color("Red", "#FF0000")

    def test_from_payload_when_option_color_malformed_then_option_unbound(self, stored_activity):
        # Act
        question = question_from_payload(stored_activity["questions"][1])

        # Assert
        assert isinstance(question, MultipleQuestion)
        assert question.correct_option_id == "21"
        assert set(question.option_colors) == {"20", "22"}

    def test_from_payload_when_template_options_then_used(self):
        row = {
            "id": 5,
            "text": "t",
            "type": "single",
            "template_answer_options": [{"id": 1, "text": "", "answer": "x", "color": RED_JSON}],
        }
        assert question_from_payload(row).option.answer == "x"

    def test_from_payload_when_single_without_options_then_blank_option(self):
        question = question_from_payload({"id": 3, "type": "single", "correct_option_id": 9})
        assert question.option.id == "9"
        assert question.option.answer == ""
        assert question.color is None

    def test_from_payload_when_multiple_without_options_then_raises_error(self):
        with pytest.raises(ValidationError):
            question_from_payload({"id": 3, "type": "multiple", "answer_options": []})

    def test_to_payload_when_multiple_then_colors_stored_as_json(self, stored_activity):
        # Arrange
        question = question_from_payload(stored_activity["questions"][1])

        # Act
        row = question_to_payload(question)

        # Assert
        assert row["type"] == "multiple"
        assert row["correct_option_id"] == "21"
        assert json.loads(row["answer_options"][0]["color"]) == {"name": "Red", "value": "#FF0000"}
        assert row["answer_options"][1]["color"] is None


class TestActivityPayload:
    """Tests for activity row conversion."""

    def test_from_payload_when_valid_then_activity(self, stored_activity):
        # Act
        activity = activity_from_payload(stored_activity)

        # Assert
        assert activity.id == "42"
        assert activity.title == "Fractions"
        assert activity.grid.size == 10
        assert activity.grid.cells[0] == "1/2"
        assert len(activity.questions) == 2
        assert activity.category_id is None

    def test_from_payload_when_grid_data_null_then_blank_grid(self, stored_activity):
        stored_activity["grid_data"] = None
        activity = activity_from_payload(stored_activity)
        assert activity.grid == GridSnapshot.empty(10)

    def test_from_payload_when_template_questions_then_loaded(self, stored_activity):
        stored_activity["template_questions"] = stored_activity.pop("questions")
        assert len(activity_from_payload(stored_activity).questions) == 2

    def test_from_payload_when_invalid_then_raises_validation_error(self, stored_activity):
        stored_activity["grid_data"] = [""] * 3
        with pytest.raises(ValidationError, match="grid_data"):
            activity_from_payload(stored_activity)

    def test_to_payload_when_reloaded_then_equivalent(self, stored_activity):
        # Arrange
        activity = activity_from_payload(stored_activity)

        # Act
        reloaded = activity_from_payload(activity_to_payload(activity))

        # Assert
        assert reloaded == activity

    def test_to_payload_when_unsaved_then_no_id(self):
        activity = Activity(title="New", grid=GridSnapshot.empty(10))
        payload = activity_to_payload(activity)
        assert "id" not in payload
        assert payload["grid_data"] == [""] * 100
