import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import paint_by_answer
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from paint_by_answer.core.models import (  # noqa: E402
    AnswerOption,
    Color,
    MultipleQuestion,
    SingleQuestion,
)


RED = Color("Red", "#FF0000")
BLUE = Color("Blue", "#0000FF")
GREEN = Color("Green", "#008000")
YELLOW = Color("Yellow", "#FFFF00")


# Common test fixtures
@pytest.fixture
def red():
    return RED


@pytest.fixture
def make_single():
    """Factory for single-answer questions."""
    def _create(question_id: str = "q1", answer: str = "A", color=RED, text: str = "What is A?"):
        return SingleQuestion(
            id=question_id,
            text=text,
            option=AnswerOption(id=f"{question_id}-opt", text="", answer=answer),
            color=color,
        )
    return _create


@pytest.fixture
def make_multiple():
    """Factory for multiple-choice questions with one colour per option."""
    def _create(
        question_id: str = "m1",
        answers=("m1-a", "m1-b", "m1-c", "m1-d"),
        colors=(RED, BLUE, GREEN, YELLOW),
        correct_index: int = 0,
        text: str = "Pick one",
    ):
        options = tuple(
            AnswerOption(id=f"{question_id}-o{i}", text=f"Option {i}", answer=answer)
            for i, answer in enumerate(answers)
        )
        option_colors = {
            option.id: color for option, color in zip(options, colors) if color is not None
        }
        return MultipleQuestion(
            id=question_id,
            text=text,
            options=options,
            correct_option_id=options[correct_index].id,
            option_colors=option_colors,
        )
    return _create
