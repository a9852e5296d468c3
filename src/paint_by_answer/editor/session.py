"""
Module: editor.session

Purpose:
    Editing session for one activity. Wires the history store, the paint
    engine and the binding resolver together the way the editor UI drives
    them: one undo step per stroke, question edits that keep the grid in
    sync, and overwrite commits whenever the document identity changes.

Key Classes:
    - EditorSession: Stateful controller for a single editing session

Stroke Lifecycle:
    1. begin_stroke() - remember the pre-stroke grid
    2. paint_at(index) - paint into a working grid (no history entry)
    3. end_stroke() - commit once, only if the grid changed

Dependencies:
    - editor.history: HistoryStore
    - editor.paint: Grid mutations
    - editor.bindings: Duplicate detection, colours
    - editor.questions: Question edit helpers

Used By:
    - UI layer (external)
    - builder.controller: via to_activity()

Thread Safety:
    None. A session must only be used from one thread of control.
"""

from __future__ import annotations

import logging
import uuid
from typing import Callable, Iterable, Optional, Sequence

from paint_by_answer.core.models import (
    DEFAULT_GRID_SIZE,
    SCHOOL_PALETTE,
    Activity,
    BrushTool,
    Color,
    GridSnapshot,
    Question,
)

from .paint import BRUSH_SIZES, clear, erase_by_answers, paint, replace_answer, resize
from .bindings import AnswerBindings, resolve, used_colors
from .history import HistoryStore
from .questions import brush_for, dropped_tokens, new_single_question, renamed_tokens, retype

logger = logging.getLogger(__name__)

GridEdit = Callable[[GridSnapshot], GridSnapshot]


class EditorSession:
    """
    Editing state for one activity.

    Attributes:
        history: Undo history of committed grid snapshots
        title: Activity title
        tool: Active brush, None when nothing is selected
        eraser_active: Whether strokes erase instead of paint
        brush_size: Brush edge length in cells

    Example:
        >>> session = EditorSession(grid_size=10)
        >>> session.select_tool(BrushTool("A", Color("Red", "#FF0000")))
        >>> session.begin_stroke(); session.paint_at(0); session.end_stroke()
        True
        >>> session.grid.cells[0]
        'A'
    """

    def __init__(
        self,
        activity: Optional[Activity] = None,
        *,
        grid_size: int = DEFAULT_GRID_SIZE,
        palette: Sequence[Color] = SCHOOL_PALETTE,
    ) -> None:
        self.palette = tuple(palette)
        self.history: HistoryStore[GridSnapshot] = HistoryStore(resize(grid_size))
        self.title = ""
        self.activity_id: Optional[str] = None
        self.category_id: Optional[str] = None
        self._questions: tuple[Question, ...] = ()
        self.tool: Optional[BrushTool] = None
        self.eraser_active = False
        self.brush_size = 1
        self._stroke_base: Optional[GridSnapshot] = None
        self._stroke_grid: Optional[GridSnapshot] = None
        if activity is not None:
            self.load(activity)

    # ─────────────────────────────────────────────────────────────────────
    # Read access
    # ─────────────────────────────────────────────────────────────────────

    @property
    def grid(self) -> GridSnapshot:
        """Grid as currently displayed (includes an in-progress stroke)."""
        if self._stroke_grid is not None:
            return self._stroke_grid
        return self.history.current()

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._questions

    @property
    def bindings(self) -> AnswerBindings:
        return resolve(self._questions)

    @property
    def duplicates(self) -> frozenset[str]:
        return self.bindings.duplicates

    @property
    def is_stroking(self) -> bool:
        return self._stroke_base is not None

    def find_question(self, question_id: str) -> Optional[Question]:
        for question in self._questions:
            if question.id == question_id:
                return question
        return None

    def to_activity(self) -> Activity:
        """Committed state as an Activity (never includes an unfinished stroke)."""
        return Activity(
            title=self.title,
            grid=self.history.current(),
            questions=self._questions,
            id=self.activity_id,
            category_id=self.category_id,
        )

    # ─────────────────────────────────────────────────────────────────────
    # Document identity
    # ─────────────────────────────────────────────────────────────────────

    def load(self, activity: Activity) -> None:
        """Replace the session contents; history restarts at the loaded grid."""
        self.cancel_stroke()
        self.title = activity.title
        self.activity_id = activity.id
        self.category_id = activity.category_id
        self._questions = tuple(activity.questions)
        self.tool = None
        self.eraser_active = False
        self.history.commit(activity.grid, overwrite=True)
        logger.info(
            f"Loaded activity {activity.id!r}: {activity.grid.size}x{activity.grid.size}, "
            f"{len(self._questions)} questions"
        )

    def change_grid_size(self, new_size: int) -> None:
        """
        Switch to a blank grid of `new_size`.

        Discards all painting and all undo history for the old size.
        """
        self.cancel_stroke()
        if self.history.current().has_content:
            logger.warning(f"Discarding painted grid on resize to {new_size}x{new_size}")
        self.history.commit(resize(new_size), overwrite=True)

    # ─────────────────────────────────────────────────────────────────────
    # Tools
    # ─────────────────────────────────────────────────────────────────────

    def select_tool(self, tool: Optional[BrushTool]) -> None:
        self.tool = tool
        self.eraser_active = False

    def select_eraser(self) -> None:
        self.eraser_active = True
        self.tool = None

    def select_question_brush(self, question_id: str) -> Optional[BrushTool]:
        """Select the brush that paints a question's (correct) answer."""
        question = self.find_question(question_id)
        tool = brush_for(question) if question is not None else None
        self.select_tool(tool)
        return tool

    def set_brush_size(self, size: int) -> None:
        if size not in BRUSH_SIZES:
            raise ValueError(f"Unsupported brush size {size}; expected one of {BRUSH_SIZES}")
        self.brush_size = size

    # ─────────────────────────────────────────────────────────────────────
    # Strokes
    # ─────────────────────────────────────────────────────────────────────

    def begin_stroke(self) -> None:
        if self._stroke_base is None:
            self._stroke_base = self.history.current()
            self._stroke_grid = self._stroke_base

    def paint_at(self, index: int) -> None:
        """Apply the brush at `index`; starts a stroke if none is active."""
        self.begin_stroke()
        self._stroke_grid = paint(
            self._stroke_grid,
            index,
            self.brush_size,
            self.tool,
            erase=self.eraser_active,
        )

    def end_stroke(self) -> bool:
        """
        Finish the stroke.

        Returns:
            True if a history entry was committed
        """
        if self._stroke_base is None:
            return False
        base, result = self._stroke_base, self._stroke_grid
        self._stroke_base = None
        self._stroke_grid = None
        if result == base:
            return False
        self.history.commit(result)
        return True

    def cancel_stroke(self) -> None:
        """Abandon an in-progress stroke without committing it."""
        self._stroke_base = None
        self._stroke_grid = None

    def undo(self) -> None:
        if not self.is_stroking:
            self.history.undo()

    def redo(self) -> None:
        if not self.is_stroking:
            self.history.redo()

    def clear_grid(self) -> None:
        """Blank every cell as one undoable step."""
        self._apply_grid_edit(clear)

    # ─────────────────────────────────────────────────────────────────────
    # Questions
    # ─────────────────────────────────────────────────────────────────────

    def add_question(self, question_id: Optional[str] = None) -> Question:
        question = new_single_question(
            question_id or uuid.uuid4().hex[:8],
            used_colors(self._questions),
            self.palette,
        )
        self._questions = self._questions + (question,)
        return question

    def update_question(self, updated: Question) -> None:
        """
        Replace a question, keeping the grid consistent with the edit.

        Renamed tokens are renamed in the grid; tokens no question owns
        any more are erased. The active tool follows a rename.
        """
        old = self.find_question(updated.id)
        if old is None:
            logger.debug(f"Ignoring update for unknown question {updated.id!r}")
            return

        renames = renamed_tokens(old, updated)
        renamed_from = {before for before, _ in renames}
        self._questions = tuple(updated if q.id == updated.id else q for q in self._questions)
        stale = dropped_tokens(old, updated) - renamed_from - self._owned_tokens()

        if renames or stale:
            def edit(grid: GridSnapshot) -> GridSnapshot:
                for before, after in renames:
                    grid = replace_answer(grid, before, after)
                return erase_by_answers(grid, stale)

            self._apply_grid_edit(edit)

        if self.tool is not None and self.tool.answer in renamed_from:
            self.tool = brush_for(updated)
        elif self.tool is not None and self.tool.answer in stale:
            self.tool = None

    def retype_question(self, question_id: str, new_type: str) -> Optional[Question]:
        """Switch a question between single and multiple choice."""
        old = self.find_question(question_id)
        if old is None or old.type == new_type:
            return old
        others = tuple(q for q in self._questions if q.id != question_id)
        updated = retype(old, new_type, used_colors(others), self.palette)
        self.update_question(updated)
        return updated

    def remove_question(self, question_id: str) -> None:
        question = self.find_question(question_id)
        if question is None:
            return
        self._questions = tuple(q for q in self._questions if q.id != question_id)
        self.clear_answers(dropped_tokens(question, None) - self._owned_tokens())

    def clear_answers(self, answers: Iterable[str]) -> None:
        """Erase tokens from the grid and drop the active tool if it used one."""
        tokens = {a for a in answers if a}
        if not tokens:
            return
        if self.tool is not None and self.tool.answer in tokens:
            self.tool = None
        self._apply_grid_edit(lambda grid: erase_by_answers(grid, tokens))

    def _owned_tokens(self) -> set[str]:
        return {token for question in self._questions for token in question.answers}

    def _apply_grid_edit(self, edit: GridEdit) -> None:
        self.history.commit(edit)
        if self._stroke_base is not None:
            self._stroke_base = edit(self._stroke_base)
            self._stroke_grid = edit(self._stroke_grid)
