"""Transient drag-and-drop gesture state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from blitzit.model.task import move_task
from blitzit.models import MoveSource, MoveTarget

if TYPE_CHECKING:
    from blitzit.model.store import BoardStore


@dataclass
class DragContext:
    """Which task is being dragged and where from. All None when idle. Never persisted."""

    dragging_task_id: str | None = None
    source_board_id: str | None = None
    source_section_id: str | None = None

    @property
    def active(self) -> bool:
        return self.dragging_task_id is not None

    def begin(self, task_id: str, board_id: str, section_id: str) -> None:
        self.dragging_task_id = task_id
        self.source_board_id = board_id
        self.source_section_id = section_id

    def end(self) -> None:
        self.dragging_task_id = None
        self.source_board_id = None
        self.source_section_id = None


def drop(store: BoardStore, context: DragContext, board_id: str, section_id: str, at_index: int) -> bool:
    """Finish a gesture with a single move_task call. The context is always reset."""
    if not context.active:
        return False
    try:
        return move_task(
            store,
            MoveSource(context.source_board_id, context.source_section_id, context.dragging_task_id),
            MoveTarget(board_id, section_id, at_index),
        )
    finally:
        context.end()
