"""Read-only lookups over a BoardStore. Misses return -1 or None."""

from __future__ import annotations

from typing import TYPE_CHECKING

from blitzit.constants import LEFT, RIGHT
from blitzit.model.node import Node

if TYPE_CHECKING:
    from blitzit.model.store import BoardStore

_STEP = {LEFT: -1, RIGHT: 1}


def board_index_by_id(store: BoardStore, board_id: str) -> int:
    """Position of the board in the board list, or -1."""
    return store.boards.index(board_id)


def board_by_id(store: BoardStore, board_id: str) -> Node | None:
    return store.boards[board_id]


def section_by_id(store: BoardStore, board_id: str, section_id: str) -> Node | None:
    board = board_by_id(store, board_id)
    if board is None:
        return None
    return board.sections[section_id]


def section_by_key_in_board(store: BoardStore, board_id: str, key: str) -> Node | None:
    """Find a board's section by role key rather than id."""
    board = board_by_id(store, board_id)
    if board is None:
        return None
    for section in board.sections:
        if section.key == key:
            return section
    return None


def task_by_id(store: BoardStore, board_id: str, section_id: str, task_id: str) -> Node | None:
    section = section_by_id(store, board_id, section_id)
    if section is None:
        return None
    return section.tasks[task_id]


def locate_task(store: BoardStore, task_id: str) -> tuple[Node, Node, Node] | None:
    """Find (board, section, task) for a task id anywhere in the store."""
    for board in store.boards:
        for section in board.sections:
            task = section.tasks[task_id]
            if task is not None:
                return board, section, task
    return None


def adjacent_section(store: BoardStore, board_id: str, section_id: str, direction: str) -> Node | None:
    """The section left or right of section_id on its board, or None at the edge."""
    step = _STEP.get(direction)
    board = board_by_id(store, board_id)
    if step is None or board is None:
        return None
    index = board.sections.index(section_id)
    if index == -1:
        return None
    return board.sections.at(index + step)


def adjacent_board_section(store: BoardStore, board_id: str, section_id: str, direction: str) -> Node | None:
    """The same-role section on the board left or right of board_id, or None."""
    step = _STEP.get(direction)
    section = section_by_id(store, board_id, section_id)
    if step is None or section is None:
        return None
    target_board = store.boards.at(board_index_by_id(store, board_id) + step)
    if target_board is None:
        return None
    return section_by_key_in_board(store, target_board.id, section.key)
