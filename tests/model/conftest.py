"""Shared test helpers for model tests."""

import pytest

from blitzit.model.node import ListNode, Node
from blitzit.model.store import BoardStore


def _make_task(task_id, order, title=None, scheduled_at=None, subtasks=None, description=""):
    """Helper to build a task Node."""
    subs = ListNode()
    for sub in subtasks or []:
        subs[sub["id"]] = Node(id=sub["id"], title=sub.get("title", ""), done=sub.get("done", False))
    return Node(
        id=task_id,
        order=order,
        title=title or task_id,
        description=description,
        scheduled_at=scheduled_at,
        subtasks=subs,
    )


def _make_section(section_id, key, tasks=None, title=None):
    """Helper to build a section Node from task Nodes."""
    tasks_ln = ListNode()
    for task in tasks or []:
        tasks_ln[task.id] = task
    return Node(id=section_id, title=title or key, key=key, tasks=tasks_ln)


def _make_board(board_id, sections=None, title=None):
    """Helper to build a board Node."""
    sections_ln = ListNode()
    for section in sections or []:
        sections_ln[section.id] = section
    return Node(id=board_id, title=title or board_id, sections=sections_ln)


def _make_store(*boards, dark_mode=False):
    """Helper to wrap boards in a BoardStore."""
    boards_ln = ListNode()
    for board in boards:
        boards_ln[board.id] = board
    return BoardStore(Node(dark_mode=dark_mode, boards=boards_ln))


def _orders(section):
    return [t.order for t in section.tasks]


def _ids(section):
    return [t.id for t in section.tasks]


@pytest.fixture
def store():
    """Two boards, each with the four role sections.

    Board b1 Backlog holds A (scheduled), B, C; Today holds D.
    Board b2 is empty.
    """
    b1 = _make_board(
        "b1",
        title="Alpha",
        sections=[
            _make_section(
                "b1-backlog",
                "Backlog",
                tasks=[
                    _make_task("A", 1, scheduled_at="2026-10-18T09:00:00.000Z"),
                    _make_task("B", 2, subtasks=[{"id": "s1", "title": "Step one"}]),
                    _make_task("C", 3),
                ],
            ),
            _make_section("b1-today", "Today", tasks=[_make_task("D", 1)]),
            _make_section("b1-nextweek", "NextWeek", title="Next week"),
            _make_section("b1-tomorrow", "Tomorrow"),
        ],
    )
    b2 = _make_board(
        "b2",
        title="Beta",
        sections=[
            _make_section("b2-today", "Today"),
            _make_section("b2-backlog", "Backlog"),
        ],
    )
    return _make_store(b1, b2)
