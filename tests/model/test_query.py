"""Tests for read-only store lookups."""

from blitzit.model.query import (
    adjacent_board_section,
    adjacent_section,
    board_by_id,
    board_index_by_id,
    locate_task,
    section_by_id,
    section_by_key_in_board,
    task_by_id,
)


def test_board_index_by_id(store):
    assert board_index_by_id(store, "b1") == 0
    assert board_index_by_id(store, "b2") == 1
    assert board_index_by_id(store, "zzz") == -1


def test_board_by_id(store):
    assert board_by_id(store, "b2").title == "Beta"
    assert board_by_id(store, "zzz") is None


def test_section_by_id(store):
    assert section_by_id(store, "b1", "b1-today").key == "Today"
    assert section_by_id(store, "b1", "b2-today") is None
    assert section_by_id(store, "zzz", "b1-today") is None


def test_section_by_key_in_board(store):
    assert section_by_key_in_board(store, "b1", "NextWeek").id == "b1-nextweek"
    assert section_by_key_in_board(store, "b2", "Backlog").id == "b2-backlog"
    assert section_by_key_in_board(store, "b2", "Tomorrow") is None
    assert section_by_key_in_board(store, "zzz", "Backlog") is None


def test_task_by_id(store):
    assert task_by_id(store, "b1", "b1-backlog", "B").title == "B"
    assert task_by_id(store, "b1", "b1-today", "B") is None
    assert task_by_id(store, "b1", "zzz", "B") is None


def test_locate_task(store):
    board, section, task = locate_task(store, "D")
    assert (board.id, section.id, task.id) == ("b1", "b1-today", "D")
    assert locate_task(store, "zzz") is None


def test_queries_do_not_commit(store):
    events = []
    store.subscribe(lambda s: events.append(1))
    board_by_id(store, "b1")
    section_by_key_in_board(store, "b1", "Today")
    locate_task(store, "A")
    assert events == []


def test_adjacent_section(store):
    assert adjacent_section(store, "b1", "b1-backlog", "right").id == "b1-today"
    assert adjacent_section(store, "b1", "b1-today", "left").id == "b1-backlog"
    assert adjacent_section(store, "b1", "b1-backlog", "left") is None
    assert adjacent_section(store, "b1", "b1-tomorrow", "right") is None
    assert adjacent_section(store, "b1", "b1-backlog", "up") is None


def test_adjacent_board_section(store):
    assert adjacent_board_section(store, "b1", "b1-backlog", "right").id == "b2-backlog"
    assert adjacent_board_section(store, "b2", "b2-today", "left").id == "b1-today"
    assert adjacent_board_section(store, "b1", "b1-nextweek", "right") is None
    assert adjacent_board_section(store, "b1", "b1-backlog", "left") is None
