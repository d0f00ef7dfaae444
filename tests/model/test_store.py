"""Tests for the BoardStore state container."""

from datetime import datetime, timezone

import pytest

from blitzit.constants import SECTION_KEYS
from blitzit.model.node import FrozenNodeError
from blitzit.model.seed import MOCK_DESCRIPTION, default_tree, generate_board
from blitzit.model.store import BoardStore, create_store, set_dark_mode, toggle_dark_mode
from blitzit.model.writer import tree_to_dict
from blitzit.slots import MemorySlot

from .conftest import _orders


def test_default_store_when_slot_missing():
    store = create_store()
    assert store.seeded is True
    assert store.dark_mode is False
    assert [b.title for b in store.boards] == ["Alpha"]


def test_default_board_layout():
    board = generate_board("Alpha", now=datetime(2026, 10, 18, 9, 0, tzinfo=timezone.utc))
    assert [s.key for s in board.sections] == ["Backlog", "Today", "NextWeek", "Tomorrow"]
    assert sorted(s.key for s in board.sections) == sorted(SECTION_KEYS)
    assert [s.title for s in board.sections] == ["Backlog", "Today", "Next week", "Tomorrow"]

    backlog = board.sections.at(0)
    assert [t.title for t in backlog.tasks] == [f"Task {i}" for i in range(1, 6)]
    assert _orders(backlog) == [1, 2, 3, 4, 5]
    assert all(t.description == MOCK_DESCRIPTION for t in backlog.tasks)
    assert [t.scheduled_at for t in backlog.tasks] == [
        "2026-10-18T09:00:00.000Z",
        None,
        "2026-10-18T11:00:00.000Z",
        None,
        "2026-10-18T13:00:00.000Z",
    ]
    assert all(len(s.tasks) == 0 for s in list(board.sections)[1:])


def test_default_ids_unique():
    data = tree_to_dict(default_tree())
    ids = [data["boards"][0]["id"]]
    for section in data["boards"][0]["sections"]:
        ids.append(section["id"])
        ids.extend(t["id"] for t in section["tasks"])
    assert len(ids) == len(set(ids)) == 10


def test_corrupt_slot_falls_back_to_default():
    store = create_store(MemorySlot({"blitzit_dnd_state_v1": "{not json"}))
    assert store.seeded is True
    assert store.boards.at(0).title == "Alpha"


def test_store_loads_and_normalizes_order():
    raw = (
        '{"darkMode": true, "boards": [{"id": "b", "title": "Work", "sections": ['
        '{"id": "s", "title": "Backlog", "key": "Backlog", "tasks": ['
        '{"id": "t2", "order": 5, "title": "second"},'
        '{"id": "t1", "order": 2, "title": "first"}]}]}]}'
    )
    store = create_store(MemorySlot({"blitzit_dnd_state_v1": raw}))
    assert store.seeded is False
    assert store.dark_mode is True
    section = store.boards["b"].sections["s"]
    assert [t.id for t in section.tasks] == ["t1", "t2"]
    assert _orders(section) == [1, 2]


def test_tree_is_read_only_outside_mutations():
    store = create_store()
    task = store.boards.at(0).sections.at(0).tasks.at(0)
    with pytest.raises(FrozenNodeError):
        task.title = "direct write"
    with pytest.raises(FrozenNodeError):
        store.root.dark_mode = True


def test_mutating_scope_commits_once():
    store = create_store()
    events = []
    store.subscribe(lambda s: events.append(s))
    with store.mutating():
        with store.mutating() as root:
            root.dark_mode = True
        assert events == []
        root.boards.at(0).title = "Renamed"
    assert events == [store]


def test_mutating_scope_without_changes_is_silent():
    store = create_store()
    events = []
    store.subscribe(lambda s: events.append(1))
    with store.mutating():
        pass
    assert events == []


def test_mutating_scope_refreezes_after_error():
    store = create_store()
    with pytest.raises(RuntimeError):
        with store.mutating() as root:
            root.dark_mode = True
            raise RuntimeError("boom")
    with pytest.raises(FrozenNodeError):
        store.root.dark_mode = False


def test_failing_subscriber_does_not_stop_others(caplog):
    store = create_store()
    events = []

    def broken(s):
        raise RuntimeError("listener bug")

    store.subscribe(broken)
    store.subscribe(lambda s: events.append(1))
    assert set_dark_mode(store, True)
    assert events == [1]
    assert store.dark_mode is True
    assert "subscriber" in caplog.text


def test_unsubscribe():
    store = create_store()
    events = []
    unsubscribe = store.subscribe(lambda s: events.append(1))
    set_dark_mode(store, True)
    unsubscribe()
    set_dark_mode(store, False)
    assert events == [1]


def test_set_dark_mode():
    store = create_store()
    assert set_dark_mode(store, True) is True
    assert store.dark_mode is True
    assert set_dark_mode(store, True) is False


def test_toggle_dark_mode():
    store = BoardStore(default_tree())
    assert toggle_dark_mode(store) is True
    assert toggle_dark_mode(store) is False
