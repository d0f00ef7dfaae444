"""Tests for the persistence watcher."""

from datetime import datetime, timezone

from blitzit.model.loader import load_state
from blitzit.model.store import create_store, set_dark_mode
from blitzit.model.task import add_task, delete_task, update_task
from blitzit.persist import PersistenceWatcher
from blitzit.slots import MemorySlot


def test_saves_after_each_commit():
    store = create_store()
    slot = MemorySlot()
    watcher = PersistenceWatcher(store, slot).start()
    board = store.boards.at(0)
    section = board.sections.at(0)

    task_id = add_task(store, board.id, section.id, "Persist me")
    assert watcher.saves == 1
    saved = load_state(slot).boards[0]["sections"][0]["tasks"]
    assert saved[-1]["id"] == task_id

    delete_task(store, board.id, section.id, task_id)
    assert watcher.saves == 2
    assert all(t["id"] != task_id for t in load_state(slot).boards[0]["sections"][0]["tasks"])


def test_noop_mutation_does_not_save():
    store = create_store()
    watcher = PersistenceWatcher(store, MemorySlot()).start()
    delete_task(store, "nope", "nope", "nope")
    add_task(store, store.boards.at(0).id, "nope", "lost")
    assert watcher.saves == 0


def test_stop_detaches():
    store = create_store()
    slot = MemorySlot()
    watcher = PersistenceWatcher(store, slot).start()
    watcher.stop()
    assert not watcher.running
    set_dark_mode(store, True)
    assert slot.data == {}


def test_start_twice_saves_once_per_commit():
    store = create_store()
    watcher = PersistenceWatcher(store, MemorySlot()).start()
    watcher.start()
    set_dark_mode(store, True)
    assert watcher.saves == 1


def test_save_failure_does_not_reach_mutation():
    class FullSlot:
        def set(self, key, value):
            raise OSError("quota exceeded")

    store = create_store()
    watcher = PersistenceWatcher(store, FullSlot()).start()
    assert set_dark_mode(store, True) is True
    assert store.dark_mode is True
    assert watcher.saves == 0


def test_flush():
    store = create_store()
    slot = MemorySlot()
    assert PersistenceWatcher(store, slot, key="custom").flush()
    assert load_state(slot, key="custom").boards[0]["title"] == "Alpha"


def test_datetime_schedule_is_saved_as_string():
    store = create_store()
    slot = MemorySlot()
    watcher = PersistenceWatcher(store, slot).start()
    board = store.boards.at(0)
    section = board.sections.at(0)
    task = section.tasks.at(1)

    when = datetime(2026, 1, 1, tzinfo=timezone.utc)
    assert update_task(store, board.id, section.id, task.id, scheduled_at=when)
    add_task(store, board.id, section.id, "After")
    assert watcher.saves == 2

    saved = load_state(slot)
    assert saved is not None
    assert saved.boards[0]["sections"][0]["tasks"][1]["scheduledAt"] == "2026-01-01T00:00:00.000Z"
