"""Tests for key-value slots."""

from blitzit.slots import FileSlot, MemorySlot


def test_memory_slot():
    slot = MemorySlot()
    assert slot.get("k") is None
    slot.set("k", "v")
    assert slot.get("k") == "v"


def test_file_slot_missing(tmp_path):
    assert FileSlot(tmp_path / "nothing-here").get("k") is None


def test_file_slot_creates_directory(tmp_path):
    slot = FileSlot(tmp_path / "a" / "b")
    slot.set("k", '{"x": 1}')
    assert (tmp_path / "a" / "b" / "k.json").read_text() == '{"x": 1}'
    assert slot.get("k") == '{"x": 1}'


def test_file_slot_overwrites(tmp_path):
    slot = FileSlot(tmp_path)
    slot.set("k", "one")
    slot.set("k", "two")
    assert slot.get("k") == "two"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["k.json"]
