"""Shared fixtures for CLI tests."""

from argparse import Namespace

import pytest

from blitzit.cli.board import board_list
from blitzit.model.store import create_store
from blitzit.slots import FileSlot


def _args(data_dir, **kwargs):
    """Namespace with the options every handler expects."""
    defaults = {"data_dir": str(data_dir), "json": False, "board": None, "section": None, "yes": False}
    defaults.update(kwargs)
    return Namespace(**defaults)


def _reload(data_dir):
    """Open the persisted store the way the next invocation would."""
    return create_store(FileSlot(data_dir))


def _backlog_tasks(data_dir):
    return list(_reload(data_dir).boards.at(0).sections.at(0).tasks)


@pytest.fixture
def data_dir(tmp_path, capsys):
    """A data directory holding the seeded default board."""
    path = tmp_path / "blitzit"
    board_list(_args(path))
    capsys.readouterr()
    return path
