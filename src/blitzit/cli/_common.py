"""Shared helpers for CLI command handlers."""

import asyncio
import json
import sys
from datetime import datetime
from pathlib import Path

from blitzit.config import read_config
from blitzit.confirm import ConfirmationGate, confirm_detach
from blitzit.model.node import Node
from blitzit.model.query import board_by_id, locate_task
from blitzit.model.store import BoardStore, create_store
from blitzit.persist import PersistenceWatcher
from blitzit.slots import FileSlot


def open_store(args) -> BoardStore:
    """Load the store from args.data_dir and persist every mutation back to it.

    A freshly seeded board is saved straight away so its ids are stable
    across invocations. Sets args.config.
    """
    data_dir = Path(args.data_dir)
    args.config = read_config(data_dir)
    key = args.config["storage_key"]
    slot = FileSlot(data_dir)
    store = create_store(slot, key)
    watcher = PersistenceWatcher(store, slot, key).start()
    if store.seeded:
        watcher.flush()
    return store


def find_board(store: BoardStore, ref: str | None, json_mode: bool) -> Node:
    """Lookup board by id or title; the first board when ref is None."""
    if ref is None:
        board = store.boards.at(0)
    else:
        board = board_by_id(store, ref)
        if board is None:
            board = next((b for b in store.boards if b.title.lower() == ref.lower()), None)
    if board is not None:
        return board
    available = [f"  {b.id}  {b.title}" for b in store.boards]
    error(f"Board '{ref}' not found. Available:\n" + "\n".join(available), json_mode)


def find_section(board: Node, ref: str, json_mode: bool) -> Node:
    """Lookup section by id, role key or title."""
    section = board.sections[ref]
    if section is not None:
        return section
    for section in board.sections:
        if ref.lower() in (section.key.lower(), section.title.lower()):
            return section
    available = [f"  {s.key:<10} {s.title}" for s in board.sections]
    error(f"Section '{ref}' not found. Available:\n" + "\n".join(available), json_mode)


def find_task(store: BoardStore, task_id: str, json_mode: bool) -> tuple[Node, Node, Node]:
    """Lookup (board, section, task) by task id. Exit 1 if not found."""
    found = locate_task(store, task_id)
    if found is not None:
        return found
    error(f"Task '{task_id}' not found.", json_mode)


def parse_when(value: str, json_mode: bool) -> str:
    """Validate an ISO-8601 date-time argument."""
    try:
        datetime.fromisoformat(value)
    except ValueError:
        error(f"Invalid date-time '{value}', expected ISO-8601.", json_mode)
    return value


def _prompt(message: str) -> str:
    try:
        return input(f"{message} [y/N] ")
    except EOFError:
        return ""


async def _console_confirm(store: BoardStore, board_id: str, section_id: str, task_id: str) -> bool:
    gate = ConfirmationGate()
    decision = asyncio.ensure_future(confirm_detach(store, gate, task_id, board_id, section_id))
    await asyncio.sleep(0)
    if gate.pending:
        reply = await asyncio.to_thread(_prompt, gate.message)
        if reply.strip().lower() in ("y", "yes"):
            gate.accept()
        else:
            gate.cancel()
    return await decision


def confirm_move(args, store: BoardStore, board: Node, section: Node, task: Node) -> bool:
    """Ask before moving a scheduled task out of its section, unless disabled."""
    if getattr(args, "yes", False) or not args.config["confirm_scheduled"]:
        return True
    return asyncio.run(_console_confirm(store, board.id, section.id, task.id))


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2))


def output_result(data: dict, text: str, json_mode: bool) -> None:
    """Output mutation result as JSON or plain text."""
    if json_mode:
        output_json(data)
    else:
        print(text)


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)
