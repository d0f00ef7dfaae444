"""Load persisted board state from a slot into a Node tree."""

import json
import logging
from typing import Any

from blitzit.constants import SECTION_KEYS, STORAGE_KEY
from blitzit.ids import new_id, reserve_ids
from blitzit.model.node import ListNode, Node
from blitzit.models import PersistedState

logger = logging.getLogger(__name__)


def _as_str(value: Any, default: str = "") -> str:
    return value if isinstance(value, str) else default


def _as_list(value: Any, what: str) -> list:
    """Missing lists default to empty; anything else that isn't a list is a shape error."""
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{what} is not an array")
    return value


def _require_dict(value: Any, what: str) -> dict:
    if not isinstance(value, dict):
        raise ValueError(f"{what} is not an object")
    return value


def _claim_id(raw: dict, seen: set[str]) -> str:
    """Return the entity's id, or a fresh one if missing. Duplicates are a shape error."""
    id_ = raw.get("id")
    if id_ is None:
        id_ = new_id()
    elif not isinstance(id_, str) or not id_:
        raise ValueError(f"invalid id {id_!r}")
    if id_ in seen:
        raise ValueError(f"duplicate id {id_!r}")
    seen.add(id_)
    return id_


def _normalize_subtask(raw: Any, seen: set[str]) -> dict:
    raw = _require_dict(raw, "subtask")
    done = raw.get("done")
    return {
        "id": _claim_id(raw, seen),
        "title": _as_str(raw.get("title")),
        "done": done if isinstance(done, bool) else False,
    }


def _normalize_task(raw: Any, position: int, seen: set[str]) -> dict:
    raw = _require_dict(raw, "task")
    order = raw.get("order")
    if isinstance(order, bool) or not isinstance(order, int):
        order = position
    scheduled = raw.get("scheduledAt")
    if scheduled is not None and not isinstance(scheduled, str):
        raise ValueError(f"scheduledAt is not a string: {scheduled!r}")
    return {
        "id": _claim_id(raw, seen),
        "order": order,
        "title": _as_str(raw.get("title")),
        "description": _as_str(raw.get("description")),
        "scheduledAt": scheduled or None,
        "subtasks": [_normalize_subtask(s, seen) for s in _as_list(raw.get("subtasks"), "subtasks")],
    }


def _normalize_section(raw: Any, seen: set[str]) -> dict:
    raw = _require_dict(raw, "section")
    key = raw.get("key")
    if key not in SECTION_KEYS:
        raise ValueError(f"unknown section key {key!r}")
    tasks = _as_list(raw.get("tasks"), "tasks")
    return {
        "id": _claim_id(raw, seen),
        "title": _as_str(raw.get("title"), default=key),
        "key": key,
        "tasks": [_normalize_task(t, i + 1, seen) for i, t in enumerate(tasks)],
    }


def _normalize_board(raw: Any, seen: set[str]) -> dict:
    raw = _require_dict(raw, "board")
    return {
        "id": _claim_id(raw, seen),
        "title": _as_str(raw.get("title")),
        "sections": [_normalize_section(s, seen) for s in _as_list(raw.get("sections"), "sections")],
    }


def parse_state(raw: str | None) -> PersistedState | None:
    """Validate a serialized blob. Returns None for anything unusable."""
    if not raw:
        return None
    try:
        parsed = json.loads(raw)
    except (ValueError, RecursionError):
        return None
    if not isinstance(parsed, dict):
        return None
    boards = parsed.get("boards")
    if not isinstance(boards, list):
        return None
    dark_mode = parsed.get("darkMode")
    seen: set[str] = set()
    try:
        normalized = [_normalize_board(b, seen) for b in boards]
    except ValueError as exc:
        logger.warning("discarding persisted state: %s", exc)
        return None
    return PersistedState(
        dark_mode=dark_mode if isinstance(dark_mode, bool) else False,
        boards=normalized,
    )


def load_state(slot, key: str = STORAGE_KEY) -> PersistedState | None:
    """Read and validate the slot. Never raises; None means "use defaults"."""
    try:
        raw = slot.get(key)
    except Exception:
        logger.warning("could not read %r from storage", key, exc_info=True)
        return None
    return parse_state(raw)


def _task_node(task: dict) -> Node:
    subtasks = ListNode()
    for sub in task["subtasks"]:
        subtasks[sub["id"]] = Node(id=sub["id"], title=sub["title"], done=sub["done"])
    return Node(
        id=task["id"],
        order=task["order"],
        title=task["title"],
        description=task["description"],
        scheduled_at=task["scheduledAt"],
        subtasks=subtasks,
    )


def build_tree(state: PersistedState) -> Node:
    """Deserialize validated state into a root Node and reserve its IDs."""
    ids: list[str] = []
    boards = ListNode()
    for board in state.boards:
        sections = ListNode()
        for section in board["sections"]:
            tasks = ListNode()
            for task in section["tasks"]:
                tasks[task["id"]] = _task_node(task)
                ids.append(task["id"])
                ids.extend(sub["id"] for sub in task["subtasks"])
            sections[section["id"]] = Node(
                id=section["id"],
                title=section["title"],
                key=section["key"],
                tasks=tasks,
            )
            ids.append(section["id"])
        boards[board["id"]] = Node(id=board["id"], title=board["title"], sections=sections)
        ids.append(board["id"])
    reserve_ids(ids)
    return Node(dark_mode=state.dark_mode, boards=boards)
