"""Serialize a board Node tree and write it to a slot."""

import json
import logging

from blitzit.constants import STORAGE_KEY
from blitzit.model.node import ListNode, Node

logger = logging.getLogger(__name__)


def _subtask_to_dict(subtask: Node) -> dict:
    return {"id": subtask.id, "title": subtask.title or "", "done": bool(subtask.done)}


def task_to_dict(task: Node) -> dict:
    """Convert a task Node to its persisted (camelCase) form."""
    return {
        "id": task.id,
        "order": task.order,
        "title": task.title or "",
        "description": task.description or "",
        "scheduledAt": task.scheduled_at,
        "subtasks": [_subtask_to_dict(s) for s in task.subtasks or ListNode()],
    }


def _section_to_dict(section: Node) -> dict:
    return {
        "id": section.id,
        "title": section.title or "",
        "key": section.key,
        "tasks": [task_to_dict(t) for t in section.tasks or ListNode()],
    }


def board_to_dict(board: Node) -> dict:
    """Convert a board Node to its persisted form."""
    return {
        "id": board.id,
        "title": board.title or "",
        "sections": [_section_to_dict(s) for s in board.sections or ListNode()],
    }


def tree_to_dict(root: Node) -> dict:
    """Convert the root Node to ``{darkMode, boards}``."""
    return {
        "darkMode": bool(root.dark_mode),
        "boards": [board_to_dict(b) for b in root.boards or ListNode()],
    }


def save_state(slot, root: Node, key: str = STORAGE_KEY) -> bool:
    """Serialize and write root to the slot.

    Best-effort: any failure is logged and swallowed. Returns True if the
    blob was written.
    """
    try:
        slot.set(key, json.dumps(tree_to_dict(root)))
    except Exception:
        logger.warning("could not save state to %r", key, exc_info=True)
        return False
    logger.debug("saved state to %r", key)
    return True
