"""Task mutation operations for blitzit boards.

Every operation is a silent no-op when something it references is missing,
and reports whether it applied. Sections touched by a structural change are
renumbered so task orders stay 1..N.

Lookups happen inside ``store.mutating()`` so no other writer can change
the tree between finding a task and moving it.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Iterable

from blitzit.ids import new_id
from blitzit.model.node import ListNode, Node
from blitzit.model.query import (
    adjacent_board_section,
    adjacent_section,
    section_by_id,
    task_by_id,
)
from blitzit.model.seed import iso_timestamp
from blitzit.models import MoveSource, MoveTarget

if TYPE_CHECKING:
    from blitzit.model.store import BoardStore


def renumber(section: Node) -> None:
    """Reassign dense 1-based orders in list position order. Caller must hold a mutation scope."""
    for i, task in enumerate(section.tasks):
        task.order = i + 1


def _clamp(index: int, length: int) -> int:
    return max(0, min(index, length))


def _is_schedule(value: Any) -> bool:
    return value is None or isinstance(value, (str, datetime))


def _as_schedule(value: Any) -> str | None:
    """Date-time string for a schedule value. Datetimes are stored as UTC."""
    if isinstance(value, datetime):
        return iso_timestamp(value)
    if isinstance(value, str) and value:
        return value
    return None


def _subtasks_node(subtasks: Iterable[Any] | None) -> ListNode:
    """Build a subtasks ListNode from dicts or Nodes, assigning missing ids."""
    result = ListNode()
    for sub in subtasks or ():
        if isinstance(sub, Node):
            sub = {"id": sub.id, "title": sub.title, "done": sub.done}
        if not isinstance(sub, dict):
            continue
        sub_id = sub.get("id") or new_id()
        result[sub_id] = Node(id=sub_id, title=sub.get("title") or "", done=bool(sub.get("done")))
    return result


def sort_tasks_by_order(store: BoardStore, section: Node) -> bool:
    """Stable-sort a section's tasks ascending by order. Returns True if anything moved."""
    with store.mutating():
        keys = section.tasks.keys()
        ordered = [t.id for t in sorted(section.tasks, key=lambda t: t.order or 0)]
        if ordered == keys:
            return False
        section.tasks.reorder(ordered)
    return True


def move_task(store: BoardStore, source: MoveSource, target: MoveTarget) -> bool:
    """Move a task to target.at_index (clamped) in the target section.

    at_index is a drop position counted before the task is lifted out, so
    within one section index 2 of [A, B, C] means "before C". Same-section
    reorders rearrange the list in a single step.
    """
    with store.mutating():
        source_section = section_by_id(store, source.board_id, source.section_id)
        target_section = section_by_id(store, target.board_id, target.section_id)
        if source_section is None or target_section is None:
            return False
        task = source_section.tasks[source.task_id]
        if task is None:
            return False

        if source_section is target_section:
            keys = source_section.tasks.keys()
            at_index = target.at_index
            if at_index > keys.index(task.id):
                at_index -= 1
            keys.remove(task.id)
            keys.insert(_clamp(at_index, len(keys)), task.id)
            source_section.tasks.reorder(keys)
        else:
            source_section.tasks.pop(task.id)
            insert_at = _clamp(target.at_index, len(target_section.tasks))
            target_section.tasks.insert(insert_at, task.id, task)
        renumber(source_section)
        renumber(target_section)
    return True


def requires_confirm_for_detach(store: BoardStore, task_id: str, board_id: str, section_id: str) -> bool:
    """True if the task exists and is scheduled."""
    task = task_by_id(store, board_id, section_id, task_id)
    return task is not None and bool(task.scheduled_at)


def _send(store: BoardStore, task_id: str, source: Node | None, target: Node | None) -> bool:
    """Append the task at the end of target, keeping its id and fields. Caller holds the scope."""
    if source is None or target is None or task_id not in source.tasks:
        return False
    task = source.tasks.pop(task_id)
    target.tasks[task_id] = task
    renumber(source)
    renumber(target)
    return True


def move_task_to_adjacent_board(
    store: BoardStore,
    task_id: str,
    from_board_id: str,
    section_id: str,
    direction: str,
) -> bool:
    """Send a task to the same-role section of the board left or right of its own."""
    with store.mutating():
        source = section_by_id(store, from_board_id, section_id)
        target = adjacent_board_section(store, from_board_id, section_id, direction)
        return _send(store, task_id, source, target)


def move_task_to_adjacent_section(
    store: BoardStore,
    task_id: str,
    board_id: str,
    from_section_id: str,
    direction: str,
) -> bool:
    """Send a task to the section left or right of its own on the same board."""
    with store.mutating():
        source = section_by_id(store, board_id, from_section_id)
        target = adjacent_section(store, board_id, from_section_id, direction)
        return _send(store, task_id, source, target)


def add_task(
    store: BoardStore,
    board_id: str,
    section_id: str,
    title: str,
    description: str = "",
    scheduled_at: str | datetime | None = None,
    subtasks: Iterable[Any] | None = None,
) -> str | None:
    """Append a new task to a section. Returns its id, or None if the section is missing.

    A datetime schedule is stored as an ISO-8601 string; other non-string
    values leave the task unscheduled.
    """
    with store.mutating():
        section = section_by_id(store, board_id, section_id)
        if section is None:
            return None
        task_id = new_id()
        section.tasks[task_id] = Node(
            id=task_id,
            order=len(section.tasks) + 1,
            title=title,
            description=description,
            scheduled_at=_as_schedule(scheduled_at),
            subtasks=_subtasks_node(subtasks),
        )
    return task_id


def update_task(store: BoardStore, board_id: str, section_id: str, task_id: str, **updates: Any) -> bool:
    """Apply a partial update.

    Only keys present in updates are considered: title and description must
    be strings, subtasks a list; scheduled_at takes a string or datetime,
    None clears it. Values of the wrong type are ignored.
    """
    with store.mutating():
        task = task_by_id(store, board_id, section_id, task_id)
        if task is None:
            return False
        if isinstance(updates.get("title"), str):
            task.title = updates["title"]
        if isinstance(updates.get("description"), str):
            task.description = updates["description"]
        if "scheduled_at" in updates and _is_schedule(updates["scheduled_at"]):
            task.scheduled_at = _as_schedule(updates["scheduled_at"])
        if isinstance(updates.get("subtasks"), list):
            task.subtasks = _subtasks_node(updates["subtasks"])
    return True


def delete_task(store: BoardStore, board_id: str, section_id: str, task_id: str) -> bool:
    """Remove a task and renumber its section. Returns True if a task was removed."""
    with store.mutating():
        section = section_by_id(store, board_id, section_id)
        if section is None:
            return False
        removed = section.tasks.pop(task_id)
        renumber(section)
    return removed is not None


def toggle_subtask(store: BoardStore, board_id: str, section_id: str, task_id: str, subtask_id: str) -> bool:
    """Flip a subtask's done flag."""
    with store.mutating():
        task = task_by_id(store, board_id, section_id, task_id)
        subtask = task.subtasks[subtask_id] if task is not None and task.subtasks is not None else None
        if subtask is None:
            return False
        subtask.done = not subtask.done
    return True
