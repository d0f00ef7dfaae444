"""Reactive board model: store, queries and task mutations."""

from blitzit.model.drag import DragContext, drop
from blitzit.model.loader import build_tree, load_state, parse_state
from blitzit.model.node import FrozenNodeError, ListNode, Node
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
from blitzit.model.store import BoardStore, create_store, set_dark_mode, toggle_dark_mode
from blitzit.model.task import (
    add_task,
    delete_task,
    move_task,
    move_task_to_adjacent_board,
    move_task_to_adjacent_section,
    renumber,
    requires_confirm_for_detach,
    sort_tasks_by_order,
    toggle_subtask,
    update_task,
)
from blitzit.model.writer import save_state, tree_to_dict

__all__ = [
    "BoardStore",
    "DragContext",
    "FrozenNodeError",
    "ListNode",
    "Node",
    "add_task",
    "adjacent_board_section",
    "adjacent_section",
    "board_by_id",
    "board_index_by_id",
    "build_tree",
    "create_store",
    "delete_task",
    "drop",
    "load_state",
    "locate_task",
    "move_task",
    "move_task_to_adjacent_board",
    "move_task_to_adjacent_section",
    "parse_state",
    "renumber",
    "requires_confirm_for_detach",
    "save_state",
    "section_by_id",
    "section_by_key_in_board",
    "set_dark_mode",
    "sort_tasks_by_order",
    "task_by_id",
    "toggle_dark_mode",
    "toggle_subtask",
    "tree_to_dict",
    "update_task",
]
