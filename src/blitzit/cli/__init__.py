"""CLI argument parser and dispatch for blitzit."""

import argparse

from blitzit.cli.board import board_dark_mode, board_list, board_show
from blitzit.cli.task import (
    task_add,
    task_delete,
    task_list,
    task_move,
    task_send,
    task_shift,
    task_toggle,
    task_update,
)
from blitzit.config import default_data_dir
from blitzit.constants import BACKLOG, LEFT, RIGHT


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--data-dir",
        default=str(default_data_dir()),
        help="Directory holding board state and config.yaml (default: $BLITZIT_HOME or ~/.local/share/blitzit)",
    )
    common.add_argument("--json", action="store_true", help="Machine-readable JSON output")

    parser = argparse.ArgumentParser(
        prog="blitzit",
        description="Personal kanban task board",
        parents=[common],
    )

    nouns = parser.add_subparsers(dest="noun")

    # --- board ---
    board_p = nouns.add_parser("board", help="Board operations", parents=[common])
    board_verbs = board_p.add_subparsers(dest="verb")

    board_list_p = board_verbs.add_parser("list", help="List boards", parents=[common])
    board_list_p.set_defaults(func=board_list)

    board_show_p = board_verbs.add_parser("show", help="Show a board's sections and tasks", parents=[common])
    board_show_p.add_argument("board", nargs="?", help="Board ID or title (default: first board)")
    board_show_p.set_defaults(func=board_show)

    board_dark_p = board_verbs.add_parser("dark-mode", help="Show or change dark mode", parents=[common])
    board_dark_p.add_argument("mode", nargs="?", choices=["on", "off", "toggle"], help="New setting")
    board_dark_p.set_defaults(func=board_dark_mode)

    # board with no verb = list
    board_p.set_defaults(func=board_list)

    # --- task ---
    task_p = nouns.add_parser("task", help="Task operations", parents=[common])
    task_verbs = task_p.add_subparsers(dest="verb")

    board_opt = argparse.ArgumentParser(add_help=False)
    board_opt.add_argument("--board", help="Board ID or title (default: first board)")

    confirm_opt = argparse.ArgumentParser(add_help=False)
    confirm_opt.add_argument("-y", "--yes", action="store_true", help="Move scheduled tasks without asking")

    task_list_p = task_verbs.add_parser("list", help="List tasks", parents=[common, board_opt])
    task_list_p.add_argument("--section", help="Section ID, key or title")
    task_list_p.set_defaults(func=task_list)

    task_add_p = task_verbs.add_parser("add", help="Create a task", parents=[common, board_opt])
    task_add_p.add_argument("title", help="Task title")
    task_add_p.add_argument("--section", default=BACKLOG, help=f"Section ID, key or title (default: {BACKLOG})")
    task_add_p.add_argument("--body", default="", help="Task description")
    task_add_p.add_argument("--at", help="Scheduled date-time (ISO-8601)")
    task_add_p.add_argument("--subtask", action="append", help="Subtask title (repeatable)")
    task_add_p.set_defaults(func=task_add)

    task_move_p = task_verbs.add_parser("move", help="Move a task within its board", parents=[common, confirm_opt])
    task_move_p.add_argument("id", help="Task ID")
    task_move_p.add_argument("--section", required=True, help="Target section ID, key or title")
    task_move_p.add_argument("--position", type=int, help="Position in section (1-indexed, default: end)")
    task_move_p.set_defaults(func=task_move)

    task_shift_p = task_verbs.add_parser(
        "shift", help="Move a task to the neighbouring section", parents=[common, confirm_opt]
    )
    task_shift_p.add_argument("id", help="Task ID")
    task_shift_p.add_argument("direction", choices=[LEFT, RIGHT])
    task_shift_p.set_defaults(func=task_shift)

    task_send_p = task_verbs.add_parser(
        "send", help="Move a task to the neighbouring board", parents=[common, confirm_opt]
    )
    task_send_p.add_argument("id", help="Task ID")
    task_send_p.add_argument("direction", choices=[LEFT, RIGHT])
    task_send_p.set_defaults(func=task_send)

    task_update_p = task_verbs.add_parser("update", help="Update a task", parents=[common])
    task_update_p.add_argument("id", help="Task ID")
    task_update_p.add_argument("--title", help="New title")
    task_update_p.add_argument("--body", help="New description")
    schedule = task_update_p.add_mutually_exclusive_group()
    schedule.add_argument("--at", help="New scheduled date-time (ISO-8601)")
    schedule.add_argument("--unschedule", action="store_true", help="Clear the schedule")
    task_update_p.set_defaults(func=task_update)

    task_delete_p = task_verbs.add_parser("delete", help="Delete a task", parents=[common])
    task_delete_p.add_argument("id", help="Task ID")
    task_delete_p.set_defaults(func=task_delete)

    task_toggle_p = task_verbs.add_parser("toggle", help="Toggle a subtask", parents=[common])
    task_toggle_p.add_argument("id", help="Task ID")
    task_toggle_p.add_argument("subtask_id", help="Subtask ID")
    task_toggle_p.set_defaults(func=task_toggle)

    # task with no verb = list
    task_p.set_defaults(func=task_list, board=None, section=None)

    return parser
