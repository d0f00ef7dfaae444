"""Handlers for 'blitzit task' commands."""

from blitzit.cli._common import (
    confirm_move,
    error,
    find_board,
    find_section,
    find_task,
    open_store,
    output_json,
    output_result,
    parse_when,
)
from blitzit.model.query import adjacent_board_section, adjacent_section, locate_task
from blitzit.model.task import (
    add_task,
    delete_task,
    move_task,
    move_task_to_adjacent_board,
    move_task_to_adjacent_section,
    toggle_subtask,
    update_task,
)
from blitzit.model.writer import task_to_dict
from blitzit.models import MoveSource, MoveTarget


def _where(board, section) -> dict:
    return {
        "board": {"id": board.id, "title": board.title},
        "section": {"id": section.id, "key": section.key, "title": section.title},
    }


def task_list(args) -> int:
    """List tasks grouped by section."""
    store = open_store(args)
    board = find_board(store, args.board, args.json)
    sections = [find_section(board, args.section, args.json)] if args.section else list(board.sections)

    if args.json:
        output_json([{**task_to_dict(t), **_where(board, s)} for s in sections for t in s.tasks])
    else:
        for section in sections:
            print(f"{section.key}  {section.title}")
            for task in section.tasks:
                when = f"  @ {task.scheduled_at}" if task.scheduled_at else ""
                print(f"  {task.order}. {task.title}{when}  {task.id}")

    return 0


def task_add(args) -> int:
    """Create a new task at the end of a section."""
    store = open_store(args)
    board = find_board(store, args.board, args.json)
    section = find_section(board, args.section, args.json)
    scheduled_at = parse_when(args.at, args.json) if args.at else None

    task_id = add_task(
        store,
        board.id,
        section.id,
        title=args.title,
        description=args.body,
        scheduled_at=scheduled_at,
        subtasks=[{"title": t} for t in args.subtask or []],
    )

    output_result(
        {"id": task_id, "title": args.title, **_where(board, section)},
        f"Created task {task_id} in {section.title}",
        args.json,
    )
    return 0


def task_move(args) -> int:
    """Move a task to a section and position on the same board."""
    store = open_store(args)
    board, source, task = find_task(store, args.id, args.json)
    target = find_section(board, args.section, args.json)

    if target is not source and not confirm_move(args, store, board, source, task):
        output_result({"id": task.id, "moved": False}, "Cancelled", args.json)
        return 1

    if args.position is None:
        position = len(target.tasks)
    else:
        # drop positions count the task's own slot when moving down its section
        position = args.position - 1
        if target is source and position > source.tasks.index(task.id):
            position += 1
    move_task(
        store,
        MoveSource(board.id, source.id, task.id),
        MoveTarget(board.id, target.id, position),
    )

    output_result(
        {"id": task.id, "order": task.order, "moved": True, **_where(board, target)},
        f"Moved task {task.id} to {target.title} #{task.order}",
        args.json,
    )
    return 0


def task_shift(args) -> int:
    """Send a task to the neighbouring section on its board."""
    store = open_store(args)
    board, section, task = find_task(store, args.id, args.json)

    edge = f"No section to the {args.direction} of {section.title}."
    if adjacent_section(store, board.id, section.id, args.direction) is None:
        error(edge, args.json)

    if not confirm_move(args, store, board, section, task):
        output_result({"id": task.id, "moved": False}, "Cancelled", args.json)
        return 1

    if not move_task_to_adjacent_section(store, task.id, board.id, section.id, args.direction):
        error(edge, args.json)

    board, section, _ = locate_task(store, task.id)
    output_result(
        {"id": task.id, "moved": True, **_where(board, section)},
        f"Moved task {task.id} to {section.title}",
        args.json,
    )
    return 0


def task_send(args) -> int:
    """Send a task to the same section of the neighbouring board."""
    store = open_store(args)
    board, section, task = find_task(store, args.id, args.json)

    edge = f"No board with a {section.key} section to the {args.direction} of {board.title}."
    if adjacent_board_section(store, board.id, section.id, args.direction) is None:
        error(edge, args.json)

    if not confirm_move(args, store, board, section, task):
        output_result({"id": task.id, "moved": False}, "Cancelled", args.json)
        return 1

    if not move_task_to_adjacent_board(store, task.id, board.id, section.id, args.direction):
        error(edge, args.json)

    board, section, _ = locate_task(store, task.id)
    output_result(
        {"id": task.id, "moved": True, **_where(board, section)},
        f"Moved task {task.id} to {board.title} / {section.title}",
        args.json,
    )
    return 0


def task_update(args) -> int:
    """Update a task's title, description or schedule."""
    store = open_store(args)
    board, section, task = find_task(store, args.id, args.json)

    updates = {}
    if args.title is not None:
        updates["title"] = args.title
    if args.body is not None:
        updates["description"] = args.body
    if args.unschedule:
        updates["scheduled_at"] = None
    elif args.at is not None:
        updates["scheduled_at"] = parse_when(args.at, args.json)

    update_task(store, board.id, section.id, task.id, **updates)

    output_result(task_to_dict(task), f"Updated task {task.id}", args.json)
    return 0


def task_delete(args) -> int:
    """Delete a task."""
    store = open_store(args)
    board, section, task = find_task(store, args.id, args.json)

    delete_task(store, board.id, section.id, task.id)

    output_result({"id": task.id, "deleted": True}, f"Deleted task {task.id}", args.json)
    return 0


def task_toggle(args) -> int:
    """Flip a subtask between done and not done."""
    store = open_store(args)
    board, section, task = find_task(store, args.id, args.json)

    if not toggle_subtask(store, board.id, section.id, task.id, args.subtask_id):
        error(f"Subtask '{args.subtask_id}' not found on task {task.id}.", args.json)

    done = task.subtasks[args.subtask_id].done
    output_result(
        {"id": task.id, "subtask": args.subtask_id, "done": done},
        f"Subtask {args.subtask_id} {'done' if done else 'not done'}",
        args.json,
    )
    return 0
