"""Handlers for 'blitzit board' commands."""

from rich.console import Console
from rich.text import Text

from blitzit.cli._common import find_board, open_store, output_json, output_result
from blitzit.model.node import Node
from blitzit.model.store import set_dark_mode, toggle_dark_mode
from blitzit.model.writer import board_to_dict


def task_line(task: Node) -> Text:
    """One rendered line for a task: order, title, schedule, subtask progress, id."""
    line = Text(f"  {task.order}. ")
    line.append(task.title or "(untitled)", style="bold")
    if task.scheduled_at:
        line.append(f"  @ {task.scheduled_at}", style="cyan")
    if task.subtasks:
        done = sum(1 for s in task.subtasks if s.done)
        line.append(f"  [{done}/{len(task.subtasks)}]", style="green" if done == len(task.subtasks) else "yellow")
    line.append(f"  {task.id}", style="dim")
    return line


def board_list(args) -> int:
    """List boards with section and task counts."""
    store = open_store(args)

    items = []
    for board in store.boards:
        tasks = sum(len(s.tasks) for s in board.sections)
        items.append({"id": board.id, "title": board.title, "sections": len(board.sections), "tasks": tasks})

    if args.json:
        output_json(items)
    else:
        for b in items:
            tasks = "task" if b["tasks"] == 1 else "tasks"
            print(f"{b['id']}  {b['title']:<16} {b['tasks']} {tasks}")

    return 0


def board_show(args) -> int:
    """Render one board's sections and tasks."""
    store = open_store(args)
    board = find_board(store, args.board, args.json)

    if args.json:
        output_json(board_to_dict(board))
        return 0

    console = Console(highlight=False)
    title = Text(board.title, style="bold underline")
    if store.dark_mode:
        title.append("  (dark mode)", style="dim")
    console.print(title, soft_wrap=True)
    for section in board.sections:
        console.print(Text(f"{section.title} ({section.key})", style="bold magenta"), soft_wrap=True)
        if not len(section.tasks):
            console.print(Text("  (empty)", style="dim"), soft_wrap=True)
        for task in section.tasks:
            console.print(task_line(task), soft_wrap=True)

    return 0


def board_dark_mode(args) -> int:
    """Show or change the dark mode flag."""
    store = open_store(args)

    if args.mode == "toggle":
        toggle_dark_mode(store)
    elif args.mode in ("on", "off"):
        set_dark_mode(store, args.mode == "on")

    state = "on" if store.dark_mode else "off"
    output_result({"darkMode": store.dark_mode}, f"Dark mode {state}", args.json)
    return 0
