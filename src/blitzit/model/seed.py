"""First-run board generation."""

from datetime import datetime, timedelta, timezone

from blitzit.constants import BACKLOG, NEXT_WEEK, TODAY, TOMORROW
from blitzit.ids import new_id
from blitzit.model.node import ListNode, Node

DEFAULT_BOARD_TITLE = "Alpha"
MOCK_TASK_COUNT = 5
MOCK_DESCRIPTION = "This is a mock task used for demonstration."

# (title, key) in display order
DEFAULT_SECTIONS = (
    ("Backlog", BACKLOG),
    ("Today", TODAY),
    ("Next week", NEXT_WEEK),
    ("Tomorrow", TOMORROW),
)


def iso_timestamp(moment: datetime) -> str:
    """Format a datetime as a UTC ISO-8601 string with millisecond precision."""
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def generate_tasks(count: int, now: datetime | None = None) -> ListNode:
    """Mock tasks alternating scheduled and unscheduled, starting scheduled."""
    now = now or datetime.now(timezone.utc)
    tasks = ListNode()
    for i in range(count):
        scheduled = iso_timestamp(now + timedelta(hours=i)) if i % 2 == 0 else None
        task_id = new_id()
        tasks[task_id] = Node(
            id=task_id,
            order=i + 1,
            title=f"Task {i + 1}",
            description=MOCK_DESCRIPTION,
            scheduled_at=scheduled,
            subtasks=ListNode(),
        )
    return tasks


def generate_board(title: str, now: datetime | None = None) -> Node:
    """Build a board with the four role sections; only Backlog is populated."""
    sections = ListNode()
    for section_title, key in DEFAULT_SECTIONS:
        section_id = new_id()
        tasks = generate_tasks(MOCK_TASK_COUNT, now) if key == BACKLOG else ListNode()
        sections[section_id] = Node(id=section_id, title=section_title, key=key, tasks=tasks)
    board_id = new_id()
    return Node(id=board_id, title=title, sections=sections)


def default_tree(now: datetime | None = None) -> Node:
    """Root node used when nothing usable is persisted."""
    boards = ListNode()
    board = generate_board(DEFAULT_BOARD_TITLE, now)
    boards[board.id] = board
    return Node(dark_mode=False, boards=boards)
