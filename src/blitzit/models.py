"""Plain data records that live outside the reactive tree."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class PersistedState:
    """Validated contents of the storage slot."""

    dark_mode: bool = False
    boards: list[dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True)
class MoveSource:
    """Where a task is moved from."""

    board_id: str
    section_id: str
    task_id: str


@dataclass(frozen=True)
class MoveTarget:
    """Where a task is moved to. at_index is clamped on insert."""

    board_id: str
    section_id: str
    at_index: int
