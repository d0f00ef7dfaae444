"""Unique ID generation for boards, sections, tasks and subtasks."""

import secrets
import string
from typing import Iterable

ALPHABET = string.ascii_letters + string.digits + "_-"
ID_LENGTH = 21


def random_id(length: int = ID_LENGTH) -> str:
    """Return a random URL-safe ID of the given length."""
    return "".join(secrets.choice(ALPHABET) for _ in range(length))


class IdGenerator:
    """Issue IDs that never repeat and never clash with reserved ones."""

    def __init__(self) -> None:
        self._seen: set[str] = set()

    def reserve(self, ids: Iterable[str]) -> None:
        """Record externally supplied IDs so they are never issued."""
        self._seen.update(str(i) for i in ids)

    def __contains__(self, id_: str) -> bool:
        return id_ in self._seen

    def new_id(self) -> str:
        while True:
            candidate = random_id()
            if candidate not in self._seen:
                self._seen.add(candidate)
                return candidate


_default = IdGenerator()


def new_id() -> str:
    """Return a fresh process-unique ID."""
    return _default.new_id()


def reserve_ids(ids: Iterable[str]) -> None:
    """Reserve IDs loaded from storage in the process-wide generator."""
    _default.reserve(ids)
