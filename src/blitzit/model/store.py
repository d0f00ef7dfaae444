"""The board state container.

A BoardStore owns the root Node ``{dark_mode, boards}``. The tree is frozen
except inside ``store.mutating()``, so every write goes through the
mutation functions. When the outermost mutation scope exits having changed
anything, subscribers are notified once.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Any, Callable, Iterator

from blitzit.constants import STORAGE_KEY
from blitzit.model.loader import build_tree, load_state
from blitzit.model.node import ListNode, Node, freeze
from blitzit.model.seed import default_tree
from blitzit.model.task import renumber, sort_tasks_by_order

logger = logging.getLogger(__name__)

Subscriber = Callable[["BoardStore"], None]


class BoardStore:
    """Single owned instance of all boards plus the dark mode flag."""

    def __init__(self, root: Node, seeded: bool = False) -> None:
        self._root = root
        self.seeded = seeded
        self._lock = threading.RLock()
        self._depth = 0
        self._dirty = False
        self._subscribers: list[Subscriber] = []
        root.watch("boards", self._on_tree_change)
        root.watch("dark_mode", self._on_tree_change)
        freeze(root)

    @property
    def root(self) -> Node:
        return self._root

    @property
    def boards(self) -> ListNode:
        return self._root.boards

    @property
    def dark_mode(self) -> bool:
        return bool(self._root.dark_mode)

    def _on_tree_change(self, node: Any, key: str, old: Any, new: Any) -> None:
        self._dirty = True

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Call callback after each committed mutation. Returns an unsubscribe callable."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    @contextmanager
    def mutating(self) -> Iterator[Node]:
        """Unfreeze the tree for the duration of the block.

        Scopes nest; only the outermost one commits.
        """
        with self._lock:
            self._depth += 1
            freeze(self._root, False)
            try:
                yield self._root
            finally:
                self._depth -= 1
                if self._depth == 0:
                    freeze(self._root)
                    if self._dirty:
                        self._dirty = False
                        self._commit()

    def _commit(self) -> None:
        logger.debug("mutation committed")
        for callback in list(self._subscribers):
            try:
                callback(self)
            except Exception:
                logger.warning("subscriber %r failed", callback, exc_info=True)


def create_store(slot=None, key: str = STORAGE_KEY) -> BoardStore:
    """Build the store from the slot, or from the default board if nothing usable is stored."""
    state = load_state(slot, key) if slot is not None else None
    if state is None:
        logger.debug("no persisted state, seeding default board")
        return BoardStore(default_tree(), seeded=True)

    store = BoardStore(build_tree(state))
    with store.mutating():
        for board in store.boards:
            for section in board.sections:
                sort_tasks_by_order(store, section)
                renumber(section)
    return store


def set_dark_mode(store: BoardStore, enabled: bool) -> bool:
    """Set the dark mode flag. Returns True if it changed."""
    if store.dark_mode == bool(enabled):
        return False
    with store.mutating() as root:
        root.dark_mode = bool(enabled)
    return True


def toggle_dark_mode(store: BoardStore) -> bool:
    """Flip the dark mode flag and return the new value."""
    set_dark_mode(store, not store.dark_mode)
    return store.dark_mode
