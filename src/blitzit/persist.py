"""Write the store to durable storage after every committed mutation."""

import logging

from blitzit.constants import STORAGE_KEY
from blitzit.model.store import BoardStore
from blitzit.model.writer import save_state

logger = logging.getLogger(__name__)


class PersistenceWatcher:
    """Subscribe to a store and save it to a slot on each commit.

    Saving is fire-and-forget: failures are logged by ``save_state`` and
    never reach the mutation that triggered them.
    """

    def __init__(self, store: BoardStore, slot, key: str = STORAGE_KEY) -> None:
        self.store = store
        self.slot = slot
        self.key = key
        self.saves = 0
        self._unsubscribe = None

    @property
    def running(self) -> bool:
        return self._unsubscribe is not None

    def start(self) -> "PersistenceWatcher":
        if self._unsubscribe is None:
            self._unsubscribe = self.store.subscribe(self._on_commit)
        return self

    def stop(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def flush(self) -> bool:
        """Save the current state immediately."""
        return self._save()

    def _on_commit(self, store: BoardStore) -> None:
        self._save()

    def _save(self) -> bool:
        saved = save_state(self.slot, self.store.root, self.key)
        if saved:
            self.saves += 1
            logger.debug("persisted commit %d", self.saves)
        return saved
