"""Asynchronous yes/no confirmation gate.

A gate holds at most one pending prompt. ``open`` returns a future that a
presenter resolves through ``accept`` or ``cancel``.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from blitzit.model.task import requires_confirm_for_detach

if TYPE_CHECKING:
    from blitzit.model.store import BoardStore

DETACH_MESSAGE = "This task is scheduled. Move it anyway?"


class GateBusyError(RuntimeError):
    """Raised when a prompt is opened while another is still pending."""


class ConfirmationGate:
    """Single-slot request/response handshake between callers and a presenter."""

    def __init__(self) -> None:
        self._message = ""
        self._future: asyncio.Future[bool] | None = None

    @property
    def message(self) -> str:
        return self._message

    @property
    def pending(self) -> bool:
        return self._future is not None and not self._future.done()

    def open(self, message: str) -> asyncio.Future[bool]:
        """Present message and return a future resolved with the user's answer.

        Must be called from a running event loop.
        """
        if self.pending:
            raise GateBusyError(f"a confirmation is already pending: {self._message!r}")
        self._message = message
        self._future = asyncio.get_running_loop().create_future()
        return self._future

    def _resolve(self, answer: bool) -> None:
        future, self._future = self._future, None
        if future is not None and not future.done():
            future.set_result(answer)

    def accept(self) -> None:
        self._resolve(True)

    def cancel(self) -> None:
        self._resolve(False)


async def confirm_detach(
    store: BoardStore,
    gate: ConfirmationGate,
    task_id: str,
    board_id: str,
    section_id: str,
    message: str = DETACH_MESSAGE,
) -> bool:
    """Ask through the gate only when moving the task needs confirmation."""
    if not requires_confirm_for_detach(store, task_id, board_id, section_id):
        return True
    return await gate.open(message)
