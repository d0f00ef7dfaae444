"""Textual presenters for blitzit."""

from blitzit.ui.confirm import ConfirmScreen, present

__all__ = ["ConfirmScreen", "present"]
