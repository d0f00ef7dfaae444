"""Shared constants for blitzit boards."""

STORAGE_KEY = "blitzit_dnd_state_v1"

BACKLOG = "Backlog"
TODAY = "Today"
TOMORROW = "Tomorrow"
NEXT_WEEK = "NextWeek"

SECTION_KEYS = (BACKLOG, TODAY, TOMORROW, NEXT_WEEK)

LEFT = "left"
RIGHT = "right"
