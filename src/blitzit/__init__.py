"""Personal kanban board state engine."""
