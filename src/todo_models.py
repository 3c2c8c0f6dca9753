"""Data models for the terminal to-do list.

Task is the mutable entity shown to the user; Snapshot is the frozen
point-in-time copy of its fields used by the undo/redo history.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import date

@dataclass(frozen=True)
class Snapshot:
    """Immutable record of a task's field values at one instant."""
    description: str
    completed: bool
    due_date: date

@dataclass(eq=False)
class Task:
    """A single to-do item.

    Fields:
        description: Short, single-line text shown to the user. The
            description-based engine operations use it as lookup key.
        due_date: Calendar date the task is due (no time component).
        completed: False until marked completed.
        id: Stable identifier assigned by the engine on add (0 = unassigned).
    """
    description: str
    due_date: date
    completed: bool = False
    id: int = 0

    def mark_completed(self) -> None:
        self.completed = True

    def create_snapshot(self) -> Snapshot:
        return Snapshot(self.description, self.completed, self.due_date)

    def restore_from(self, snapshot: Snapshot) -> None:
        """Overwrite all fields from a snapshot; id and position stay put."""
        self.description = snapshot.description
        self.completed = snapshot.completed
        self.due_date = snapshot.due_date

    @property
    def status(self) -> str:
        return "Completed" if self.completed else "Pending"

    def render(self) -> str:
        # month/day are not zero-padded: 2024-3-1
        d = self.due_date
        return f"{self.description} - {self.status}, Due: {d.year}-{d.month}-{d.day}"

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Task(id={self.id}, description={self.description}, completed={self.completed})"

def new_task(description: str, due_date: date) -> Task:
    """Build a pending task; a blank description is rejected."""
    description = description.strip()
    if not description:
        raise ValueError("Task description must not be empty")
    return Task(description=description, due_date=due_date)
