"""Undo/redo history for the task list.

Each mutating operation records a HistoryEntry naming what happened
(added / completed / deleted), the task object it targeted, the position
that task held, and the task's field values before and after. Undo and
redo replay entries against that exact task, never against whichever task
happens to be last in the list.

The oldest entry on the undo stack is a baseline: it stays put so undo
never rolls back past the first recorded operation.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional
from todo_models import Snapshot, Task

class EntryKind(Enum):
    ADDED = "added"
    COMPLETED = "completed"
    DELETED = "deleted"

@dataclass(frozen=True)
class HistoryEntry:
    kind: EntryKind
    task: Task
    index: int
    before: Optional[Snapshot]  # None for ADDED: the task did not exist yet
    after: Optional[Snapshot]   # None for DELETED

    def revert(self, tasks: List[Task]) -> None:
        """Undo this entry in place on the given task list."""
        if self.kind is EntryKind.ADDED:
            _remove(tasks, self.task)
        elif self.kind is EntryKind.COMPLETED:
            self.task.restore_from(self.before)
        else:
            self.task.restore_from(self.before)
            _insert(tasks, self.index, self.task)

    def reapply(self, tasks: List[Task]) -> None:
        """Redo this entry in place on the given task list."""
        if self.kind is EntryKind.ADDED:
            self.task.restore_from(self.after)
            _insert(tasks, self.index, self.task)
        elif self.kind is EntryKind.COMPLETED:
            self.task.restore_from(self.after)
        else:
            _remove(tasks, self.task)

def _remove(tasks: List[Task], task: Task) -> None:
    if task in tasks:
        tasks.remove(task)

def _insert(tasks: List[Task], index: int, task: Task) -> None:
    if task not in tasks:
        tasks.insert(min(index, len(tasks)), task)

class History:
    def __init__(self) -> None:
        self.undo_stack: List[HistoryEntry] = []
        self.redo_stack: List[HistoryEntry] = []

    def record(self, entry: HistoryEntry) -> None:
        """Push a fresh operation; any pending redo branch is discarded."""
        self.undo_stack.append(entry)
        self.redo_stack.clear()

    @property
    def can_undo(self) -> bool:
        # baseline entry at index 0 is never undone
        return len(self.undo_stack) > 1

    @property
    def can_redo(self) -> bool:
        return bool(self.redo_stack)

    def pop_undo(self) -> Optional[HistoryEntry]:
        """Move the newest undoable entry to the redo stack and return it."""
        if not self.can_undo:
            return None
        entry = self.undo_stack.pop()
        self.redo_stack.append(entry)
        return entry

    def pop_redo(self) -> Optional[HistoryEntry]:
        """Move the newest redo entry back to the undo stack and return it."""
        if not self.can_redo:
            return None
        entry = self.redo_stack.pop()
        self.undo_stack.append(entry)
        return entry
