"""Task list engine: owns the tasks plus their undo/redo history.

Description-based operations resolve to the *first* live match, as the
menu does; the ``*_by_id`` variants reach any task when descriptions
repeat. Every successful mutation records exactly one history entry.
"""
from typing import List, Optional, Tuple
from todo_models import Task
from todo_history import EntryKind, History, HistoryEntry
from activity_log import log

FILTERS: Tuple[str, ...] = ("all", "completed", "pending")

class TaskListEngine:
    def __init__(self) -> None:
        self.tasks: List[Task] = []
        self.history: History = History()
        self._next_id: int = 1

    # -------------------- id management --------------------
    def _allocate_id(self) -> int:
        nid = self._next_id
        self._next_id += 1
        return nid

    # -------------------- queries --------------------
    def find(self, description: str) -> Optional[Task]:
        for task in self.tasks:
            if task.description == description:
                return task
        return None

    def get_task(self, task_id: int) -> Optional[Task]:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def view(self, filter_option: str = "all") -> List[Task]:
        """Tasks in insertion order; unknown filters behave as "all"."""
        if filter_option == "completed":
            return [t for t in self.tasks if t.completed]
        if filter_option == "pending":
            return [t for t in self.tasks if not t.completed]
        return list(self.tasks)

    @property
    def undo_stack(self) -> List[HistoryEntry]:
        return self.history.undo_stack

    @property
    def redo_stack(self) -> List[HistoryEntry]:
        return self.history.redo_stack

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    # -------------------- task operations --------------------
    def add_task(self, task: Task) -> Task:
        if not task.id:
            task.id = self._allocate_id()
        self.tasks.append(task)
        self.history.record(HistoryEntry(
            EntryKind.ADDED, task, len(self.tasks) - 1, None, task.create_snapshot()))
        log(f"Task added: {task.description}")
        return task

    def mark_completed(self, description: str) -> bool:
        for task in self.tasks:
            if task.description == description and not task.completed:
                return self._complete_found_task(task)
        log(f"Task not found or already completed: {description}")
        return False

    def mark_completed_by_id(self, task_id: int) -> bool:
        task = self.get_task(task_id)
        if task is None or task.completed:
            log(f"Task not found or already completed: id {task_id}")
            return False
        return self._complete_found_task(task)

    def _complete_found_task(self, task: Task) -> bool:
        before = task.create_snapshot()
        task.mark_completed()
        self.history.record(HistoryEntry(
            EntryKind.COMPLETED, task, self.tasks.index(task), before, task.create_snapshot()))
        log(f"Task marked as completed: {task.description}")
        return True

    def delete_task(self, description: str) -> bool:
        task = self.find(description)
        if task is None:
            log(f"Task not found: {description}")
            return False
        return self._delete_found_task(task)

    def delete_task_by_id(self, task_id: int) -> bool:
        task = self.get_task(task_id)
        if task is None:
            log(f"Task not found: id {task_id}")
            return False
        return self._delete_found_task(task)

    def _delete_found_task(self, task: Task) -> bool:
        index = self.tasks.index(task)
        del self.tasks[index]
        self.history.record(HistoryEntry(
            EntryKind.DELETED, task, index, task.create_snapshot(), None))
        log(f"Task deleted: {task.description}")
        return True

    # -------------------- history --------------------
    def undo(self) -> bool:
        entry = self.history.pop_undo()
        if entry is None:
            log("Undo not possible")
            return False
        entry.revert(self.tasks)
        log("Undo completed")
        return True

    def redo(self) -> bool:
        entry = self.history.pop_redo()
        if entry is None:
            log("Redo not possible")
            return False
        entry.reapply(self.tasks)
        if entry.kind is EntryKind.DELETED:
            log("Redo completed (Task deleted)")
        else:
            log("Redo completed")
        return True

    add = add_task
    delete = delete_task
