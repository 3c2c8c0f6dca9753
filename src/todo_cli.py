"""Numbered-menu interface loop for the to-do list.

All engine outcomes are reported verbatim; the engine itself writes the
activity log. A malformed due date is rejected and re-prompted, it never
ends the session.
"""
from typing import Callable
from todo_models import new_task
from task_list import FILTERS, TaskListEngine
from todo_dates import parse_due_date
from activity_log import log
from todo_theme import color, BOLD, HEADER_COLOR, STATUS_COLOR, EMPTY_COLOR

MENU = (
    "1. Add Task",
    "2. Mark Task as Completed",
    "3. Delete Task",
    "4. View Tasks",
    "5. Undo",
    "6. Redo",
    "7. Exit",
)
EXIT_CHOICE = '7'

class CLI:
    def __init__(self, engine: TaskListEngine, read: Callable[[str], str] = input):
        self.engine: TaskListEngine = engine
        self.read = read
        self.handlers = {
            '1': self._add,
            '2': self._complete,
            '3': self._delete,
            '4': self._view,
            '5': self._undo,
            '6': self._redo,
        }

    def run(self) -> None:
        """Main REPL loop: show the menu, dispatch one choice, repeat."""
        try:
            while True:
                self._menu()
                choice = self.read("Enter your choice: ").strip()
                if choice == EXIT_CHOICE:
                    print("Exiting...")
                    break
                handler = self.handlers.get(choice)
                if handler is None:
                    print("Invalid choice! Please enter a valid option.")
                    continue
                handler()
        except (KeyboardInterrupt, EOFError):
            print("\nInterrupted. Exiting...")

    def _menu(self) -> None:
        print("\n" + color("Options:", HEADER_COLOR, BOLD))
        for line in MENU:
            print(line)

    # -------------------- user-interactive flows --------------------
    def _read_description(self, prompt: str) -> str:
        description = self.read(prompt).strip()
        if not description:
            print("Description required.")
        return description

    def _add(self) -> None:
        description = self._read_description("Enter task description: ")
        if not description:
            return
        while True:
            raw = self.read("Enter due date (YYYY MM DD): ")
            parsed = parse_due_date(raw)
            if parsed.ok:
                break
            print(f"Invalid date format: {parsed.error}")
            log(f"Invalid date format: {raw!r} ({parsed.error})")
        self.engine.add_task(new_task(description, parsed.value))
        print("Task added successfully!")

    def _complete(self) -> None:
        description = self._read_description("Enter task description to mark as completed: ")
        if not description:
            return
        if self.engine.mark_completed(description):
            print("Task marked as completed!")
        else:
            print("Task not found or already completed!")

    def _delete(self) -> None:
        description = self._read_description("Enter task description to delete: ")
        if not description:
            return
        if self.engine.delete_task(description):
            print("Task deleted!")
        else:
            print("Task not found!")

    def _view(self) -> None:
        print(f"Filter options: {', '.join(FILTERS)}")
        filter_option = self.read("Enter filter option: ").strip().lower()
        tasks = self.engine.view(filter_option)
        if not tasks:
            print(color("No tasks.", EMPTY_COLOR))
            return
        for task in tasks:
            print(color(task.render(), STATUS_COLOR.get(task.status, '')))

    def _undo(self) -> None:
        print("Undo completed." if self.engine.undo() else "Nothing to undo.")

    def _redo(self) -> None:
        print("Redo completed." if self.engine.redo() else "Nothing to redo.")
