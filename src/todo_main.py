"""Main entry point for the terminal to-do list."""
import sys
from typing import Optional
import click
from task_list import TaskListEngine
from todo_cli import CLI
from todo_config import Settings
import activity_log


@click.command(name="todo-list")
@click.option("--log-file", type=click.Path(dir_okay=False), default=None,
              help="Activity log path (default: $TODO_LOG_FILE or app_log.txt).")
@click.option("--no-log", is_flag=True, help="Do not write the activity log.")
def main(log_file: Optional[str], no_log: bool) -> None:
    settings = Settings.load()
    if log_file:
        settings.log_file = log_file
    activity_log.configure(None if no_log else settings.log_file)
    activity_log.log("To-Do List Manager")
    try:
        CLI(TaskListEngine()).run()
    except Exception as exc:
        click.echo(f"An exception occurred: {exc}", err=True)
        activity_log.log(f"An exception occurred: {exc}")
        sys.exit(1)

if __name__ == "__main__":
    main()
