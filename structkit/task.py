"""Schedulable task with an action, a run time and a clean-up hook."""

from __future__ import annotations

from typing import Any, Callable, Optional

from .uid import BAD_UID, Uid

TaskFunc = Callable[[Any], float]
CleanupFunc = Callable[[Any], Any]


class Task:
    """A function to run at ``exe_time``; its result is the delay before it runs again."""

    def __init__(
        self,
        exe_time: float,
        func: TaskFunc,
        params: Any,
        cleanup: Optional[CleanupFunc],
        cleanup_params: Any,
    ) -> None:
        self.task_id: Uid = BAD_UID
        self.exe_time = exe_time
        self.func = func
        self.params = params
        self.cleanup = cleanup
        self.cleanup_params = cleanup_params

    def __repr__(self) -> str:
        return f"Task(id={self.task_id!r}, exe_time={self.exe_time!r})"

    def run(self) -> Any:
        """Run the task's function and return its result."""
        return self.func(self.params)

    def clean_up(self) -> None:
        if self.cleanup is not None:
            self.cleanup(self.cleanup_params)

    def destroy(self) -> None:
        """Release the task by running its clean-up hook."""
        self.clean_up()


def is_before(task1: Optional[Task], task2: Optional[Task]) -> int:
    """Return 1 if ``task1`` runs earlier, -1 if later, 0 if at the same time."""
    if task1 is None or task2 is None:
        return 0
    if task1.exe_time < task2.exe_time:
        return 1
    if task1.exe_time > task2.exe_time:
        return -1
    return 0