"""Task scheduler that runs timed tasks in order of their execution time."""

from __future__ import annotations

import time
from typing import Any, Optional

from .priority_queue import PriorityQueue
from .task import CleanupFunc, Task, TaskFunc, is_before
from .uid import Uid, generate


class Scheduler:
    """Runs tasks at their due time, earliest first.

    A task's function returns the delay before it runs again, or 0 to finish.
    A finished task's clean-up hook is called when it leaves the scheduler.
    """

    def __init__(self) -> None:
        self._queue = self._new_queue()
        self._stopped = True
        self._current: Optional[Task] = None

    def _new_queue(self) -> Any:
        return PriorityQueue(lambda first, second: -is_before(first, second))

    def _start_time(self, exe_time: float) -> float:
        return exe_time

    def _should_reschedule(self, delay: Any) -> bool:
        return bool(delay)

    def __len__(self) -> int:
        return len(self._queue) + (1 if self._current is not None else 0)

    def is_empty(self) -> bool:
        return self._queue.is_empty() and self._current is None

    def add_task(
        self,
        exe_time: float,
        func: TaskFunc,
        params: Any,
        cleanup: Optional[CleanupFunc],
        cleanup_params: Any,
    ) -> Uid:
        """Schedule ``func(params)`` at ``exe_time`` and return the task's id."""
        task = Task(self._start_time(exe_time), func, params, cleanup, cleanup_params)
        task.task_id = generate()
        self._queue.enqueue(task)
        return task.task_id

    def remove_task(self, task_id: Uid) -> bool:
        """Remove the task with ``task_id``; tell whether it was found.

        The task being run has its clean-up hook called; a queued task is
        dropped without it.
        """
        if self._current is not None and self._current.task_id == task_id:
            self._current.clean_up()
            return True
        removed = self._queue.erase(lambda task, uid: task.task_id == uid, task_id)
        return removed is not None

    def run(self) -> None:
        """Run due tasks until the scheduler is empty or stopped."""
        self._stopped = False
        while not self._stopped and not self._queue.is_empty():
            task = self._queue.peek()
            now = time.time()
            if now < task.exe_time:
                time.sleep(task.exe_time - now)
                continue
            self._queue.dequeue()
            self._current = task
            try:
                delay = task.run()
                if self._should_reschedule(delay):
                    task.exe_time = time.time() + delay
                    self._queue.enqueue(task)
                else:
                    self.remove_task(task.task_id)
            finally:
                self._current = None

    def stop(self) -> None:
        """Make ``run`` return after the task in progress."""
        self._stopped = True

    def clear(self) -> None:
        """Drop every queued task."""
        self._queue.clear()