"""Task scheduler backed by a heap-based priority queue."""

from __future__ import annotations

from typing import Any, Callable

from .pq_heap import HeapPriorityQueue
from .scheduler import Scheduler
from .task import is_before


class HeapScheduler(Scheduler):
    """A scheduler whose queue is a binary heap.

    Each new task's time is pushed back by one second for every task already
    held, and only positive delays reschedule a task.
    """

    def __init__(self) -> None:
        super().__init__()

    def __len__(self) -> int:
        return super().__len__()

    def is_empty(self) -> bool:
        """Return True when no task is queued or running."""
        return super().is_empty()

    def add_task(
        self,
        exe_time: float,
        func: Callable[[Any], Any],
        params: Any,
        cleanup: Callable[[Any], Any] | None,
        cleanup_params: Any,
    ) -> Any:
        """Queue a task and return its uid."""
        return super().add_task(exe_time, func, params, cleanup, cleanup_params)

    def remove_task(self, task_id: Any) -> bool:
        """Remove the task with the given uid; return whether it was found."""
        return super().remove_task(task_id)

    def run(self) -> Any:
        """Run tasks in time order until the queue empties or stop is called."""
        return super().run()

    def stop(self) -> None:
        """Ask a running loop to stop after the current task."""
        super().stop()

    def clear(self) -> None:
        """Drop every queued task."""
        super().clear()

    def _new_queue(self) -> Any:
        return HeapPriorityQueue(is_before)

    def _start_time(self, exe_time: float) -> float:
        return exe_time + len(self)

    def _should_reschedule(self, delay: Any) -> bool:
        return delay is not None and delay > 0