"""Thread-backed one-shot computations polled from the render loop."""

from __future__ import annotations

from concurrent.futures import Future
import threading
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class IncompleteResultError(RuntimeError):
    """Raised when a task's result is read before the task has completed."""


class TaskErroredError(RuntimeError):
    """Raised when a task's result is read after the task raised."""


class BackgroundTask(Generic[T]):
    """Run a single unit of work on its own thread.

    The task can be polled at any point to see whether the work has completed.
    Once it has finished successfully, the result can be read any number of
    times afterwards. Nothing here blocks the calling thread.
    """

    def __init__(self, work: Callable[[], T]) -> None:
        self._future: Future[T] = Future()
        self._thread = threading.Thread(target=self._run, args=(work,), daemon=True)

    @classmethod
    def spawn(cls, work: Callable[[], T]) -> BackgroundTask[T]:
        """Start `work` on a new thread and return its handle."""
        task = cls(work)
        task._thread.start()
        return task

    def _run(self, work: Callable[[], T]) -> None:
        try:
            value = work()
        except BaseException as exc:
            self._future.set_exception(exc)
        else:
            self._future.set_result(value)

    def is_finished(self) -> bool:
        """Return True if the work completed without raising."""
        return self._future.done() and self._future.exception() is None

    def has_errored(self) -> bool:
        """Return True if the work raised; no result is available."""
        return self._future.done() and self._future.exception() is not None

    def result(self) -> T:
        """Return the computed value. Only valid once `is_finished()` is True."""
        if self.has_errored():
            raise TaskErroredError("Task has errored out") from self._future.exception()
        if not self.is_finished():
            raise IncompleteResultError("Task has not completed")
        return self._future.result()


__all__ = ["BackgroundTask", "IncompleteResultError", "TaskErroredError"]
