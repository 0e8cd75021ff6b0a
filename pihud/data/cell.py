"""Auto-refreshing data cell driven by the render loop's tick."""

from __future__ import annotations

from datetime import datetime, timedelta
from enum import Enum
import logging
from typing import Callable, Generic, TypeVar

from pihud.data.task import BackgroundTask

T = TypeVar("T")

logger = logging.getLogger(__name__)


class RefreshStatus(Enum):
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


class AutoRefreshingData(Generic[T]):
    """Runs a fetch in the background at a requested interval.

    The most recently fetched value is kept along with an indication of
    whether the latest attempt failed. A failed refresh keeps the previous
    value around so stale data can still be shown.
    """

    def __init__(
        self,
        refresh_interval: timedelta | float,
        fetcher: Callable[[], T],
        name: str = "data",
    ) -> None:
        if not isinstance(refresh_interval, timedelta):
            refresh_interval = timedelta(seconds=refresh_interval)
        self._refresh_interval = refresh_interval
        self._fetcher = fetcher
        self._name = name
        self._data: T | None = None
        self._status = RefreshStatus.LOADING
        self._last_refresh_time: datetime | None = None
        self._task: BackgroundTask[T] | None = None

    @property
    def data(self) -> T | None:
        return self._data

    @property
    def status(self) -> RefreshStatus:
        return self._status

    @property
    def last_refresh_time(self) -> datetime | None:
        """When the last attempt completed; None until the first one does."""
        return self._last_refresh_time

    @property
    def refresh_interval(self) -> timedelta:
        return self._refresh_interval

    @property
    def is_refreshing(self) -> bool:
        """True while a fetch is in flight."""
        return self._task is not None

    def _due(self, now: datetime) -> bool:
        if self._last_refresh_time is None:
            return True
        return now - self._last_refresh_time > self._refresh_interval

    def on_tick(self, now: datetime) -> None:
        """Advance the refresh state machine. Never blocks."""
        if self._task is None:
            if self._due(now):
                logger.debug("Refreshing %s", self._name)
                self._task = BackgroundTask.spawn(self._fetcher)
            return

        if self._task.is_finished():
            self._data = self._task.result()
            self._task = None
            self._last_refresh_time = now
            self._status = RefreshStatus.LOADED
        elif self._task.has_errored():
            # Keep the existing data.
            self._task = None
            self._last_refresh_time = now
            self._status = RefreshStatus.ERROR


__all__ = ["AutoRefreshingData", "RefreshStatus"]
