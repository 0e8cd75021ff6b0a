from __future__ import annotations

from datetime import datetime, timedelta
import threading

import pytest

from pihud.data.cell import AutoRefreshingData, RefreshStatus

T0 = datetime(2024, 3, 14, 9, 0, 0)


class ScriptedFetcher:
    """Returns (or raises) queued outcomes, optionally held until released."""

    def __init__(self, *outcomes: object) -> None:
        self._outcomes = list(outcomes)
        self.calls = 0
        self.release = threading.Event()
        self.release.set()

    def __call__(self) -> object:
        self.calls += 1
        self.release.wait(timeout=5)
        outcome = self._outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def test_initial_state() -> None:
    cell = AutoRefreshingData(60, ScriptedFetcher("V1"))

    assert cell.data is None
    assert cell.status is RefreshStatus.LOADING
    assert cell.last_refresh_time is None
    assert cell.refresh_interval == timedelta(seconds=60)
    assert not cell.is_refreshing


def test_first_tick_fetches_regardless_of_interval(wait_for_task) -> None:
    fetcher = ScriptedFetcher("V1")
    cell = AutoRefreshingData(timedelta(days=365 * 100), fetcher)

    cell.on_tick(T0)

    assert cell.is_refreshing
    wait_for_task(cell)
    assert fetcher.calls == 1


def test_no_second_task_while_one_is_running(wait_for_task) -> None:
    fetcher = ScriptedFetcher("V1", "V2")
    fetcher.release.clear()
    cell = AutoRefreshingData(0, fetcher)

    cell.on_tick(T0)
    first_task = cell._task
    for offset in range(1, 20):
        cell.on_tick(T0 + timedelta(seconds=offset))
        assert cell._task is first_task

    fetcher.release.set()
    wait_for_task(cell)
    assert fetcher.calls == 1


def test_refresh_scenario_v1_then_v2(wait_for_task) -> None:
    cell = AutoRefreshingData(60, ScriptedFetcher("V1", "V2"))

    cell.on_tick(T0)
    assert cell.status is RefreshStatus.LOADING
    assert cell.data is None

    wait_for_task(cell)
    t1 = T0 + timedelta(seconds=1)
    cell.on_tick(t1)
    assert cell.status is RefreshStatus.LOADED
    assert cell.data == "V1"
    assert cell.last_refresh_time == t1
    assert not cell.is_refreshing

    cell.on_tick(t1 + timedelta(seconds=60))
    assert not cell.is_refreshing

    cell.on_tick(t1 + timedelta(seconds=61))
    assert cell.is_refreshing
    assert cell.data == "V1"

    wait_for_task(cell)
    t2 = t1 + timedelta(seconds=62)
    cell.on_tick(t2)
    assert cell.status is RefreshStatus.LOADED
    assert cell.data == "V2"
    assert cell.last_refresh_time == t2


def test_failure_preserves_previous_value(wait_for_task) -> None:
    cell = AutoRefreshingData(10, ScriptedFetcher("good", RuntimeError("offline")))

    cell.on_tick(T0)
    wait_for_task(cell)
    cell.on_tick(T0 + timedelta(seconds=1))
    assert cell.data == "good"

    cell.on_tick(T0 + timedelta(seconds=12))
    wait_for_task(cell)
    failed_at = T0 + timedelta(seconds=13)
    cell.on_tick(failed_at)

    assert cell.status is RefreshStatus.ERROR
    assert cell.data == "good"
    assert cell.last_refresh_time == failed_at
    assert not cell.is_refreshing


def test_failure_before_any_success_leaves_data_empty(wait_for_task) -> None:
    cell = AutoRefreshingData(10, ScriptedFetcher(RuntimeError("offline")))

    cell.on_tick(T0)
    wait_for_task(cell)
    cell.on_tick(T0 + timedelta(seconds=1))

    assert cell.status is RefreshStatus.ERROR
    assert cell.data is None


def test_success_after_error_recovers(wait_for_task) -> None:
    cell = AutoRefreshingData(10, ScriptedFetcher(RuntimeError("offline"), "fresh"))

    cell.on_tick(T0)
    wait_for_task(cell)
    cell.on_tick(T0 + timedelta(seconds=1))
    assert cell.status is RefreshStatus.ERROR

    cell.on_tick(T0 + timedelta(seconds=5))
    assert not cell.is_refreshing

    cell.on_tick(T0 + timedelta(seconds=12))
    wait_for_task(cell)
    cell.on_tick(T0 + timedelta(seconds=13))

    assert cell.status is RefreshStatus.LOADED
    assert cell.data == "fresh"


@pytest.mark.parametrize("interval", [0, 0.5, timedelta(minutes=5)])
def test_interval_accepts_seconds_or_timedelta(interval) -> None:
    cell = AutoRefreshingData(interval, ScriptedFetcher())

    expected = interval if isinstance(interval, timedelta) else timedelta(seconds=interval)
    assert cell.refresh_interval == expected


def test_first_tick_fetches_with_largest_interval(wait_for_task) -> None:
    fetcher = ScriptedFetcher("V1")
    cell = AutoRefreshingData(timedelta.max, fetcher)

    cell.on_tick(T0)

    assert cell.is_refreshing
    wait_for_task(cell)
    cell.on_tick(T0 + timedelta(seconds=1))
    assert cell.data == "V1"
    assert cell.last_refresh_time == T0 + timedelta(seconds=1)

    cell.on_tick(T0 + timedelta(days=365 * 100))
    assert not cell.is_refreshing
