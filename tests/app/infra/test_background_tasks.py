"""Testes do BackgroundTaskRunner."""

from __future__ import annotations

import asyncio
import logging

import pytest

from app.infra.background_tasks import BackgroundTaskRunner


@pytest.mark.asyncio
async def test_schedule_runs_coroutine_and_releases_task() -> None:
    runner = BackgroundTaskRunner()
    done: list[str] = []

    async def _work() -> None:
        done.append("ok")

    task = runner.schedule(_work(), operation="mark_read")
    assert runner.active_count == 1
    assert task.get_name() == "mark_read"

    await runner.drain()

    assert done == ["ok"]
    assert runner.active_count == 0


@pytest.mark.asyncio
async def test_failed_task_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    runner = BackgroundTaskRunner()

    async def _boom() -> None:
        raise RuntimeError("boom")

    with caplog.at_level(logging.ERROR):
        runner.schedule(_boom(), operation="mark_read")
        await runner.drain()

    assert runner.active_count == 0
    assert any(record.getMessage() == "background_task_failed" for record in caplog.records)


@pytest.mark.asyncio
async def test_drain_cancels_tasks_over_timeout() -> None:
    runner = BackgroundTaskRunner()

    async def _slow() -> None:
        await asyncio.sleep(10)

    task = runner.schedule(_slow(), operation="slow")
    await runner.drain(timeout_seconds=0.01)

    assert task.cancelled()
    assert runner.active_count == 0


@pytest.mark.asyncio
async def test_drain_without_tasks_returns_immediately() -> None:
    await BackgroundTaskRunner().drain()
