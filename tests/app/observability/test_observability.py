"""Testes de correlation_id e métricas."""

from __future__ import annotations

import asyncio
import logging

import pytest

from app.observability import (
    correlation_scope,
    get_correlation_id,
    measure_latency,
    record_dispatch_status,
)


def test_correlation_scope_sets_and_restores() -> None:
    assert get_correlation_id() == ""

    with correlation_scope("abc") as correlation_id:
        assert correlation_id == "abc"
        assert get_correlation_id() == "abc"

    assert get_correlation_id() == ""


def test_correlation_scope_generates_id_when_missing() -> None:
    with correlation_scope(None) as correlation_id:
        assert len(correlation_id) == 32
        assert get_correlation_id() == correlation_id


@pytest.mark.asyncio
async def test_background_task_inherits_correlation_id() -> None:
    async def _read() -> str:
        return get_correlation_id()

    with correlation_scope("delivery-1"):
        task = asyncio.create_task(_read())

    assert await task == "delivery-1"


def test_measure_latency_logs_even_on_error(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO), pytest.raises(RuntimeError):
        with measure_latency("outbound_sender", "send"):
            raise RuntimeError("boom")

    record = next(r for r in caplog.records if r.getMessage() == "metric_latency")
    assert record.component == "outbound_sender"
    assert record.operation == "send"
    assert record.latency_ms >= 0


def test_record_dispatch_status(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO):
        record_dispatch_status("Ignored")

    record = next(r for r in caplog.records if r.getMessage() == "metric_dispatch_status")
    assert record.status == "Ignored"
