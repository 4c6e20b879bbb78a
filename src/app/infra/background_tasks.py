"""Execução fire-and-forget de operações best-effort.

Mantém referência forte às tasks (evita coleta pelo GC antes do fim),
loga falhas inesperadas e permite drenar pendências no shutdown.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Coroutine

logger = logging.getLogger(__name__)


class BackgroundTaskRunner:
    """Agenda coroutines sem aguardar o resultado."""

    def __init__(self) -> None:
        self._active_tasks: set[asyncio.Task[Any]] = set()

    @property
    def active_count(self) -> int:
        return len(self._active_tasks)

    def schedule(self, coroutine: Coroutine[Any, Any, Any], *, operation: str) -> asyncio.Task[Any]:
        """Agenda a coroutine no loop atual e retorna a task criada."""
        task = asyncio.create_task(coroutine, name=operation)
        self._active_tasks.add(task)
        task.add_done_callback(self._on_task_done)
        logger.debug(
            "background_task_scheduled",
            extra={"operation": operation, "active_tasks": len(self._active_tasks)},
        )
        return task

    def _on_task_done(self, task: asyncio.Task[Any]) -> None:
        self._active_tasks.discard(task)
        with contextlib.suppress(asyncio.CancelledError):
            exc = task.exception()
            if exc is not None:
                logger.error(
                    "background_task_failed",
                    extra={
                        "operation": task.get_name(),
                        "error_type": type(exc).__name__,
                        "active_tasks": len(self._active_tasks),
                    },
                )

    async def drain(self, timeout_seconds: float = 10.0) -> None:
        """Aguarda tasks pendentes; cancela as que excederem o timeout."""
        if not self._active_tasks:
            return

        pending_now = list(self._active_tasks)
        logger.info(
            "background_tasks_draining",
            extra={"pending_tasks": len(pending_now), "timeout_seconds": timeout_seconds},
        )
        _, pending = await asyncio.wait(pending_now, timeout=timeout_seconds)
        if not pending:
            return

        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        logger.warning("background_tasks_cancelled", extra={"cancelled_tasks": len(pending)})
