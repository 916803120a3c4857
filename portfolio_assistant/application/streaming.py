"""
Stream channel and background task helpers.

FrameChannel decouples the producer driving retrieval and generation from
the SSE transport draining frames to the client. Exactly one terminal frame
(done or error) is delivered; anything sent after it, or after the transport
detaches on client disconnect, is dropped.

Background tasks are detached from the request. References are held in a
module-level set until they finish, and each task logs its own failure.

Dependencies: asyncio, portfolio_assistant.models.streaming
System role: Streaming and fire-and-forget concurrency primitives
"""

import asyncio
import logging
from collections.abc import AsyncIterator, Coroutine
from typing import Any

from portfolio_assistant.models.streaming import StreamFrame

logger = logging.getLogger(__name__)

_background_tasks: set[asyncio.Task] = set()


class FrameChannel:
    """Queue-backed channel of stream frames."""

    def __init__(self) -> None:
        self._queue: asyncio.Queue[StreamFrame | None] = asyncio.Queue()
        self._closed = False
        self._detached = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def detached(self) -> bool:
        return self._detached

    def send(self, frame: StreamFrame) -> bool:
        """
        Enqueue a frame.

        Returns:
            True if the frame was accepted, False if it was dropped
        """
        if self._closed or self._detached:
            return False
        self._queue.put_nowait(frame)
        if frame.is_terminal:
            self._close()
        return True

    def close(self) -> None:
        """End the stream without a further frame."""
        if not self._closed:
            self._close()

    def detach(self) -> None:
        """Stop delivering frames; later sends are dropped."""
        self._detached = True

    def _close(self) -> None:
        self._closed = True
        self._queue.put_nowait(None)

    async def __aiter__(self) -> AsyncIterator[StreamFrame]:
        while True:
            frame = await self._queue.get()
            if frame is None:
                return
            yield frame


async def _run_guarded(coro: Coroutine[Any, Any, Any], name: str) -> None:
    try:
        await coro
    except Exception as e:
        logger.exception(
            f"Background task failed: {name}",
            extra={"task_name": name, "error_type": type(e).__name__},
        )


def spawn_background(coro: Coroutine[Any, Any, Any], name: str) -> asyncio.Task:
    """
    Run a coroutine detached from the caller.

    The caller never awaits the task. Exceptions are logged at the task
    boundary and never propagate.

    Args:
        coro: Coroutine to run
        name: Task name for logs

    Returns:
        asyncio.Task: The scheduled task
    """
    task = asyncio.create_task(_run_guarded(coro, name), name=name)
    _background_tasks.add(task)
    task.add_done_callback(_background_tasks.discard)
    return task


def pending_background_tasks() -> set[asyncio.Task]:
    return set(_background_tasks)


async def drain_background_tasks(timeout: float | None = None) -> None:
    """
    Wait for in-flight background tasks, e.g. on shutdown.

    Tasks spawned by the drained tasks are awaited too, within the same
    overall timeout.
    """
    loop = asyncio.get_running_loop()
    deadline = None if timeout is None else loop.time() + timeout
    while True:
        tasks = {task for task in pending_background_tasks() if not task.done()}
        if not tasks:
            return
        remaining = None if deadline is None else deadline - loop.time()
        if remaining is not None and remaining <= 0:
            logger.warning(
                "Background tasks still running after drain timeout",
                extra={"pending_count": len(tasks)},
            )
            return
        await asyncio.wait(tasks, timeout=remaining)
