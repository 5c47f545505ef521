"""Fire-and-forget task hand-off.

Side effects such as analytics tracking are started without the caller
waiting on them. A failure is logged and never reaches the caller.
"""

import asyncio
from typing import Any, Coroutine, Optional, Set

import structlog

logger = structlog.get_logger(__name__)

# Strong references so pending tasks are not garbage collected mid-flight
_pending_tasks: Set[asyncio.Task] = set()


def _log_task_outcome(task: asyncio.Task) -> None:
    """Done-callback: log failures, never re-raise."""
    _pending_tasks.discard(task)
    if task.cancelled():
        logger.warning("background_task_cancelled", task=task.get_name())
        return
    error = task.exception()
    if error is not None:
        logger.error(
            "background_task_failed",
            task=task.get_name(),
            error=str(error),
            error_type=type(error).__name__
        )


def fire_and_forget(coro: Coroutine[Any, Any, Any], name: Optional[str] = None) -> Optional[asyncio.Task]:
    """Start a coroutine without awaiting its result.

    Inside a running event loop the coroutine is scheduled as a task and
    returned. Outside one it is run to completion on a fresh loop and None is
    returned.

    Args:
        coro: Coroutine to run.
        name: Optional task name for log output.

    Returns:
        The scheduled task, or None when run synchronously.
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        loop = None

    if loop is None:
        try:
            asyncio.run(coro)
        except Exception as e:
            logger.error("background_task_failed", task=name, error=str(e), error_type=type(e).__name__)
        return None

    task = loop.create_task(coro, name=name)
    _pending_tasks.add(task)
    task.add_done_callback(_log_task_outcome)
    return task
