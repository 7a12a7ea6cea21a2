"""Cooperative job loop for scripting hosts.

A host queues drawing jobs (usually callbacks from a script runtime) and
drains them here. Cancellation is requested through an explicit token and
only observed between jobs, so a context is never left with a half-drawn
glyph or a half-built path.
"""

import logging
from collections import deque
from collections.abc import Callable

from vexcanvas.exceptions import HostCancelledError

logger = logging.getLogger(__name__)


class CancellationToken:
    """Flag a host sets to stop draining jobs."""

    def __init__(self) -> None:
        self._cancelled = False
        self._reason: str | None = None

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def reason(self) -> str | None:
        return self._reason

    def cancel(self, reason: str = "cancelled") -> None:
        """Request cancellation; the first reason given is kept."""
        if not self._cancelled:
            self._cancelled = True
            self._reason = reason
            logger.info("Cancellation requested: %s", reason)

    def raise_if_cancelled(self, processed_count: int = 0, pending_count: int = 0) -> None:
        """Raise HostCancelledError if cancellation was requested."""
        if self._cancelled:
            raise HostCancelledError(processed_count, pending_count)


def drain_jobs(jobs: "deque[Callable[[], object]]", token: CancellationToken) -> int:
    """Run queued jobs in FIFO order until the queue is empty.

    Jobs may append further jobs to the same queue; those run too.

    Args:
        jobs: Queue of zero-argument callables, consumed from the left
        token: Checked before each job

    Returns:
        Number of jobs run

    Raises:
        HostCancelledError: If the token is cancelled while jobs remain
    """
    processed = 0
    while jobs:
        token.raise_if_cancelled(processed, len(jobs))
        job = jobs.popleft()
        job()
        processed += 1
    logger.debug("Drained %d jobs", processed)
    return processed
