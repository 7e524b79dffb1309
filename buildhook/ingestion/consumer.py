"""Background consumer that drains the ingestion queue.

A single :class:`EventConsumer` owns one daemon thread. The thread iterates
the queue and passes every event to a handler; the default handler logs the
``owner repo branch commit`` summary.
"""

from __future__ import annotations

import threading
import typing as typ

from buildhook.logging import get_logger, log_exception, log_info, log_warning

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from buildhook.events import Event

    from .queue import IngestionQueue

    EventHandler: typ.TypeAlias = cabc.Callable[[Event], None]

logger = get_logger(__name__)

_DEFAULT_STOP_TIMEOUT = 5.0


def log_event_summary(event: Event) -> None:
    """Log the space-joined ``owner repo branch commit`` of ``event``."""
    log_info(logger, "%s", event.summary)


class EventConsumer:
    """Drain a queue on a worker thread, one event at a time.

    Parameters
    ----------
    queue
        Queue to consume. Stopping the consumer closes it.
    handler
        Callable invoked with each event in arrival order. Exceptions it
        raises are logged and do not stop the loop.

    """

    def __init__(
        self,
        queue: IngestionQueue,
        handler: EventHandler = log_event_summary,
        *,
        name: str = "buildhook-consumer",
    ) -> None:
        """Bind the consumer to ``queue`` without starting it."""
        self._queue = queue
        self._handler = handler
        self._name = name
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()
        self.handled = 0

    @property
    def running(self) -> bool:
        """Return True while the worker thread is alive."""
        thread = self._thread
        return thread is not None and thread.is_alive()

    def start(self) -> None:
        """Start the worker thread; later calls are no-ops."""
        with self._lock:
            if self._thread is not None:
                return
            self._thread = threading.Thread(
                target=self._run, name=self._name, daemon=True
            )
            self._thread.start()
        log_info(logger, "Started %s", self._name)

    def stop(self, timeout: float = _DEFAULT_STOP_TIMEOUT) -> None:
        """Close the queue and wait up to ``timeout`` seconds for the thread.

        Events accepted before the queue closed are still handled.
        """
        self._queue.close()
        with self._lock:
            thread = self._thread
        if thread is None:
            return
        thread.join(timeout)
        if thread.is_alive():
            log_warning(
                logger,
                "%s did not stop within %.1f seconds (%d events queued)",
                self._name,
                timeout,
                len(self._queue),
            )
            return
        log_info(logger, "Stopped %s after %d events", self._name, self.handled)

    def _run(self) -> None:
        for event in self._queue.drain():
            try:
                self._handler(event)
            except Exception as exc:  # noqa: BLE001 - keep draining after handler failures
                log_exception(
                    logger,
                    f"Event handler failed for {event.type} on {event.slug}",
                    exc,
                )
            else:
                self.handled += 1


__all__ = ["EventConsumer", "log_event_summary"]
