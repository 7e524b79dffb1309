"""Bounded, thread-safe FIFO channel between webhook producers and a consumer.

Producers call :meth:`IngestionQueue.offer`, which never waits: a full queue
rejects the event with :class:`IngestionQueueFullError`. The consumer calls
:meth:`IngestionQueue.take` or iterates :meth:`IngestionQueue.drain`, which
wait until an event arrives or the queue is closed.

Usage
-----
>>> queue = IngestionQueue(capacity=2)
>>> queue.offer(event)
>>> for event in queue.drain():
...     handle(event)

"""

from __future__ import annotations

import collections
import threading
import typing as typ

from .errors import IngestionQueueClosedError, IngestionQueueFullError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from buildhook.events import Event

DEFAULT_QUEUE_CAPACITY = 10


class IngestionQueue:
    """Fixed-capacity FIFO buffer of events.

    All state is guarded by one :class:`threading.Condition`, so producers on
    any thread or event loop may offer concurrently with a blocked consumer.
    At most ``capacity`` events are buffered at any moment, and each accepted
    event is handed out exactly once.

    Parameters
    ----------
    capacity
        Maximum number of buffered events. Must be positive.

    """

    def __init__(self, capacity: int = DEFAULT_QUEUE_CAPACITY) -> None:
        """Allocate an empty buffer of ``capacity`` events."""
        if capacity < 1:
            msg = f"capacity must be positive, got: {capacity}"
            raise ValueError(msg)
        self._capacity = capacity
        self._buffer: collections.deque[Event] = collections.deque()
        self._condition = threading.Condition()
        self._closed = False

    @property
    def capacity(self) -> int:
        """Return the maximum number of buffered events."""
        return self._capacity

    @property
    def closed(self) -> bool:
        """Return True once :meth:`close` has been called."""
        with self._condition:
            return self._closed

    def __len__(self) -> int:
        """Return the number of events currently buffered."""
        with self._condition:
            return len(self._buffer)

    def offer(self, event: Event) -> None:
        """Append ``event`` without waiting.

        Raises
        ------
        IngestionQueueFullError
            If ``capacity`` events are already buffered. The event is dropped.
        IngestionQueueClosedError
            If the queue has been closed.

        """
        with self._condition:
            if self._closed:
                raise IngestionQueueClosedError.for_offer()
            if len(self._buffer) >= self._capacity:
                raise IngestionQueueFullError(self._capacity)
            self._buffer.append(event)
            self._condition.notify()

    def take(self, timeout: float | None = None) -> Event:
        """Remove and return the oldest event, waiting while the queue is empty.

        Events accepted before :meth:`close` are still returned after it.

        Parameters
        ----------
        timeout
            Seconds to wait for an event. ``None`` waits indefinitely.

        Raises
        ------
        IngestionQueueClosedError
            If the queue is closed and holds no more events.
        TimeoutError
            If ``timeout`` elapses with the queue still empty and open.

        """
        with self._condition:
            self._condition.wait_for(
                lambda: bool(self._buffer) or self._closed, timeout=timeout
            )
            if self._buffer:
                return self._buffer.popleft()
            if self._closed:
                raise IngestionQueueClosedError.exhausted()
            msg = f"no event arrived within {timeout} seconds"
            raise TimeoutError(msg)

    def drain(self) -> cabc.Iterator[Event]:
        """Yield events in arrival order until the queue is closed and empty."""
        while True:
            try:
                event = self.take()
            except IngestionQueueClosedError:
                return
            yield event

    def close(self) -> None:
        """Refuse further offers and wake every waiting consumer.

        Closing is permanent and idempotent.
        """
        with self._condition:
            self._closed = True
            self._condition.notify_all()


__all__ = ["DEFAULT_QUEUE_CAPACITY", "IngestionQueue"]
