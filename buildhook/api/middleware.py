"""ASGI lifespan middleware that runs the queue consumer.

The consumer thread starts when the ASGI server reports startup and is
stopped on shutdown, which closes the ingestion queue and lets the thread
finish the events already accepted.

Usage
-----
Register the middleware when creating the Falcon app::

    consumer = EventConsumer(server.events)
    app = falcon.asgi.App(middleware=[ConsumerLifecycle(consumer)])

"""

from __future__ import annotations

import asyncio
import typing as typ

if typ.TYPE_CHECKING:
    from buildhook.ingestion import EventConsumer

__all__ = ["ConsumerLifecycle"]


class ConsumerLifecycle:
    """Falcon middleware tying an :class:`EventConsumer` to the ASGI lifespan.

    Parameters
    ----------
    consumer
        Consumer started on ``lifespan.startup`` and stopped on
        ``lifespan.shutdown``.

    """

    def __init__(self, consumer: EventConsumer) -> None:
        """Store the consumer managed by this middleware."""
        self._consumer = consumer

    async def process_startup(
        self, _scope: dict[str, typ.Any], _event: dict[str, typ.Any]
    ) -> None:
        """Start the consumer thread."""
        self._consumer.start()

    async def process_shutdown(
        self, _scope: dict[str, typ.Any], _event: dict[str, typ.Any]
    ) -> None:
        """Stop the consumer without blocking the event loop on the join."""
        await asyncio.to_thread(self._consumer.stop)
