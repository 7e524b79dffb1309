"""Liveness and readiness probe resources.

Usage
-----
Register health endpoints on the Falcon app::

    from buildhook.api.health.resources import HealthResource, ReadyResource

    app.add_route("/health", HealthResource())
    app.add_route("/ready", ReadyResource(server.events))

"""

from __future__ import annotations

import typing as typ
from http import HTTPStatus

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

    from buildhook.ingestion import IngestionQueue

__all__ = ["HealthResource", "ReadyResource"]


class HealthResource:
    """Liveness probe resource returning ``{"status": "ok"}``."""

    async def on_get(self, _req: Request, resp: Response) -> None:
        """Handle GET /health requests."""
        resp.media = {"status": "ok"}
        resp.status = HTTPStatus.OK


class ReadyResource:
    """Readiness probe that also reports ingestion queue depth.

    Responds with HTTP 200 while the queue accepts events and HTTP 503 once
    it has been closed for shutdown.

    """

    def __init__(self, queue: IngestionQueue) -> None:
        """Observe ``queue`` for readiness reporting."""
        self._queue = queue

    async def on_get(self, _req: Request, resp: Response) -> None:
        """Handle GET /ready requests.

        Parameters
        ----------
        _req
            Falcon request (unused).
        resp
            Falcon response populated with readiness status and queue depth.

        """
        closed = self._queue.closed
        resp.media = {
            "status": "closed" if closed else "ready",
            "queue_depth": len(self._queue),
            "queue_capacity": self._queue.capacity,
        }
        resp.status = HTTPStatus.SERVICE_UNAVAILABLE if closed else HTTPStatus.OK
