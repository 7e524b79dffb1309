"""Application factory for the buildhook Falcon ASGI application.

This module provides ``create_app()``, which builds the Falcon ASGI app
exposing the webhook path of a :class:`~buildhook.ingestion.Server` together
with liveness and readiness probes.

Usage
-----
Create an app whose queue is drained elsewhere::

    server = Server(ServerConfig(path="/hooks/build"))
    app = create_app(server)

Create an app that runs its own consumer for the ASGI lifespan::

    consumer = EventConsumer(server.events)
    app = create_app(server, consumer=consumer)

"""

from __future__ import annotations

import typing as typ

import falcon.asgi

from buildhook.api.errors import register_error_handlers
from buildhook.api.health.resources import HealthResource, ReadyResource
from buildhook.api.webhook.resources import WebhookResource

if typ.TYPE_CHECKING:
    from buildhook.ingestion import EventConsumer, Server

__all__ = ["create_app"]


def create_app(
    server: Server,
    *,
    consumer: EventConsumer | None = None,
) -> falcon.asgi.App:
    """Create and configure the Falcon ASGI application.

    Parameters
    ----------
    server
        Server whose configuration supplies the webhook path and secret and
        whose queue receives decoded events.
    consumer
        Optional consumer started and stopped with the ASGI lifespan.

    Returns
    -------
    falcon.asgi.App
        Configured Falcon ASGI application.

    """
    middleware: list[object] = []
    if consumer is not None:
        from buildhook.api.middleware import ConsumerLifecycle

        middleware.append(ConsumerLifecycle(consumer))

    app = falcon.asgi.App(middleware=middleware)  # type: ignore[no-matching-overload]  # Falcon stubs

    app.add_route("/health", HealthResource())
    app.add_route("/ready", ReadyResource(server.events))
    app.add_route(server.config.path, WebhookResource(server))

    register_error_handlers(app)

    return app
