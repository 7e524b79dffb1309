"""buildhook runtime entrypoint.

This module provides the ASGI application factory used by Granian and the
``buildhook`` console script. The factory builds a
:class:`~buildhook.ingestion.Server` from the environment, attaches an
:class:`~buildhook.ingestion.EventConsumer` that logs every event, and
delegates app construction to :func:`buildhook.api.app.create_app`.

Configuration is driven by environment variables:

- ``BUILDHOOK_HOST``: Bind address (default ``0.0.0.0``)
- ``BUILDHOOK_PORT``: Listen port (default ``8080``)
- ``BUILDHOOK_PATH``: Webhook path (default ``/build``)
- ``BUILDHOOK_SECRET``: HMAC secret (default empty, signatures not checked)
- ``BUILDHOOK_QUEUE_CAPACITY``: Ingestion queue capacity (default ``10``)
- ``BUILDHOOK_LOG_LEVEL``: Log level (default ``INFO``)

Run the service directly with ``python -m buildhook.runtime``.
"""

from __future__ import annotations

import os
import typing as typ

from buildhook.ingestion import EventConsumer, Server, ServerConfig, ServerConfigError
from buildhook.logging import (
    configure_logging,
    get_logger,
    log_error,
    log_info,
    log_warning,
)

if typ.TYPE_CHECKING:
    import falcon.asgi

__all__ = ["create_app", "load_config", "main"]

logger = get_logger(__name__)


def load_config() -> ServerConfig:
    """Read the server configuration from the environment.

    Raises
    ------
    SystemExit
        If any configuration value is invalid.

    """
    try:
        return ServerConfig.from_env()
    except ServerConfigError as exc:
        # Validation failures need no traceback
        log_error(logger, "Invalid buildhook configuration: %s", exc)
        raise SystemExit(1) from exc


def create_app() -> falcon.asgi.App:
    """Create the Falcon ASGI application with a logging consumer.

    Returns
    -------
    falcon.asgi.App
        Configured Falcon ASGI application.

    """
    from buildhook.api.app import create_app as _create_api_app

    server = Server(load_config())
    consumer = EventConsumer(server.events)
    return _create_api_app(server, consumer=consumer)


def main() -> None:
    """Start the buildhook server using Granian."""
    from granian import Granian
    from granian.constants import Interfaces

    log_level_str = os.environ.get("BUILDHOOK_LOG_LEVEL", "INFO")
    normalized_level, invalid_level = configure_logging(log_level_str)
    if invalid_level:
        log_warning(
            logger,
            "Invalid BUILDHOOK_LOG_LEVEL %r, falling back to %s",
            log_level_str,
            normalized_level,
        )

    config = load_config()
    log_info(
        logger,
        "Starting buildhook on %s:%d%s (queue_capacity=%d, signatures=%s)",
        config.host,
        config.port,
        config.path,
        config.queue_capacity,
        "required" if config.requires_signature else "disabled",
    )

    server = Granian(
        "buildhook.runtime:create_app",
        address=config.host,
        port=config.port,
        interface=Interfaces.ASGI,
        factory=True,
    )
    server.serve()


if __name__ == "__main__":
    main()
