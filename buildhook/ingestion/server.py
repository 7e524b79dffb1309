"""Server configuration and the ingestion queue it owns.

Usage
-----
Create a server with defaults:

>>> server = Server()
>>> (server.config.port, server.config.path, server.events.capacity)
(8080, '/build', 10)

Or load the configuration from environment variables:

>>> import os
>>> os.environ["BUILDHOOK_QUEUE_CAPACITY"] = "32"
>>> Server(ServerConfig.from_env()).events.capacity
32

"""

from __future__ import annotations

import dataclasses as dc
import os
import typing as typ

from .errors import ServerConfigError
from .queue import DEFAULT_QUEUE_CAPACITY, IngestionQueue

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from buildhook.events import Event

DEFAULT_HOST = "0.0.0.0"  # noqa: S104 - bind all interfaces for container
DEFAULT_PORT = 8080
DEFAULT_PATH = "/build"

_MIN_PORT = 1
_MAX_PORT = 65535


def _is_int(value: object) -> bool:
    """Return True for real integers; bool is rejected."""
    return isinstance(value, int) and not isinstance(value, bool)


@dc.dataclass(frozen=True, slots=True)
class ServerConfig:
    """Construction-time settings for the webhook server.

    Attributes
    ----------
    port
        TCP port the HTTP boundary listens on. Default is 8080.
    path
        HTTP path that receives webhook bodies. Default is ``/build``.
    secret
        Shared secret for HMAC signature checks. Empty disables them.
    queue_capacity
        Number of events the ingestion queue buffers. Default is 10.
    host
        Bind address for the HTTP boundary.

    """

    port: int = DEFAULT_PORT
    path: str = DEFAULT_PATH
    secret: str = ""
    queue_capacity: int = DEFAULT_QUEUE_CAPACITY
    host: str = DEFAULT_HOST

    def __post_init__(self) -> None:
        """Reject values the server cannot run with."""
        if not _is_int(self.port) or not _MIN_PORT <= self.port <= _MAX_PORT:
            raise ServerConfigError.invalid_port(self.port)
        if not isinstance(self.path, str) or not self.path.startswith("/"):
            raise ServerConfigError.invalid_path(self.path)
        if not _is_int(self.queue_capacity) or self.queue_capacity < 1:
            raise ServerConfigError.invalid_capacity(self.queue_capacity)

    @property
    def requires_signature(self) -> bool:
        """Return True when inbound bodies must carry a valid signature."""
        return bool(self.secret)

    @staticmethod
    def _read_int(env_var: str, default: int) -> int:
        """Read an integer env var, falling back to ``default`` when unset."""
        raw = os.environ.get(env_var, "")
        if not raw.strip():
            return default
        try:
            return int(raw)
        except ValueError as exc:
            raise ServerConfigError.not_an_integer(env_var, raw) from exc

    @classmethod
    def from_env(cls) -> ServerConfig:
        """Create configuration from environment variables.

        Reads the following environment variables:

        - ``BUILDHOOK_HOST``: Bind address (default ``0.0.0.0``).
        - ``BUILDHOOK_PORT``: Listen port, 1-65535 (default ``8080``).
        - ``BUILDHOOK_PATH``: Webhook path (default ``/build``).
        - ``BUILDHOOK_SECRET``: Optional HMAC secret.
        - ``BUILDHOOK_QUEUE_CAPACITY``: Positive queue capacity (default 10).

        Raises
        ------
        ServerConfigError
            If any value is malformed or out of range.

        """
        return cls(
            port=cls._read_int("BUILDHOOK_PORT", DEFAULT_PORT),
            path=os.environ.get("BUILDHOOK_PATH", "").strip() or DEFAULT_PATH,
            secret=os.environ.get("BUILDHOOK_SECRET", ""),
            queue_capacity=cls._read_int(
                "BUILDHOOK_QUEUE_CAPACITY", DEFAULT_QUEUE_CAPACITY
            ),
            host=os.environ.get("BUILDHOOK_HOST", "").strip() or DEFAULT_HOST,
        )


class Server:
    """A configuration value together with the one queue it owns.

    Producers reach the queue through :meth:`enqueue` and the consumer
    through :meth:`drain` or :attr:`events`; the queue lives exactly as long
    as the server.
    """

    __slots__ = ("_config", "_events")

    def __init__(self, config: ServerConfig | None = None) -> None:
        """Apply defaults and allocate the bounded queue."""
        self._config = config or ServerConfig()
        self._events = IngestionQueue(self._config.queue_capacity)

    @property
    def config(self) -> ServerConfig:
        """Return the construction-time configuration."""
        return self._config

    @property
    def events(self) -> IngestionQueue:
        """Return the queue owned by this server."""
        return self._events

    def enqueue(self, event: Event) -> None:
        """Offer ``event`` to the queue without waiting.

        Raises
        ------
        IngestionQueueFullError
            If the queue is at capacity; the event is dropped.

        """
        self._events.offer(event)

    def drain(self) -> cabc.Iterator[Event]:
        """Return the queue's in-order, blocking event iterator."""
        return self._events.drain()

    def close(self) -> None:
        """Close the owned queue, releasing any blocked consumer."""
        self._events.close()


__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_PATH",
    "DEFAULT_PORT",
    "Server",
    "ServerConfig",
]
