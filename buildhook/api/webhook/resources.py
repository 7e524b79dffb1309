"""Resource accepting webhook deliveries at the configured path.

``POST <path>`` verifies the body's signature when a secret is configured,
decodes it, and offers the event to the server's ingestion queue. Failures
propagate as domain exceptions and are rendered by the handlers in
:mod:`buildhook.api.errors`.

"""

from __future__ import annotations

import typing as typ

import falcon
import msgspec

from buildhook.api.errors import SignatureMismatchError
from buildhook.api.signature import (
    LEGACY_SIGNATURE_HEADER,
    SIGNATURE_HEADER,
    verify_signature,
)
from buildhook.events import decode_event
from buildhook.ingestion import IngestionQueueFullError
from buildhook.logging import get_logger, log_debug, log_info, log_warning

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

    from buildhook.ingestion import Server

__all__ = ["WebhookResource"]

logger = get_logger(__name__)


class WebhookResource:
    """Accept one webhook delivery per request and enqueue its event."""

    def __init__(self, server: Server) -> None:
        """Bind the resource to the server whose queue receives events.

        Parameters
        ----------
        server
            Server value holding the secret and the ingestion queue.

        """
        self._server = server

    def _check_signature(self, req: Request, body: bytes) -> None:
        """Raise ``SignatureMismatchError`` unless the body is signed correctly."""
        secret = self._server.config.secret
        if not secret:
            return
        header = SIGNATURE_HEADER
        signature = req.get_header(SIGNATURE_HEADER)
        if signature is None:
            header = LEGACY_SIGNATURE_HEADER
            signature = req.get_header(LEGACY_SIGNATURE_HEADER)
        if not verify_signature(secret, body, signature):
            raise SignatureMismatchError(header)

    async def on_post(self, req: Request, resp: Response) -> None:
        """Handle a webhook delivery.

        Parameters
        ----------
        req
            Falcon request whose body is the encoded event.
        resp
            Falcon response set to 202 with the accepted event.

        Raises
        ------
        SignatureMismatchError
            If a secret is configured and the signature is missing or wrong.
        InvalidEventFormatError
            If the body is not a valid encoded event.
        IngestionQueueFullError
            If the queue is at capacity; the event is dropped.
        IngestionQueueClosedError
            If the server is shutting down.

        """
        body = await req.stream.read()
        self._check_signature(req, body)
        event = decode_event(body)
        log_debug(
            logger,
            "Decoded %s event for %s from %d byte body",
            event.type,
            event.slug,
            len(body),
        )

        try:
            self._server.enqueue(event)
        except IngestionQueueFullError:
            log_warning(
                logger,
                "Dropped %s event for %s at %s: queue full",
                event.type,
                event.slug,
                event.branch,
            )
            raise

        log_info(
            logger,
            "Accepted %s event for %s at %s (%s)",
            event.type,
            event.slug,
            event.branch,
            event.commit,
        )
        resp.status = falcon.HTTP_202
        resp.media = {"status": "accepted", "event": msgspec.to_builtins(event)}
