"""Falcon error handlers for webhook ingestion failures.

Each handler turns a domain exception raised while accepting a delivery into
a JSON response with ``title`` and ``description`` fields.

Usage
-----
Register the handlers on the Falcon app::

    from buildhook.api.errors import register_error_handlers

    register_error_handlers(app)

"""

from __future__ import annotations

import typing as typ

import falcon

from buildhook.events import InvalidEventFormatError
from buildhook.ingestion import IngestionQueueClosedError, IngestionQueueFullError

if typ.TYPE_CHECKING:
    import falcon.asgi
    from falcon.asgi import Request, Response

__all__ = [
    "RETRY_AFTER_SECONDS",
    "SignatureMismatchError",
    "handle_invalid_event_format",
    "handle_queue_closed",
    "handle_queue_full",
    "handle_signature_mismatch",
    "register_error_handlers",
]

RETRY_AFTER_SECONDS = 1


class SignatureMismatchError(Exception):
    """Raised when a delivery's HMAC signature does not match its body.

    Attributes
    ----------
    header
        Name of the header that was checked.

    """

    def __init__(self, header: str) -> None:
        """Record which header failed verification."""
        self.header = header
        super().__init__(f"Missing or invalid {header} signature")


async def handle_invalid_event_format(
    _req: Request,
    resp: Response,
    ex: InvalidEventFormatError,
    _params: dict[str, typ.Any],
) -> None:
    """Map ``InvalidEventFormatError`` to an HTTP 400 JSON response."""
    resp.status = falcon.HTTP_400
    resp.media = {
        "title": "Invalid event format",
        "description": str(ex),
    }


async def handle_signature_mismatch(
    _req: Request,
    resp: Response,
    ex: SignatureMismatchError,
    _params: dict[str, typ.Any],
) -> None:
    """Map ``SignatureMismatchError`` to an HTTP 401 JSON response."""
    resp.status = falcon.HTTP_401
    resp.media = {
        "title": "Invalid signature",
        "description": str(ex),
    }


async def handle_queue_full(
    _req: Request,
    resp: Response,
    ex: IngestionQueueFullError,
    _params: dict[str, typ.Any],
) -> None:
    """Map ``IngestionQueueFullError`` to an HTTP 503 with ``Retry-After``.

    The event has already been dropped; the sender decides whether to
    redeliver.
    """
    resp.status = falcon.HTTP_503
    resp.set_header("Retry-After", str(RETRY_AFTER_SECONDS))
    resp.media = {
        "title": "Overloaded",
        "description": str(ex),
    }


async def handle_queue_closed(
    _req: Request,
    resp: Response,
    ex: IngestionQueueClosedError,
    _params: dict[str, typ.Any],
) -> None:
    """Map ``IngestionQueueClosedError`` to an HTTP 503 JSON response."""
    resp.status = falcon.HTTP_503
    resp.media = {
        "title": "Shutting down",
        "description": str(ex),
    }


def register_error_handlers(app: falcon.asgi.App) -> None:
    """Install every ingestion error handler on ``app``."""
    app.add_error_handler(InvalidEventFormatError, handle_invalid_event_format)
    app.add_error_handler(SignatureMismatchError, handle_signature_mismatch)
    app.add_error_handler(IngestionQueueFullError, handle_queue_full)
    app.add_error_handler(IngestionQueueClosedError, handle_queue_closed)
