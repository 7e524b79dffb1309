"""buildhook HTTP boundary.

This package provides the Falcon Asynchronous Server Gateway Interface
(ASGI) application that receives webhook deliveries, verifies their
signatures, and hands decoded events to the ingestion queue.

Usage
-----
Create and run the application::

    from buildhook.api import create_app

    app = create_app(server)
    app = create_app(server, consumer=consumer)

Public API
----------
create_app
    Application factory registering the webhook path and health probes.
"""

from buildhook.api.app import create_app

__all__ = ["create_app"]
