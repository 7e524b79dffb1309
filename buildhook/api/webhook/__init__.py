"""Webhook delivery resource.

Usage
-----
Import the resource for route registration::

    from buildhook.api.webhook.resources import WebhookResource
"""
