"""Health probe resources for liveness and readiness checks.

Usage
-----
Import health resources for route registration::

    from buildhook.api.health.resources import HealthResource, ReadyResource
"""
