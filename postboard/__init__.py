"""Postboard.

A users and posts HTTP API organised in layers:

- ``postboard.server.api``: FastAPI routers, HTTP shape only.
- ``postboard.server.controllers``: request to service call, result to response envelope.
- ``postboard.server.services``: business rules and side effects (welcome e-mail).
- ``postboard.server.validators``: payload normalisation and business validation.
- ``postboard.core.database``: SQLModel entities and the repositories that query them.

Cross-cutting concerns live in ``postboard.core`` (logging, error taxonomy, telemetry)
and ``postboard.server.core`` (unified configuration).
"""

__version__ = "0.1.0"
