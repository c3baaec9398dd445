"""
Postboard Server Package.

Subpackages:
    api: FastAPI route definitions.
    controllers: Request to service adapters producing the response envelope.
    services: Business logic and the e-mail client.
    validators: Payload normalisation and business validation.
    core: Unified configuration and constants.
    exception_handlers: Error to HTTP translation and telemetry reporting.
    middleware: Request telemetry.
"""
