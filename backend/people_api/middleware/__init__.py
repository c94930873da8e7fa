# Middleware package init
"""
People API · Middleware Package
=================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → Route Handler

    1. Request ID: Generate correlation ID for logging and tracing
    2. Logging: Log method, path, status and duration with that ID

    Responses pass back through in reverse order, so the request ID header
    is set on every response and the log line sees the final status code.
"""
