# Middleware package init
"""
Notes API — Middleware Package
===============================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [CORS, optional] → [Static Files] → Route Handler

    1. Request ID: correlation id used by every log line of the request
    2. Logging: method, path and body up front; status and duration after
    3. CORS: only installed when CORS_ORIGINS is configured
    4. Static Files: prebuilt front-end assets win over API routes

    Responses travel back through the chain in reverse order, which is how
    the X-Request-ID header lands on every response, static files included.
"""
