"""
Folio Backend - Middleware Package
===================================

What:  Cross-cutting concerns applied to every request.

Middleware chain (outermost first):
    Request → [Request ID] → [Access Log] → [GZip] → [CORS] → Route Handler

    - request_id.RequestIDMiddleware: assigns the correlation ID, sets X-Request-ID
    - logging.RequestLoggingMiddleware: one access-log line per request
"""
