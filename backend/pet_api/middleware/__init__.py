# Middleware package init
"""
QA Pet API — Middleware Package
================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (outermost first):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    Request ID runs before Logging so every access line carries the ID.
    Logging sees the final status code on the way back out.
"""
