# Middleware package init
"""
RecipeBox Backend: Middleware Package
=====================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → [Unexpected Error] → Route Handler

    Request ID runs first so the access log line can carry it; the ID is
    added to the response headers on the way out. Unexpected errors become
    a JSON 500 below CORS, so even that response is readable cross-origin.
"""
