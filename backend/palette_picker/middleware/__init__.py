# Middleware package init
"""
Palette Picker Backend — Middleware Package
=============================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    Request ID runs first so the logging middleware and the exception
    handlers can tag their output with it.
"""
