# Routes package init
"""
Palette Picker Backend — API Routes Package
=============================================

Route Inventory:
    - projects.py:  GET  /api/v1/projects
                    POST /api/v1/projects
                    GET  /api/v1/projects/{id}
    - palettes.py:  GET    /api/v1/palettes
                    POST   /api/v1/palettes
                    DELETE /api/v1/palettes/{id}
                    GET    /api/v1/projects/{id}/palettes
    - health.py:    GET  /health

Routes stay thin: read the path/body, call a service, return its result.
Status codes for failures come from the exception handlers in main.py.
"""
