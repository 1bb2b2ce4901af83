# Services package init
"""
Palette Picker Backend — Services Layer
=========================================

Service Inventory:
    - validation: required-field checks for submitted bodies
    - ProjectService: list / create / get projects
    - PaletteService: list / create / delete palettes, list a project's palettes

Services receive the database session as an argument on every call and
raise application exceptions (see exceptions.py) instead of building
HTTP responses.
"""
