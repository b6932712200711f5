"""API package initializer.

Contains the versioned HTTP API of the recipe revision service. Version 1 lives in
``app.api.v1`` and groups the health, recipe content and revision history routes.
"""
