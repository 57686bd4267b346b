"""
API package containing the HTTP routes.

``router`` aggregates the resource routers mounted under ``/api``;
``endpoints.root`` holds the public routes served at the site root.
"""
