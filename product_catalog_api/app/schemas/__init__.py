"""
Pydantic schema definitions for API payloads.

Request bodies are validated structurally against these models before
they reach the product store; responses are serialised through them so
the JSON field names (``inStock``) stay stable.
"""
