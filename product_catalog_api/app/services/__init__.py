"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  The product
service owns the in‑memory catalog; handlers reach it through a
FastAPI dependency instead of a module‑level global, so every
application instance (and every test) gets its own store.
"""
