"""
Security helpers for shared API key authentication.

Every non-public route requires the configured API key in the
``Authorization`` header.  Clients may send it raw
(``Authorization: <key>``) or with the bearer scheme
(``Authorization: Bearer <key>``).  Only a single static secret is
supported; there are no users, roles or tokens with expiry.
"""

import hmac
from typing import Iterable

BEARER_PREFIX = "Bearer "

NO_KEY_MESSAGE = "Unauthorized. No API key provided."
INVALID_KEY_MESSAGE = "Unauthorized. Invalid API key."


def is_public_path(path: str, public_paths: Iterable[str]) -> bool:
    """Return ``True`` if ``path`` is served without authentication."""
    return path in public_paths


def extract_api_key(authorization: str) -> str:
    """Strip an optional ``Bearer `` prefix from an Authorization value."""
    if authorization.startswith(BEARER_PREFIX):
        return authorization[len(BEARER_PREFIX):]
    return authorization


def api_key_matches(candidate: str, expected: str) -> bool:
    """Compare a presented key with the configured one.

    The comparison is exact (no trimming, case sensitive) and runs in
    constant time.  Values are compared as UTF‑8 bytes because
    ``hmac.compare_digest`` rejects non‑ASCII ``str`` arguments.
    """
    return hmac.compare_digest(candidate.encode("utf-8"), expected.encode("utf-8"))
