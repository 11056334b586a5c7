# File: getlocalbuddy/core/cors.py

from collections.abc import Iterable
from typing import Optional


def is_origin_allowed(
    origin: Optional[str],
    allowed_origins: Iterable[str],
    own_origin: Optional[str] = None,
) -> bool:
    """
    Decide whether a caller's ``Origin`` header may reach the API.

    No origin (curl, server-to-server, same-origin GET) is allowed, as is
    the service's own origin and anything on the configured allow-list.
    """
    if not origin:
        return True

    origin = origin.rstrip("/")
    if own_origin and origin == own_origin.rstrip("/"):
        return True

    return origin in {o.rstrip("/") for o in allowed_origins}
