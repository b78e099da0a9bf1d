"""
Per-client rate limiting for the wonder routes.

A single slowapi ``Limiter`` keyed on the client address is shared by
the endpoint decorators and attached to ``app.state.limiter``.  Limits
are counted per route in a moving window held in process memory.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from .config import settings

# Applied to every /v0/wonders route, e.g. "10 per 2 seconds"
WONDER_ROUTE_LIMIT = settings.rate_limit

limiter = Limiter(
    key_func=get_remote_address,
    storage_uri="memory://",
    strategy="moving-window",
)
