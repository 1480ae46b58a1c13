"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports. Limit strings live here.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

# Resolution runs on every answer change in the intake form.
RESOLVE_LIMIT = "240/minute"
SUBMIT_LIMIT = "60/minute"

limit_resolve = limiter.limit(RESOLVE_LIMIT)
limit_submit = limiter.limit(SUBMIT_LIMIT)
