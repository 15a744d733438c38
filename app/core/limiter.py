"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules (e.g. uploads) can
use the same instance without circular imports. Limit strings come from
settings (RATE_LIMIT, UPLOAD_RATE_LIMIT).
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import get_settings

_settings = get_settings()

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[_settings.rate_limit],
    enabled=_settings.rate_limit_enabled,
)

limit_upload = limiter.limit(_settings.upload_rate_limit)
