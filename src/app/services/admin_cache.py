"""
In-process cache for admin console reads.

Backed by cachetools.TTLCache: entries expire ADMIN_CACHE_TTL_SECONDS after
they are written. Writers that change community data drop the admin views
with `invalidate_admin_views`.

Cache keys:
- admin_communities: community listing
- admin_dashboard: dashboard KPIs and charts
"""

from cachetools import TTLCache

from config import ApplicationConfig

COMMUNITIES_KEY = "admin_communities"
DASHBOARD_KEY = "admin_dashboard"

ADMIN_CACHE_MAXSIZE = 128


def invalidate_admin_views(cache: TTLCache) -> None:
    cache.pop(COMMUNITIES_KEY, None)
    cache.pop(DASHBOARD_KEY, None)


admin_cache: TTLCache = TTLCache(
    maxsize=ADMIN_CACHE_MAXSIZE, ttl=ApplicationConfig.ADMIN_CACHE_TTL_SECONDS
)
