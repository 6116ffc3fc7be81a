# projects/scoreboard.py

import logging
from typing import Any, Callable, Dict, List

from django.conf import settings
from django.core.cache import caches

logger = logging.getLogger(__name__)


class ScoreboardCache:
    """
    Caches each project's contributor ranking.

    Rankings walk every Done task of a project, so they are kept in Django's
    cache framework (Redis in production) until one of the project's tasks
    changes. Cache outages are logged and the ranking is computed directly.
    """

    def __init__(
        self,
        ttl: int = 3600,
        version: str = "v1",
        cache_alias: str = "default"
    ):
        """
        Args:
            ttl: Time-to-live in seconds, overridden by settings.SCOREBOARD_CACHE_TTL.
            version: Key version, bump it when the ranking format changes.
            cache_alias: The Django cache alias to use.
        """
        self.ttl = getattr(settings, 'SCOREBOARD_CACHE_TTL', ttl)
        self.version = version
        self.cache_alias = cache_alias

    @property
    def cache(self):
        return caches[self.cache_alias]

    def get_or_compute(
        self,
        project_id: int,
        compute: Callable[[], List[Dict[str, Any]]]
    ) -> List[Dict[str, Any]]:
        cache_key = self.key_for(project_id)

        try:
            cached_ranking = self.cache.get(cache_key)
            if cached_ranking is not None:
                logger.debug(f"Scoreboard cache hit: {cache_key}")
                return cached_ranking
        except Exception as e:
            logger.error(f"Scoreboard cache read failure: {str(e)}")

        ranking = compute()

        try:
            self.cache.set(cache_key, ranking, timeout=self.ttl)
        except Exception as e:
            logger.error(f"Scoreboard cache write failure: {str(e)}")

        return ranking

    def invalidate(self, project_id: int) -> None:
        try:
            self.cache.delete(self.key_for(project_id))
        except Exception as e:
            logger.error(f"Scoreboard cache invalidation failure for project {project_id}: {str(e)}")

    def key_for(self, project_id: int) -> str:
        return f"scoreboard_{self.version}_{project_id}"


scoreboard_cache = ScoreboardCache()
