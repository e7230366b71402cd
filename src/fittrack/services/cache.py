"""Durable cache of AI-resolved food descriptions."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from fittrack.domain.nutrition import NutritionEstimate
from fittrack.services.store import KeyValueStore

FOOD_CACHE_KEY = "food_cache"

_logger = logging.getLogger(__name__)


def cache_key(query: str) -> str:
    """Return the cache key for a raw query: lower-cased and trimmed."""
    return query.lower().strip()


@dataclass
class ResultCache:
    """Cache of estimates keyed by the raw query text.

    Keys are not diacritic-normalized, so different phrasings of the same
    food miss independently. Entries never expire.
    """

    store: KeyValueStore

    def get(self, query: str) -> NutritionEstimate | None:
        """Return the cached estimate for a query, if any."""
        entry = self._entries().get(cache_key(query))
        if not isinstance(entry, dict):
            return None
        try:
            return NutritionEstimate(
                name=str(entry["name"]),
                calories=int(entry["calories"]),
                protein=float(entry["protein"]),
                carbs=float(entry["carbs"]),
                fat=float(entry["fat"]),
            )
        except (KeyError, TypeError, ValueError):
            _logger.warning("Ignoring malformed cache entry: key=%s", cache_key(query))
            return None

    def put(self, query: str, estimate: NutritionEstimate) -> None:
        """Store an estimate with its caching timestamp."""
        entries = self._entries()
        entries[cache_key(query)] = {
            **estimate.to_dict(),
            "cachedAt": datetime.now(tz=UTC).isoformat(),
        }
        self.store.set(FOOD_CACHE_KEY, entries)

    def _entries(self) -> dict[str, object]:
        entries = self.store.get(FOOD_CACHE_KEY, {})
        if not isinstance(entries, dict):
            return {}
        return dict(entries)
