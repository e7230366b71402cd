"""Tiered food description resolution: catalog, cache, then AI."""

import logging
from collections import OrderedDict
from dataclasses import dataclass, field

from fittrack.domain.nutrition import NutritionEstimate
from fittrack.errors import ValidationError
from fittrack.services.cache import ResultCache
from fittrack.services.catalog import KnowledgeBase
from fittrack.services.estimator import AIEstimator

_logger = logging.getLogger(__name__)


@dataclass
class RequestGenerations:
    """Monotonic tokens used to discard results of superseded requests.

    Every new request for a form takes a token; a result is only applied
    when its token is still the latest one issued.
    """

    _current: int = field(default=0, init=False)

    def next_token(self) -> int:
        """Issue a new token, superseding all earlier ones."""
        self._current += 1
        return self._current

    def is_current(self, token: int) -> bool:
        """Return True when no newer token was issued."""
        return token == self._current


class FormGenerations:
    """Per-form generation counters, keeping only the most recent forms.

    Forms are evicted least recently used first once ``max_forms`` is
    exceeded. An evicted form simply starts a fresh counter next time.
    """

    def __init__(self, max_forms: int = 256) -> None:
        if max_forms < 1:
            raise ValueError("max_forms must be positive")
        self.max_forms = max_forms
        self._forms: OrderedDict[str, RequestGenerations] = OrderedDict()

    def __len__(self) -> int:
        return len(self._forms)

    def __contains__(self, form_id: object) -> bool:
        return form_id in self._forms

    def for_form(self, form_id: str) -> RequestGenerations:
        """Return the counter for a form, creating it when missing."""
        generations = self._forms.get(form_id)
        if generations is None:
            generations = RequestGenerations()
            self._forms[form_id] = generations
            while len(self._forms) > self.max_forms:
                self._forms.popitem(last=False)
        else:
            self._forms.move_to_end(form_id)
        return generations


@dataclass
class FoodResolutionPipeline:
    """Resolves food descriptions into nutrition estimates.

    Tiers are tried in order and the first hit wins: catalog match, cached
    AI answer for the same raw query, then a fresh AI estimate which is
    cached before it is returned. AI errors propagate unchanged.
    """

    knowledge_base: KnowledgeBase
    cache: ResultCache
    estimator: AIEstimator

    async def resolve(self, description: str) -> NutritionEstimate:
        """Resolve a free-text food description."""
        if not description or not description.strip():
            raise ValidationError("Food description is empty.")

        local = self.knowledge_base.resolve(description)
        if local is not None:
            _logger.info("Resolved from catalog: query=%s", description)
            return local

        cached = self.cache.get(description)
        if cached is not None:
            _logger.info("Resolved from cache: query=%s", description)
            return cached

        estimate = await self.estimator.estimate_text(description)
        self.cache.put(description, estimate)
        _logger.info("Cached AI estimate: query=%s", description)
        return estimate

    async def resolve_latest(
        self, description: str, generations: RequestGenerations
    ) -> NutritionEstimate | None:
        """Resolve, returning None if a newer request started meanwhile."""
        token = generations.next_token()
        estimate = await self.resolve(description)
        if not generations.is_current(token):
            _logger.info("Discarding stale estimate: query=%s", description)
            return None
        return estimate

    async def resolve_image(self, image_base64: str, mime_type: str) -> NutritionEstimate:
        """Resolve a photo; there is no text key, so no catalog or cache."""
        return await self.estimator.estimate_image(image_base64, mime_type)

    async def resolve_image_bytes(self, image_bytes: bytes) -> NutritionEstimate:
        """Resolve a photo given as raw bytes."""
        if not image_bytes:
            raise ValidationError("Image data is empty.")
        return await self.estimator.estimate_image_bytes(image_bytes)
