"""Tests for tiered food resolution."""

import asyncio
from dataclasses import dataclass, field

import pytest

from fittrack.domain.nutrition import NutritionEstimate
from fittrack.errors import ConfigurationError, NetworkError, ValidationError
from fittrack.services.cache import ResultCache
from fittrack.services.catalog import KnowledgeBase
from fittrack.services.estimator import AIEstimator
from fittrack.services.generation import GenerationService, parse_model_ladder
from fittrack.services.resolution import (
    FoodResolutionPipeline,
    FormGenerations,
    RequestGenerations,
)
from tests.conftest import (
    FakeApiKey,
    FakeGeminiClient,
    InMemoryKeyValueStore,
    gemini_text_response,
)

_ANSWER = '{"name": "Kumpir", "calories": 600, "protein": 15, "carbs": 70, "fat": 28}'
_UNKNOWN = "zxqv jkwp"


@dataclass
class GatedGeminiClient(FakeGeminiClient):
    """Fake client whose calls block until the gate opens."""

    gate: asyncio.Event = field(default_factory=asyncio.Event)

    async def generate_content(self, **kwargs) -> dict[str, object]:  # type: ignore[override]
        await self.gate.wait()
        return await super().generate_content(**kwargs)


def _pipeline(
    client: FakeGeminiClient,
    store: InMemoryKeyValueStore | None = None,
    api_key: str | None = "key",
) -> FoodResolutionPipeline:
    generation = GenerationService(
        client=client,
        api_key_provider=FakeApiKey(api_key),
        ladder=parse_model_ladder(["v1beta/gemini-2.5-flash"]),
    )
    return FoodResolutionPipeline(
        knowledge_base=KnowledgeBase(),
        cache=ResultCache(store or InMemoryKeyValueStore()),
        estimator=AIEstimator(generation),
    )


def test_catalog_hit_makes_no_ai_call() -> None:
    client = FakeGeminiClient(default=gemini_text_response(_ANSWER))

    estimate = asyncio.run(_pipeline(client).resolve("3 tane elma"))

    assert estimate.calories == 285
    assert client.calls == []


def test_catalog_hit_works_without_api_key() -> None:
    client = FakeGeminiClient()

    estimate = asyncio.run(_pipeline(client, api_key=None).resolve("baklava"))

    assert estimate.name == "Baklava (1 dilim)"


def test_ai_result_is_cached_and_reused() -> None:
    client = FakeGeminiClient(default=gemini_text_response(_ANSWER))
    store = InMemoryKeyValueStore()
    pipeline = _pipeline(client, store)

    first = asyncio.run(pipeline.resolve(_UNKNOWN))
    second = asyncio.run(pipeline.resolve(f"  {_UNKNOWN.upper()} "))

    assert first == second
    assert first.name == "Kumpir"
    assert len(client.calls) == 1
    assert _UNKNOWN in store.values["food_cache"]


def test_catalog_is_checked_before_cache() -> None:
    store = InMemoryKeyValueStore()
    ResultCache(store).put(
        "elma", NutritionEstimate(name="Cached", calories=1, protein=0, carbs=0, fat=0)
    )

    estimate = asyncio.run(_pipeline(FakeGeminiClient(), store).resolve("elma"))

    assert estimate.name == "Elma (1 adet)"


def test_ai_failure_propagates_and_caches_nothing() -> None:
    store = InMemoryKeyValueStore()

    with pytest.raises(NetworkError):
        asyncio.run(_pipeline(FakeGeminiClient(), store).resolve(_UNKNOWN))

    assert "food_cache" not in store.values


def test_missing_key_raises_configuration_error_for_ai_tier() -> None:
    client = FakeGeminiClient(default=gemini_text_response(_ANSWER))

    with pytest.raises(ConfigurationError):
        asyncio.run(_pipeline(client, api_key=None).resolve(_UNKNOWN))

    assert client.calls == []


@pytest.mark.parametrize("description", ["", "   "])
def test_blank_description_is_rejected(description: str) -> None:
    with pytest.raises(ValidationError):
        asyncio.run(_pipeline(FakeGeminiClient()).resolve(description))


def test_resolve_image_skips_catalog_and_cache() -> None:
    client = FakeGeminiClient(default=gemini_text_response(_ANSWER))
    store = InMemoryKeyValueStore()

    estimate = asyncio.run(_pipeline(client, store).resolve_image("aGVsbG8=", "image/jpeg"))

    assert estimate.calories == 600
    assert len(client.calls) == 1
    assert "food_cache" not in store.values


def test_resolve_image_bytes_rejects_empty_input() -> None:
    with pytest.raises(ValidationError):
        asyncio.run(_pipeline(FakeGeminiClient()).resolve_image_bytes(b""))


def test_request_generations_tokens() -> None:
    generations = RequestGenerations()

    first = generations.next_token()
    second = generations.next_token()

    assert not generations.is_current(first)
    assert generations.is_current(second)


def test_form_generations_evict_least_recently_used() -> None:
    forms = FormGenerations(max_forms=2)

    first = forms.for_form("a")
    forms.for_form("b")
    assert forms.for_form("a") is first
    forms.for_form("c")

    assert len(forms) == 2
    assert "a" in forms
    assert "b" not in forms
    assert "c" in forms


def test_form_generations_require_positive_capacity() -> None:
    with pytest.raises(ValueError, match="max_forms"):
        FormGenerations(max_forms=0)


def test_stale_result_is_discarded() -> None:
    async def scenario() -> tuple[NutritionEstimate | None, NutritionEstimate | None]:
        client = GatedGeminiClient(default=gemini_text_response(_ANSWER))
        pipeline = _pipeline(client)
        generations = RequestGenerations()

        slow = asyncio.create_task(pipeline.resolve_latest(_UNKNOWN, generations))
        await asyncio.sleep(0)
        fast = await pipeline.resolve_latest("3 tane elma", generations)
        client.gate.set()
        return await slow, fast

    slow_result, fast_result = asyncio.run(scenario())

    assert slow_result is None
    assert fast_result is not None
    assert fast_result.calories == 285
