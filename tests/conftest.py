"""Shared test fixtures."""

import json
from dataclasses import dataclass, field

import httpx
import pytest

from fittrack.adapters.gemini_client import GeminiClient
from fittrack.config import Settings
from fittrack.containers import AppContainer
from fittrack.services.cache import ResultCache
from fittrack.services.catalog import KnowledgeBase
from fittrack.services.estimator import AIEstimator
from fittrack.services.generation import GenerationService, parse_model_ladder
from fittrack.services.meals import MealLogService
from fittrack.services.portions import PortionUnitResolver
from fittrack.services.programs import ProgramService
from fittrack.services.recommendations import RecommendationEngine
from fittrack.services.resolution import FoodResolutionPipeline
from fittrack.services.store import KeyValueStore
from fittrack.services.user_data import UserDataService


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """In-memory key-value store for tests."""

    values: dict[str, object] = field(default_factory=dict)

    def get(self, key: str, default: object = None) -> object:
        value = self.values.get(key)
        return default if value is None else value

    def set(self, key: str, value: object) -> None:
        # Round-trip through JSON like the real backends.
        self.values[key] = json.loads(json.dumps(value))

    def delete(self, key: str) -> None:
        self.values.pop(key, None)


def gemini_text_response(text: str, thought: str | None = None) -> dict[str, object]:
    """Build a generateContent response carrying the given answer text."""
    parts: list[dict[str, object]] = []
    if thought is not None:
        parts.append({"text": thought, "thought": True})
    parts.append({"text": text})
    return {"candidates": [{"content": {"parts": parts}}]}


def http_error(status_code: int, message: str | None = None) -> httpx.HTTPStatusError:
    """Build an HTTPStatusError as raised by ``raise_for_status``."""
    request = httpx.Request("POST", "https://generativelanguage.test")
    body = {"error": {"message": message}} if message else {}
    response = httpx.Response(status_code, json=body, request=request)
    return httpx.HTTPStatusError("error", request=request, response=response)


@dataclass
class FakeGeminiClient(GeminiClient):
    """Fake Gemini client with scripted outcomes per ``version/model``.

    Outcomes are a response dict or an exception to raise. Unscripted models
    answer with ``default`` when set, otherwise with an HTTP 404.
    """

    outcomes: dict[str, object] = field(default_factory=dict)
    default: object | None = None
    models: list[dict[str, object]] = field(default_factory=list)
    calls: list[tuple[str, dict[str, object]]] = field(default_factory=list)
    list_calls: int = 0

    async def generate_content(
        self,
        *,
        api_key: str,
        version: str,
        model: str,
        payload: dict[str, object],
    ) -> dict[str, object]:
        label = f"{version}/{model}"
        self.calls.append((label, payload))
        outcome = self.outcomes.get(label, self.default)
        if outcome is None:
            raise http_error(404, f"models/{model} is not found")
        if isinstance(outcome, Exception):
            raise outcome
        return outcome  # type: ignore[return-value]

    async def list_models(self, *, api_key: str, version: str) -> dict[str, object]:
        self.list_calls += 1
        return {"models": self.models}

    @property
    def labels(self) -> list[str]:
        return [label for label, _ in self.calls]


@dataclass
class FakeApiKey:
    """Mutable API key source."""

    value: str | None = "test-key"

    def __call__(self) -> str | None:
        return self.value


@pytest.fixture
def settings() -> Settings:
    return Settings(gemini_api_key="test-key", storage_backend="file")


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def gemini_client() -> FakeGeminiClient:
    return FakeGeminiClient()


@pytest.fixture
def generation(gemini_client: FakeGeminiClient, settings: Settings) -> GenerationService:
    return GenerationService(
        client=gemini_client,
        api_key_provider=FakeApiKey(),
        ladder=parse_model_ladder(settings.gemini_model_ladder),
    )


@pytest.fixture
def container(
    settings: Settings,
    store: InMemoryKeyValueStore,
    gemini_client: FakeGeminiClient,
) -> AppContainer:
    user_data_service = UserDataService(store, fallback_api_key=settings.gemini_api_key)
    generation = GenerationService(
        client=gemini_client,
        api_key_provider=user_data_service.get_api_key,
        ladder=parse_model_ladder(settings.gemini_model_ladder),
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        store=store,
        user_data_service=user_data_service,
        portion_resolver=PortionUnitResolver(),
        pipeline=FoodResolutionPipeline(
            knowledge_base=KnowledgeBase(),
            cache=ResultCache(store),
            estimator=AIEstimator(generation),
        ),
        meal_log_service=MealLogService(store),
        program_service=ProgramService(store),
        recommendation_engine=RecommendationEngine(generation),
        close_resources=close_resources,
    )
