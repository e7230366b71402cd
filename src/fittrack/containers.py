"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path

from supabase import create_client

from fittrack.adapters.file_store import FileKeyValueStore
from fittrack.adapters.gemini_client import HttpxGeminiClient
from fittrack.adapters.supabase_store import SupabaseKeyValueStore
from fittrack.config import Settings
from fittrack.errors import ConfigurationError
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
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: KeyValueStore
    user_data_service: UserDataService
    portion_resolver: PortionUnitResolver
    pipeline: FoodResolutionPipeline
    meal_log_service: MealLogService
    program_service: ProgramService
    recommendation_engine: RecommendationEngine
    close_resources: Callable[[], Awaitable[None]]


def build_store(settings: Settings) -> KeyValueStore:
    """Create the configured key-value store backend."""
    if settings.storage_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ConfigurationError("Supabase storage requires URL and service key.")
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseKeyValueStore(client)
    return FileKeyValueStore(Path(settings.storage_path))


def build_container(
    settings: Settings | None = None, store: KeyValueStore | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_store = store or build_store(resolved_settings)
    user_data_service = UserDataService(
        resolved_store, fallback_api_key=resolved_settings.gemini_api_key
    )
    gemini_client = HttpxGeminiClient.create(
        base_url=resolved_settings.gemini_base_url,
        timeout_seconds=resolved_settings.gemini_timeout_seconds,
    )
    generation = GenerationService(
        client=gemini_client,
        api_key_provider=user_data_service.get_api_key,
        ladder=parse_model_ladder(resolved_settings.gemini_model_ladder),
        discovery_version=resolved_settings.gemini_discovery_version,
        family_marker=resolved_settings.gemini_family_marker,
    )
    pipeline = FoodResolutionPipeline(
        knowledge_base=KnowledgeBase(),
        cache=ResultCache(resolved_store),
        estimator=AIEstimator(
            generation=generation,
            generation_config=resolved_settings.generation_config(),
        ),
    )

    async def close_resources() -> None:
        await gemini_client.close()

    return AppContainer(
        settings=resolved_settings,
        store=resolved_store,
        user_data_service=user_data_service,
        portion_resolver=PortionUnitResolver(),
        pipeline=pipeline,
        meal_log_service=MealLogService(resolved_store),
        program_service=ProgramService(resolved_store),
        recommendation_engine=RecommendationEngine(generation),
        close_resources=close_resources,
    )
