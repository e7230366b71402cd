"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from fittrack.api.data import router as data_router
from fittrack.api.schemas import FoodLogRequest, PhotoRequest, ResolveRequest
from fittrack.app_logging import configure_logging
from fittrack.containers import AppContainer
from fittrack.domain.portions import PortionCategory
from fittrack.errors import (
    ConfigurationError,
    FitTrackError,
    NetworkError,
    ResponseFormatError,
    ValidationError,
)
from fittrack.services.portions import compose_query
from fittrack.services.resolution import FormGenerations

_ERROR_STATUS: dict[type[FitTrackError], int] = {
    ValidationError: 400,
    ConfigurationError: 424,
    ResponseFormatError: 422,
    NetworkError: 502,
}


def create_app(container: AppContainer, max_tracked_forms: int = 256) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container
    app.state.form_generations = FormGenerations(max_tracked_forms)

    app.include_router(data_router)

    @app.exception_handler(FitTrackError)
    async def handle_fittrack_error(
        request: Request, exc: FitTrackError
    ) -> JSONResponse:
        status_code = _status_for(exc)
        if status_code >= 500:  # noqa: PLR2004
            logger.warning(
                "Request failed: %s %s: %s", request.method, request.url.path, exc
            )
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/foods/resolve")
    async def resolve_food(payload: ResolveRequest, request: Request) -> JSONResponse:
        """Resolve a food description into a nutrition estimate."""
        state_container: AppContainer = request.app.state.container
        description = _describe(payload)

        if payload.form_id is None:
            estimate = await state_container.pipeline.resolve(description)
        else:
            generations = request.app.state.form_generations.for_form(payload.form_id)
            estimate = await state_container.pipeline.resolve_latest(
                description, generations
            )
            if estimate is None:
                return JSONResponse(
                    status_code=409,
                    content={"detail": "Superseded by a newer request."},
                )
        return JSONResponse(content=estimate.to_dict())

    @app.post("/foods/photo")
    async def resolve_photo(payload: PhotoRequest, request: Request) -> dict[str, object]:
        """Estimate nutrition for a food photo."""
        state_container: AppContainer = request.app.state.container
        estimate = await state_container.pipeline.resolve_image(
            payload.image_base64, payload.mime_type
        )
        return estimate.to_dict()

    @app.post("/foods/photo/raw")
    async def resolve_photo_upload(request: Request) -> dict[str, object]:
        """Estimate nutrition for a photo sent as the raw request body."""
        state_container: AppContainer = request.app.state.container
        image_bytes = await request.body()
        estimate = await state_container.pipeline.resolve_image_bytes(image_bytes)
        return estimate.to_dict()

    @app.post("/foods/log", status_code=201)
    async def log_food(payload: FoodLogRequest, request: Request) -> dict[str, object]:
        """Resolve a food description and store the result as a meal."""
        state_container: AppContainer = request.app.state.container
        estimate = await state_container.pipeline.resolve(_describe(payload))
        meal = state_container.meal_log_service.add_estimate(
            estimate, meal_time=payload.meal_time, on=payload.date
        )
        return asdict(meal)

    @app.get("/foods/units")
    async def portion_units(
        request: Request, name: str = "", current: str | None = None
    ) -> dict[str, object]:
        """Return the portion unit menu for a food name."""
        state_container: AppContainer = request.app.state.container
        menu = state_container.portion_resolver.options_for(name, current)
        return {
            "category": menu.category.value,
            "units": [
                {"value": unit, "label": label} for unit, label in menu.labelled()
            ],
            "selected": menu.selected,
        }

    @app.get("/foods/categories")
    async def portion_categories(request: Request) -> dict[str, list[str]]:
        """Return every portion category with its units."""
        state_container: AppContainer = request.app.state.container
        resolver = state_container.portion_resolver
        return {category.value: resolver.units_for(category) for category in PortionCategory}

    return app


def _describe(payload: ResolveRequest) -> str:
    if payload.description:
        return payload.description
    if payload.name and payload.name.strip():
        return compose_query(payload.amount, payload.unit, payload.name)
    return ""


def _status_for(exc: FitTrackError) -> int:
    for error_type, status_code in _ERROR_STATUS.items():
        if isinstance(exc, error_type):
            return status_code
    return 500
