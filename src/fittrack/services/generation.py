"""Generative model calls with a sequential model/version fallback ladder."""

import logging
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass

import httpx

from fittrack.adapters.gemini_client import GeminiClient
from fittrack.errors import ConfigurationError, NetworkError

NO_SUITABLE_MODEL = "No suitable Gemini model found for this API key."
GENERATE_METHOD = "generateContent"

# API versions that reject ``responseMimeType`` in generationConfig.
_NO_MIME_TYPE_VERSIONS = {"v1"}

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModelCandidate:
    """One rung of the ladder: an API version and a model id."""

    version: str
    model: str

    @property
    def label(self) -> str:
        """Return ``version/model``."""
        return f"{self.version}/{self.model}"


@dataclass(frozen=True)
class LadderResult:
    """Successful ladder outcome."""

    candidate: ModelCandidate
    response: dict[str, object]


def parse_model_ladder(entries: Iterable[str]) -> list[ModelCandidate]:
    """Parse ``"version/model"`` strings, skipping malformed entries."""
    candidates: list[ModelCandidate] = []
    for entry in entries:
        version, _, model = entry.strip().partition("/")
        if version and model:
            candidates.append(ModelCandidate(version=version, model=model))
    return candidates


def describe_error(exc: Exception) -> str:
    """Return the most specific message available for a failed attempt."""
    if isinstance(exc, httpx.HTTPStatusError):
        try:
            body = exc.response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            error = body.get("error")
            if isinstance(error, dict) and error.get("message"):
                return str(error["message"])
        return f"API error: HTTP {exc.response.status_code}"
    return str(exc) or exc.__class__.__name__


async def run_ladder(
    candidates: list[ModelCandidate],
    attempt: Callable[[ModelCandidate], Awaitable[dict[str, object]]],
    discover: Callable[[], Awaitable[list[ModelCandidate]]] | None = None,
) -> LadderResult:
    """Try candidates in order, then discovered ones, until one succeeds.

    Attempts are strictly sequential. Raises NetworkError carrying the last
    recorded error message when nothing succeeds.
    """
    last_error: str | None = None
    tried: list[str] = []

    async def _try(candidate: ModelCandidate) -> dict[str, object] | None:
        nonlocal last_error
        tried.append(candidate.label)
        try:
            return await attempt(candidate)
        except (httpx.HTTPError, ValueError) as exc:
            last_error = describe_error(exc)
            _logger.warning("Model %s failed: %s", candidate.label, last_error)
            return None

    for candidate in candidates:
        response = await _try(candidate)
        if response is not None:
            return LadderResult(candidate=candidate, response=response)

    if discover is not None:
        try:
            discovered = await discover()
        except (httpx.HTTPError, ValueError) as exc:
            last_error = describe_error(exc)
            _logger.warning("Model discovery failed: %s", last_error)
            discovered = []
        for candidate in discovered:
            if candidate.label in tried:
                continue
            response = await _try(candidate)
            if response is not None:
                return LadderResult(candidate=candidate, response=response)

    raise NetworkError(last_error or NO_SUITABLE_MODEL, attempts=tried)


@dataclass
class GenerationService:
    """Builds Gemini requests and runs them through the model ladder."""

    client: GeminiClient
    api_key_provider: Callable[[], str | None]
    ladder: list[ModelCandidate]
    discovery_version: str = "v1beta"
    family_marker: str = "gemini"

    def require_api_key(self) -> str:
        """Return the configured API key or raise ConfigurationError."""
        api_key = (self.api_key_provider() or "").strip()
        if not api_key:
            raise ConfigurationError("Gemini API key is not configured.")
        return api_key

    async def generate(
        self,
        parts: list[dict[str, object]],
        generation_config: dict[str, object] | None = None,
    ) -> dict[str, object]:
        """Send a single-turn request and return the first successful response."""
        api_key = self.require_api_key()
        config = generation_config or {}

        async def attempt(candidate: ModelCandidate) -> dict[str, object]:
            payload: dict[str, object] = {"contents": [{"parts": parts}]}
            version_config = _config_for_version(config, candidate.version)
            if version_config:
                payload["generationConfig"] = version_config
            return await self.client.generate_content(
                api_key=api_key,
                version=candidate.version,
                model=candidate.model,
                payload=payload,
            )

        async def discover() -> list[ModelCandidate]:
            return await self.discover_models(api_key)

        result = await run_ladder(self.ladder, attempt, discover)
        _logger.info("Generation served by %s", result.candidate.label)
        return result.response

    async def discover_models(self, api_key: str) -> list[ModelCandidate]:
        """List content-generation models of the configured family."""
        payload = await self.client.list_models(
            api_key=api_key, version=self.discovery_version
        )
        models = payload.get("models") if isinstance(payload, dict) else None
        candidates: list[ModelCandidate] = []
        for model in models if isinstance(models, list) else []:
            if not isinstance(model, dict):
                continue
            name = str(model.get("name", ""))
            methods = model.get("supportedGenerationMethods") or []
            if GENERATE_METHOD not in methods or self.family_marker not in name:
                continue
            model_id = name.removeprefix("models/")
            candidates.append(
                ModelCandidate(version=self.discovery_version, model=model_id)
            )
        _logger.info("Discovered %s candidate models", len(candidates))
        return candidates


def _config_for_version(config: dict[str, object], version: str) -> dict[str, object]:
    if version in _NO_MIME_TYPE_VERSIONS:
        return {key: value for key, value in config.items() if key != "responseMimeType"}
    return dict(config)
