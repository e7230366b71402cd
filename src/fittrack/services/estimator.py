"""Nutrition estimation from text or photos via a generative model."""

import base64
import logging
from dataclasses import dataclass, field

from fittrack.domain.nutrition import NutritionEstimate
from fittrack.errors import ValidationError
from fittrack.services.extraction import parse_estimate
from fittrack.services.generation import GenerationService

TEXT_PROMPT = (
    'Sen bir beslenme uzmanısın. Kullanıcı şu yemeği sordu: "{description}". '
    "Bu yemeğin yaklaşık besin değerlerini tahmin et. Cevabını sadece JSON "
    'formatında ver: {{"name": "yemek adı (Türkçe)", "calories": 0, '
    '"protein": 0, "carbs": 0, "fat": 0}}. Değerler: calories=kcal, '
    "protein/carbs/fat=gram."
)
IMAGE_PROMPT = (
    "Bu fotoğraftaki yemeği analiz et. Sadece JSON formatında ver: "
    '{"name": "yemek adı", "calories": 0, "protein": 0, "carbs": 0, "fat": 0}'
)

_logger = logging.getLogger(__name__)


def _default_generation_config() -> dict[str, object]:
    return {
        "temperature": 0.1,
        "maxOutputTokens": 2048,
        "responseMimeType": "application/json",
    }


@dataclass
class AIEstimator:
    """Builds nutrition prompts and reads estimates from model output."""

    generation: GenerationService
    generation_config: dict[str, object] = field(
        default_factory=_default_generation_config
    )

    async def estimate_text(self, description: str) -> NutritionEstimate:
        """Estimate nutrition for a free-text food description."""
        prompt = TEXT_PROMPT.format(description=description.strip())
        response = await self.generation.generate(
            [{"text": prompt}], self.generation_config
        )
        estimate = parse_estimate(response)
        _logger.info("AI text estimate: query=%s name=%s", description, estimate.name)
        return estimate

    async def estimate_image(self, image_base64: str, mime_type: str) -> NutritionEstimate:
        """Estimate nutrition for a base64-encoded food photo."""
        if not image_base64:
            raise ValidationError("Image data is empty.")
        parts: list[dict[str, object]] = [
            {"text": IMAGE_PROMPT},
            {"inlineData": {"mimeType": mime_type or "image/jpeg", "data": image_base64}},
        ]
        response = await self.generation.generate(parts, self.generation_config)
        estimate = parse_estimate(response)
        _logger.info("AI image estimate: name=%s", estimate.name)
        return estimate

    async def estimate_image_bytes(self, image_bytes: bytes) -> NutritionEstimate:
        """Estimate nutrition for raw image bytes."""
        encoded = base64.b64encode(image_bytes).decode("utf-8")
        return await self.estimate_image(encoded, detect_mime_type(image_bytes))


def detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"
