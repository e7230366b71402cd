"""Recovery of nutrition JSON from free-form model output."""

import json
import re

from fittrack.domain.nutrition import NutritionEstimate, round_calories, round_macro
from fittrack.errors import ResponseFormatError

DEFAULT_AI_NAME = "AI Tahmin"
EXCERPT_LENGTH = 100

_FENCE_OPEN = re.compile(r"```json\s*", re.IGNORECASE)
_FENCE = re.compile(r"```\s*")
_CALORIES_OBJECT = re.compile(r'\{[^{}]*"calories"\s*:\s*-?\d[^{}]*\}')
_FIRST_OBJECT = re.compile(r"\{[\s\S]*?\}")


def collect_text(response: dict[str, object]) -> str:
    """Concatenate the answer text of the first candidate.

    Thought parts of thinking models are skipped when any regular text part
    exists.
    """
    candidates = response.get("candidates") if isinstance(response, dict) else None
    if not isinstance(candidates, list) or not candidates:
        return ""
    first = candidates[0] if isinstance(candidates[0], dict) else {}
    content = first.get("content") or {}
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        return ""
    text_parts = [
        part for part in parts if isinstance(part, dict) and part.get("text")
    ]
    answer = "".join(str(part["text"]) for part in text_parts if not part.get("thought"))
    if answer:
        return answer
    return "".join(str(part["text"]) for part in text_parts)


def strip_code_fences(text: str) -> str:
    """Remove Markdown code fence markers."""
    return _FENCE.sub("", _FENCE_OPEN.sub("", text)).strip()


def extract_json_object(text: str, required_key: str = "calories") -> dict[str, object]:
    """Return the first JSON object in text that carries ``required_key``.

    Tries the whole (fence-stripped) text, then an object literal containing
    the key, then the first brace-delimited span and finally the span from
    the first ``{`` to the last ``}``.
    """
    cleaned = strip_code_fences(text)
    candidates = [cleaned]
    if required_key == "calories":
        match = _CALORIES_OBJECT.search(cleaned)
        if match:
            candidates.append(match.group(0))
    match = _FIRST_OBJECT.search(cleaned)
    if match:
        candidates.append(match.group(0))
    start, end = cleaned.find("{"), cleaned.rfind("}")
    if start != -1 and end > start:
        candidates.append(cleaned[start : end + 1])

    for candidate in candidates:
        try:
            parsed = json.loads(candidate)
        except ValueError:
            continue
        if isinstance(parsed, dict) and required_key in parsed:
            return parsed

    excerpt = text[:EXCERPT_LENGTH]
    raise ResponseFormatError(f"Unreadable AI response: {excerpt}", excerpt=excerpt)


def normalize_estimate(raw: dict[str, object]) -> NutritionEstimate:
    """Coerce a parsed model answer into a complete estimate."""
    name = raw.get("name")
    return NutritionEstimate(
        name=str(name).strip() if name and str(name).strip() else DEFAULT_AI_NAME,
        calories=round_calories(_non_negative(raw.get("calories"))),
        protein=round_macro(_non_negative(raw.get("protein"))),
        carbs=round_macro(_non_negative(raw.get("carbs"))),
        fat=round_macro(_non_negative(raw.get("fat"))),
    )


def parse_estimate(response: dict[str, object]) -> NutritionEstimate:
    """Extract and normalize an estimate from a raw generateContent response."""
    text = collect_text(response)
    if not text:
        raise ResponseFormatError("AI did not answer.")
    raw = extract_json_object(text)
    if _number(raw.get("calories")) is None:
        excerpt = text[:EXCERPT_LENGTH]
        raise ResponseFormatError(f"Unreadable AI response: {excerpt}", excerpt=excerpt)
    return normalize_estimate(raw)


def _number(value: object) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip().replace(",", "."))
        except ValueError:
            return None
    else:
        return None
    if number != number or number in (float("inf"), float("-inf")):
        return None
    return number


def _non_negative(value: object) -> float:
    number = _number(value)
    if number is None:
        return 0.0
    return max(number, 0.0)
