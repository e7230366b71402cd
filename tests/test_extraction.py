"""Tests for reading nutrition JSON out of model answers."""

import pytest

from fittrack.errors import ResponseFormatError
from fittrack.services.extraction import (
    DEFAULT_AI_NAME,
    collect_text,
    extract_json_object,
    normalize_estimate,
    parse_estimate,
)
from tests.conftest import gemini_text_response

_PILAV = '{"name": "Pilav", "calories": 350, "protein": 6, "carbs": 70, "fat": 5}'


@pytest.mark.parametrize(
    "text",
    [
        _PILAV,
        f"```json\n{_PILAV}\n```",
        f"```\n{_PILAV}\n```",
        f"Tahminim şöyle: {_PILAV} Afiyet olsun.",
        f"Not {{x}} sonra {_PILAV}",
        f"{_PILAV}\n\nBu değerler yaklaşıktır.",
    ],
)
def test_parse_estimate_recovers_object(text: str) -> None:
    estimate = parse_estimate(gemini_text_response(text))

    assert estimate.name == "Pilav"
    assert estimate.calories == 350
    assert estimate.carbs == 70


def test_collect_text_skips_thought_parts() -> None:
    response = gemini_text_response(_PILAV, thought='Düşünüyorum {"calories": 1}')

    assert collect_text(response) == _PILAV
    assert parse_estimate(response).calories == 350


def test_collect_text_uses_thoughts_when_nothing_else() -> None:
    response = {"candidates": [{"content": {"parts": [{"text": _PILAV, "thought": True}]}}]}

    assert collect_text(response) == _PILAV


def test_collect_text_handles_missing_candidates() -> None:
    assert collect_text({}) == ""
    assert collect_text({"candidates": []}) == ""
    assert collect_text({"candidates": [{"content": {}}]}) == ""


def test_empty_answer_raises() -> None:
    with pytest.raises(ResponseFormatError, match="AI did not answer"):
        parse_estimate({"candidates": []})


def test_truncated_object_raises_with_excerpt() -> None:
    text = '{"name": "Elma", "calories": 95'

    with pytest.raises(ResponseFormatError) as exc_info:
        parse_estimate(gemini_text_response(text))

    assert exc_info.value.excerpt == text
    assert str(exc_info.value) == f"Unreadable AI response: {text}"


def test_excerpt_is_truncated() -> None:
    with pytest.raises(ResponseFormatError) as exc_info:
        extract_json_object("x" * 250)

    assert exc_info.value.excerpt == "x" * 100


def test_non_numeric_calories_raise() -> None:
    with pytest.raises(ResponseFormatError):
        parse_estimate(gemini_text_response('{"name": "X", "calories": "çok"}'))


def test_normalize_estimate_defaults_and_clamps() -> None:
    estimate = normalize_estimate(
        {"calories": "99.5", "protein": -3, "carbs": 12.25, "fat": None, "name": "  "}
    )

    assert estimate.name == DEFAULT_AI_NAME
    assert estimate.calories == 100
    assert estimate.protein == 0
    assert estimate.carbs == 12.3
    assert estimate.fat == 0
