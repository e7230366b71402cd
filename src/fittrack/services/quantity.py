"""Quantity and unit prefix parsing for food queries."""

import re

from fittrack.domain.nutrition import QuantitySpec
from fittrack.services.text import normalize

_GRAM_UNITS = {"gram", "gr", "g"}
_KILOGRAM_UNITS = {"kg"}
_COUNT_UNITS = ("porsiyon", "adet", "tane", "dilim", "kase", "bardak", "tabak", "kasik")

_UNIT_PATTERN = "|".join(
    sorted((*_COUNT_UNITS, *_GRAM_UNITS, *_KILOGRAM_UNITS), key=len, reverse=True)
)
_LEADING_QUANTITY = re.compile(
    rf"^(\d+(?:[.,]\d+)?)\s*(?:({_UNIT_PATTERN})(?=\s|$))?\s*"
)
_COMPACT_GRAMS = re.compile(r"^(\d+)g\s+")


def parse_quantity(query: str) -> QuantitySpec:
    """Split a leading amount and unit off a query.

    ``"2 porsiyon baklava"`` yields a multiplier of 2, ``"200g tavuk"`` and
    ``"0,5 kg tavuk"`` yield gram amounts. The residual query is returned in
    normalized form.
    """
    text = normalize(query).strip()
    multiplier: float = 1
    gram_amount: float | None = None
    residual = text

    match = _LEADING_QUANTITY.match(text)
    if match:
        amount = float(match.group(1).replace(",", "."))
        unit = match.group(2) or ""
        residual = text[match.end() :].strip()
        if unit in _GRAM_UNITS:
            gram_amount = amount
        elif unit in _KILOGRAM_UNITS:
            gram_amount = amount * 1000
        else:
            multiplier = amount

    if not gram_amount:
        compact = _COMPACT_GRAMS.match(residual)
        if compact:
            gram_amount = float(compact.group(1))
            residual = residual[compact.end() :].strip()

    return QuantitySpec(
        residual_query=residual,
        multiplier=multiplier,
        gram_amount=gram_amount,
    )
