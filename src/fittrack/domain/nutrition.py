"""Nutrition domain models."""

import math
from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class MacroProfile:
    """Macronutrient values for a fixed amount of food."""

    calories: float
    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class FoodCatalogEntry:
    """Built-in catalog food with values for its default portion.

    ``name`` carries a parenthetical portion descriptor, e.g.
    ``"Elma (1 adet)"``. When ``per100g`` is missing, gram queries scale the
    portion values against a nominal 200 g mass.
    """

    keys: tuple[str, ...]
    name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    per100g: MacroProfile | None = None


@dataclass(frozen=True)
class NutritionEstimate:
    """Normalized result of resolving a food description."""

    name: str
    calories: int
    protein: float
    carbs: float
    fat: float

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly representation."""
        return asdict(self)


@dataclass(frozen=True)
class QuantitySpec:
    """Quantity prefix parsed from a food query."""

    residual_query: str
    multiplier: float = 1
    gram_amount: float | None = None


@dataclass(frozen=True)
class CatalogMatch:
    """Best catalog hit for a query with its match score."""

    entry: FoodCatalogEntry
    score: float


def round_calories(value: float) -> int:
    """Round calories half-up to a whole number."""
    return math.floor(value + 0.5)


def round_macro(value: float) -> float:
    """Round a macro gram value half-up to one decimal."""
    return math.floor(value * 10 + 0.5) / 10
