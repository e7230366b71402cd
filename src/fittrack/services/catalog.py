"""Local food catalog lookup and portion scaling."""

import logging
import re
from dataclasses import dataclass, field

from fittrack.domain.catalog_data import FOOD_CATALOG
from fittrack.domain.nutrition import (
    CatalogMatch,
    FoodCatalogEntry,
    NutritionEstimate,
    QuantitySpec,
    round_calories,
    round_macro,
)
from fittrack.services.quantity import parse_quantity
from fittrack.services.text import normalize

MIN_MATCH_SCORE = 30
NOMINAL_PORTION_GRAMS = 200

_EXACT_SCORE = 100
_QUERY_CONTAINS_ALIAS_SCORE = 80
_ALIAS_CONTAINS_QUERY_SCORE = 60
_WORD_OVERLAP_WEIGHT = 50

_PARENTHETICAL = re.compile(r"\(.*\)")

_logger = logging.getLogger(__name__)


def score_alias(query: str, alias: str) -> float:
    """Score how well a normalized query matches a normalized alias."""
    if query == alias:
        return _EXACT_SCORE
    if alias in query:
        return _QUERY_CONTAINS_ALIAS_SCORE
    if query in alias:
        return _ALIAS_CONTAINS_QUERY_SCORE
    words = query.split()
    if not words:
        return 0
    alias_words = alias.split()
    matched = [
        word
        for word in words
        if any(alias_word in word or word in alias_word for alias_word in alias_words)
    ]
    return len(matched) / len(words) * _WORD_OVERLAP_WEIGHT


@dataclass
class KnowledgeBase:
    """Fuzzy lookup over an immutable catalog of known foods."""

    entries: tuple[FoodCatalogEntry, ...] = FOOD_CATALOG
    min_score: float = MIN_MATCH_SCORE
    _aliases: list[tuple[str, FoodCatalogEntry]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._aliases = [
            (normalize(key), entry) for entry in self.entries for key in entry.keys
        ]

    def lookup(self, residual_query: str) -> CatalogMatch | None:
        """Return the best scoring entry, or None below the match threshold."""
        query = normalize(residual_query).strip()
        if not query:
            return None
        best_entry: FoodCatalogEntry | None = None
        best_score: float = 0
        for alias, entry in self._aliases:
            score = score_alias(query, alias)
            if score > best_score:
                best_score = score
                best_entry = entry
        if best_entry is None or best_score < self.min_score:
            return None
        return CatalogMatch(entry=best_entry, score=best_score)

    def resolve(self, description: str) -> NutritionEstimate | None:
        """Parse quantity, look up the food and scale it, or return None."""
        spec = parse_quantity(description)
        match = self.lookup(spec.residual_query)
        if match is None:
            _logger.debug("Catalog miss: query=%s", spec.residual_query)
            return None
        _logger.debug(
            "Catalog hit: query=%s entry=%s score=%s",
            spec.residual_query,
            match.entry.name,
            match.score,
        )
        return scale_entry(match.entry, spec)

    def aliases(self) -> list[str]:
        """Return every normalized alias in catalog order."""
        return [alias for alias, _ in self._aliases]


def scale_entry(entry: FoodCatalogEntry, spec: QuantitySpec) -> NutritionEstimate:
    """Scale an entry's nutrition values to the parsed quantity."""
    # A zero gram amount falls back to the default portion.
    if spec.gram_amount:
        if entry.per100g is not None:
            base = entry.per100g
            factor = spec.gram_amount / 100
            values = (base.calories, base.protein, base.carbs, base.fat)
        else:
            factor = spec.gram_amount / NOMINAL_PORTION_GRAMS
            values = (entry.calories, entry.protein, entry.carbs, entry.fat)
        name = _with_portion(entry.name, f"{format_amount(spec.gram_amount)}g")
    else:
        factor = spec.multiplier
        values = (entry.calories, entry.protein, entry.carbs, entry.fat)
        name = entry.name
        if spec.multiplier > 1:
            name = f"{format_amount(spec.multiplier)}x {entry.name}"

    calories, protein, carbs, fat = values
    return NutritionEstimate(
        name=name,
        calories=round_calories(calories * factor),
        protein=round_macro(protein * factor),
        carbs=round_macro(carbs * factor),
        fat=round_macro(fat * factor),
    )


def format_amount(value: float) -> str:
    """Format a quantity without a trailing ``.0``."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def _with_portion(name: str, portion: str) -> str:
    if _PARENTHETICAL.search(name):
        return _PARENTHETICAL.sub(f"({portion})", name, count=1)
    return f"{name} ({portion})"
