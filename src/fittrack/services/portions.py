"""Portion unit selection based on food-name keywords."""

from dataclasses import dataclass

from fittrack.domain.portions import (
    CATEGORY_KEYWORDS,
    CATEGORY_UNITS,
    UNIT_LABELS,
    PortionCategory,
)
from fittrack.services.catalog import format_amount

DEFAULT_UNIT = "porsiyon"


@dataclass(frozen=True)
class PortionMenu:
    """Units offered for a food name and the one to preselect."""

    category: PortionCategory
    units: list[str]
    selected: str

    def labelled(self) -> list[tuple[str, str]]:
        """Return ``(unit, display label)`` pairs in menu order."""
        return [(unit, UNIT_LABELS.get(unit, unit)) for unit in self.units]


@dataclass(frozen=True)
class PortionUnitResolver:
    """Classifies food names into portion categories."""

    keywords: tuple[tuple[PortionCategory, tuple[str, ...]], ...] = CATEGORY_KEYWORDS
    category_units: dict[PortionCategory, tuple[str, ...]] | None = None

    def classify(self, food_name: str | None) -> PortionCategory:
        """Return the first category whose keyword occurs in the name."""
        if not food_name:
            return PortionCategory.GRAM_ONLY
        query = food_name.replace("İ", "i").lower().strip()
        for category, words in self.keywords:
            if any(word in query for word in words):
                return category
        return PortionCategory.GRAM_ONLY

    def units_for(self, category: PortionCategory) -> list[str]:
        """Return the ordered units for a category; the first is the default."""
        table = self.category_units or CATEGORY_UNITS
        return list(table.get(category, table[PortionCategory.GRAM_ONLY]))

    def options_for(self, food_name: str | None, current: str | None = None) -> PortionMenu:
        """Build the unit menu, keeping the current unit when still offered."""
        category = self.classify(food_name)
        units = self.units_for(category)
        selected = current if current in units else units[0]
        return PortionMenu(category=category, units=units, selected=selected)


def compose_query(amount: float | str | None, unit: str | None, name: str) -> str:
    """Assemble ``"<amount> <unit> <name>"`` as sent by the meal form."""
    if amount is None or amount == "":
        amount_text = "1"
    elif isinstance(amount, str):
        amount_text = amount.strip()
    else:
        amount_text = format_amount(amount)
    return f"{amount_text} {unit or DEFAULT_UNIT} {name.strip()}"
