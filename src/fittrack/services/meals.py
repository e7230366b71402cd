"""Meal logging on top of the key-value store."""

from dataclasses import dataclass
from datetime import date, timedelta

from fittrack.domain.meals import DailyTotals, MealEntry
from fittrack.domain.nutrition import NutritionEstimate, round_macro
from fittrack.errors import ValidationError
from fittrack.services.records import (
    as_float,
    as_int,
    as_list,
    generate_id,
    today_str,
)
from fittrack.services.store import KeyValueStore

MEALS_KEY = "meals"


@dataclass
class MealLogService:
    """Service that validates and persists meal entries."""

    store: KeyValueStore

    def add_meal(  # noqa: PLR0913
        self,
        name: str,
        calories: float,
        protein: float = 0,
        carbs: float = 0,
        fat: float = 0,
        meal_time: str | None = None,
        on: str | None = None,
    ) -> MealEntry:
        """Validate and store a meal for a day (today by default)."""
        clean_name = name.strip()
        if not clean_name:
            raise ValidationError("Meal name is required.")
        if not any((calories, protein, carbs, fat)):
            raise ValidationError("At least one nutrition value is required.")
        entry = MealEntry(
            id=generate_id(),
            date=on or today_str(),
            name=clean_name,
            calories=int(calories),
            protein=float(protein),
            carbs=float(carbs),
            fat=float(fat),
            meal_time=meal_time,
        )
        rows = as_list(self.store.get(MEALS_KEY, []))
        rows.append(_to_row(entry))
        self.store.set(MEALS_KEY, rows)
        return entry

    def add_estimate(
        self,
        estimate: NutritionEstimate,
        meal_time: str | None = None,
        on: str | None = None,
    ) -> MealEntry:
        """Store a resolved estimate as a meal."""
        return self.add_meal(
            name=estimate.name,
            calories=estimate.calories,
            protein=estimate.protein,
            carbs=estimate.carbs,
            fat=estimate.fat,
            meal_time=meal_time,
            on=on,
        )

    def list_meals(self, on: str | None = None) -> list[MealEntry]:
        """Return meals, optionally only those of one day."""
        meals = [_from_row(row) for row in as_list(self.store.get(MEALS_KEY, []))]
        if on is None:
            return meals
        return [meal for meal in meals if meal.date == on]

    def delete_meal(self, meal_id: str) -> None:
        """Delete a meal by id."""
        rows = as_list(self.store.get(MEALS_KEY, []))
        self.store.set(MEALS_KEY, [row for row in rows if row.get("id") != meal_id])

    def daily_totals(self, on: str | None = None) -> DailyTotals:
        """Sum the macros of one day (today by default)."""
        day = on or today_str()
        meals = self.list_meals(day)
        return DailyTotals(
            date=day,
            calories=sum(meal.calories for meal in meals),
            protein=round_macro(sum(meal.protein for meal in meals)),
            carbs=round_macro(sum(meal.carbs for meal in meals)),
            fat=round_macro(sum(meal.fat for meal in meals)),
        )

    def recent_totals(self, days: int = 7, end: str | None = None) -> list[DailyTotals]:
        """Return daily totals for the last ``days`` days, oldest first."""
        last = date.fromisoformat(end) if end else date.fromisoformat(today_str())
        return [
            self.daily_totals((last - timedelta(days=offset)).isoformat())
            for offset in range(days - 1, -1, -1)
        ]


def _to_row(entry: MealEntry) -> dict[str, object]:
    return {
        "id": entry.id,
        "date": entry.date,
        "name": entry.name,
        "calories": entry.calories,
        "protein": entry.protein,
        "carbs": entry.carbs,
        "fat": entry.fat,
        "mealTime": entry.meal_time,
    }


def _from_row(row: dict[str, object]) -> MealEntry:
    return MealEntry(
        id=str(row.get("id", "")),
        date=str(row.get("date", "")),
        name=str(row.get("name", "")),
        calories=as_int(row.get("calories")),
        protein=as_float(row.get("protein")),
        carbs=as_float(row.get("carbs")),
        fat=as_float(row.get("fat")),
        meal_time=row.get("mealTime"),  # type: ignore[arg-type]
    )
