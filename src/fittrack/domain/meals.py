"""Domain models for meal logging and user data."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MealEntry:
    """A logged meal with its macros."""

    id: str
    date: str
    name: str
    calories: int
    protein: float
    carbs: float
    fat: float
    meal_time: str | None = None


@dataclass(frozen=True)
class DailyTotals:
    """Aggregated macros for a single day."""

    date: str
    calories: int
    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class Profile:
    """Body metrics and the daily calorie goal."""

    height: float = 175
    age: int = 25
    body_weight: float = 75
    calorie_goal: int = 2000


@dataclass(frozen=True)
class WorkoutEntry:
    """A free-form workout history row."""

    id: str
    date: str
    exercise: str
    weight: float
    sets: int
    reps: int


@dataclass(frozen=True)
class PersonalRecord:
    """Heaviest logged weight for an exercise."""

    exercise: str
    weight: float
    sets: int
    reps: int
    date: str
