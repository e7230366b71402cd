"""Pydantic models for API request payloads."""

from pydantic import BaseModel, Field


class ResolveRequest(BaseModel):
    """Food text to resolve, either raw or as meal-form fields."""

    description: str | None = None
    amount: float | str | None = None
    unit: str | None = None
    name: str | None = None
    form_id: str | None = None


class FoodLogRequest(ResolveRequest):
    """Food text to resolve and store as a meal."""

    meal_time: str | None = None
    date: str | None = None


class PhotoRequest(BaseModel):
    """Base64-encoded food photo."""

    image_base64: str
    mime_type: str = "image/jpeg"


class MealCreate(BaseModel):
    """Meal entry submitted by the meal form."""

    name: str
    calories: float = Field(default=0, ge=0)
    protein: float = Field(default=0, ge=0)
    carbs: float = Field(default=0, ge=0)
    fat: float = Field(default=0, ge=0)
    meal_time: str | None = None
    date: str | None = None


class ProgramCreate(BaseModel):
    """New training program."""

    name: str | None = None


class ProgramExerciseCreate(BaseModel):
    """Exercise added to the current program."""

    exercise: str
    target_sets: int = Field(default=3, ge=1)
    target_reps: int = Field(default=10, ge=1)


class ProgramLogCreate(BaseModel):
    """Logged session for a program exercise."""

    exercise: str
    weight: float
    sets: int = Field(default=3, ge=1)
    reps: int = Field(default=10, ge=1)
    rpe: float = Field(default=5, ge=1, le=10)
    date: str | None = None


class WorkoutCreate(BaseModel):
    """Free-form workout history entry."""

    exercise: str
    weight: float = Field(ge=0)
    sets: int = Field(ge=1)
    reps: int = Field(ge=1)
    date: str | None = None


class ProfileUpdate(BaseModel):
    """Body metrics and calorie goal."""

    height: float = Field(default=175, gt=0)
    age: int = Field(default=25, gt=0)
    body_weight: float = Field(default=75, gt=0)
    calorie_goal: int = Field(default=2000, gt=0)


class ApiKeyUpdate(BaseModel):
    """Gemini API key supplied by the user."""

    api_key: str
