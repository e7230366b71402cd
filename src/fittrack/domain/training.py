"""Training program and recommendation models."""

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class ExerciseLogRecord:
    """A logged strength-training set for one exercise on one day."""

    date: str
    exercise: str
    weight: float
    sets: int
    reps: int
    rpe: float
    id: str | None = None


@dataclass(frozen=True)
class ProgramExercise:
    """Exercise planned in a training program."""

    id: str
    exercise: str
    target_sets: int = 3
    target_reps: int = 10


@dataclass(frozen=True)
class Program:
    """Named list of planned exercises."""

    id: str
    name: str
    exercises: list[ProgramExercise] = field(default_factory=list)


@dataclass(frozen=True)
class ExerciseSummary:
    """Recent history of one program exercise, newest log first."""

    exercise: str
    target_sets: int
    target_reps: int
    recent_logs: list[ExerciseLogRecord]


class RecommendationAction(str, Enum):
    """Direction of the next-session load change."""

    INCREASE = "increase"
    MAINTAIN = "maintain"
    DECREASE = "decrease"


class Recommendation(BaseModel):
    """Next-session suggestion for a single exercise."""

    exercise: str
    action: RecommendationAction
    suggested_weight: float = Field(alias="suggestedWeight", ge=0)
    suggested_sets: int = Field(alias="suggestedSets", ge=0)
    suggested_reps: int = Field(alias="suggestedReps", ge=0)
    rationale: str = ""

    model_config = {"populate_by_name": True}


class RecommendationSource(str, Enum):
    """Which path produced a recommendation report."""

    AI = "ai"
    RULES = "rules"
    NONE = "none"


@dataclass(frozen=True)
class RecommendationReport:
    """Recommendations for the current program, or why there are none."""

    source: RecommendationSource
    recommendations: list[Recommendation]
    message: str | None = None
