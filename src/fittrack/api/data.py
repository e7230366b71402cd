"""Meal, training and user data endpoints."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from fittrack.api.schemas import (
    ApiKeyUpdate,
    MealCreate,
    ProfileUpdate,
    ProgramCreate,
    ProgramExerciseCreate,
    ProgramLogCreate,
    WorkoutCreate,
)
from fittrack.domain.meals import Profile
from fittrack.services.recommendations import describe_rpe

if TYPE_CHECKING:
    from fittrack.containers import AppContainer

router = APIRouter()


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("/meals")
async def list_meals(request: Request, date: str | None = None) -> dict[str, object]:
    """Return logged meals, optionally for one day."""
    meals = _container(request).meal_log_service.list_meals(date)
    return {"meals": [asdict(meal) for meal in meals]}


@router.post("/meals", status_code=201)
async def add_meal(payload: MealCreate, request: Request) -> dict[str, object]:
    """Log a meal."""
    meal = _container(request).meal_log_service.add_meal(
        name=payload.name,
        calories=payload.calories,
        protein=payload.protein,
        carbs=payload.carbs,
        fat=payload.fat,
        meal_time=payload.meal_time,
        on=payload.date,
    )
    return asdict(meal)


@router.delete("/meals/{meal_id}")
async def delete_meal(meal_id: str, request: Request) -> dict[str, str]:
    """Delete a meal."""
    _container(request).meal_log_service.delete_meal(meal_id)
    return {"status": "deleted"}


@router.get("/meals/totals")
async def meal_totals(request: Request, date: str | None = None) -> dict[str, object]:
    """Return the macro totals of a day against the calorie goal."""
    container = _container(request)
    totals = container.meal_log_service.daily_totals(date)
    goal = container.user_data_service.get_profile().calorie_goal
    return {**asdict(totals), "calorieGoal": goal, "remaining": goal - totals.calories}


@router.get("/meals/history")
async def meal_history(request: Request, days: int = 7) -> dict[str, object]:
    """Return daily totals for recent days."""
    totals = _container(request).meal_log_service.recent_totals(days)
    return {"days": [asdict(day) for day in totals]}


@router.get("/programs")
async def list_programs(request: Request) -> dict[str, object]:
    """Return all programs and the selected one."""
    current_id, programs = _container(request).program_service.list_programs()
    return {"currentId": current_id, "programs": [asdict(p) for p in programs]}


@router.post("/programs", status_code=201)
async def add_program(payload: ProgramCreate, request: Request) -> dict[str, object]:
    """Create and select a program."""
    return asdict(_container(request).program_service.add_program(payload.name))


@router.delete("/programs/{program_id}")
async def delete_program(program_id: str, request: Request) -> dict[str, str]:
    """Delete a program."""
    _container(request).program_service.delete_program(program_id)
    return {"status": "deleted"}


@router.post("/programs/{program_id}/select")
async def select_program(program_id: str, request: Request) -> dict[str, object]:
    """Select a program."""
    service = _container(request).program_service
    service.switch_program(program_id)
    return asdict(service.current_program())


@router.post("/programs/current/exercises", status_code=201)
async def add_program_exercise(
    payload: ProgramExerciseCreate, request: Request
) -> dict[str, object]:
    """Add an exercise to the selected program."""
    exercise = _container(request).program_service.add_exercise(
        payload.exercise, payload.target_sets, payload.target_reps
    )
    return asdict(exercise)


@router.delete("/programs/current/exercises/{exercise_id}")
async def delete_program_exercise(exercise_id: str, request: Request) -> dict[str, str]:
    """Remove an exercise from the selected program."""
    _container(request).program_service.delete_exercise(exercise_id)
    return {"status": "deleted"}


@router.get("/programs/logs")
async def list_program_logs(request: Request) -> dict[str, object]:
    """Return logged program sessions."""
    logs = _container(request).program_service.list_logs()
    return {"logs": [asdict(log) for log in logs]}


@router.post("/programs/logs", status_code=201)
async def add_program_log(payload: ProgramLogCreate, request: Request) -> dict[str, object]:
    """Log a session for a program exercise."""
    record = _container(request).program_service.log_workout(
        exercise=payload.exercise,
        weight=payload.weight,
        sets=payload.sets,
        reps=payload.reps,
        rpe=payload.rpe,
        on=payload.date,
    )
    return asdict(record)


@router.delete("/programs/logs/{log_id}")
async def delete_program_log(log_id: str, request: Request) -> dict[str, str]:
    """Delete a program session."""
    _container(request).program_service.delete_log(log_id)
    return {"status": "deleted"}


@router.get("/recommendations")
async def recommendations(request: Request) -> dict[str, object]:
    """Return next-session recommendations for the selected program."""
    container = _container(request)
    program = container.program_service.current_program()
    report = await container.recommendation_engine.recommend(
        program.exercises, container.program_service.list_logs()
    )
    return {
        "source": report.source.value,
        "message": report.message,
        "recommendations": [
            item.model_dump(mode="json", by_alias=True)
            for item in report.recommendations
        ],
    }


@router.get("/rpe/{value}")
async def rpe_description(value: str) -> dict[str, str]:
    """Describe an RPE value."""
    return {"value": value, "description": describe_rpe(value)}


@router.get("/workouts")
async def list_workouts(request: Request) -> dict[str, object]:
    """Return the workout history and the exercises used so far."""
    service = _container(request).user_data_service
    return {
        "workouts": [asdict(workout) for workout in service.list_workouts()],
        "exercises": service.used_exercises(),
    }


@router.post("/workouts", status_code=201)
async def add_workout(payload: WorkoutCreate, request: Request) -> dict[str, object]:
    """Add a workout to the history."""
    workout = _container(request).user_data_service.add_workout(
        exercise=payload.exercise,
        weight=payload.weight,
        sets=payload.sets,
        reps=payload.reps,
        on=payload.date,
    )
    return asdict(workout)


@router.delete("/workouts/{workout_id}")
async def delete_workout(workout_id: str, request: Request) -> dict[str, str]:
    """Delete a workout."""
    _container(request).user_data_service.delete_workout(workout_id)
    return {"status": "deleted"}


@router.get("/workouts/records")
async def personal_records(request: Request) -> dict[str, object]:
    """Return the heaviest workout per exercise."""
    records = _container(request).user_data_service.personal_records()
    return {"records": [asdict(record) for record in records.values()]}


@router.get("/profile")
async def get_profile(request: Request) -> dict[str, object]:
    """Return the user profile."""
    return asdict(_container(request).user_data_service.get_profile())


@router.put("/profile")
async def update_profile(payload: ProfileUpdate, request: Request) -> dict[str, object]:
    """Replace the user profile."""
    profile = Profile(**payload.model_dump())
    _container(request).user_data_service.set_profile(profile)
    return asdict(profile)


@router.put("/settings/api-key")
async def update_api_key(payload: ApiKeyUpdate, request: Request) -> dict[str, str]:
    """Store the user's Gemini API key."""
    _container(request).user_data_service.set_api_key(payload.api_key)
    return {"status": "saved"}


@router.get("/export")
async def export_data(request: Request) -> dict[str, object]:
    """Return a JSON export of the stored data."""
    return _container(request).user_data_service.export_data()


@router.post("/reset")
async def reset_data(request: Request) -> dict[str, str]:
    """Delete every stored value."""
    _container(request).user_data_service.clear_all()
    return {"status": "cleared"}
