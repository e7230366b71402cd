"""Profile, API key, workout history, export and reset."""

from dataclasses import asdict, dataclass
from datetime import UTC, datetime

from fittrack.domain.meals import PersonalRecord, Profile, WorkoutEntry
from fittrack.errors import ValidationError
from fittrack.services.records import (
    as_float,
    as_int,
    as_list,
    generate_id,
    today_str,
)
from fittrack.services.store import STORE_KEYS, KeyValueStore

PROFILE_KEY = "profile"
WORKOUTS_KEY = "workouts"
API_KEY_KEY = "gemini_key"

_PROFILE_FIELDS = {
    "height": "height",
    "age": "age",
    "bodyWeight": "body_weight",
    "calorieGoal": "calorie_goal",
}


@dataclass
class UserDataService:
    """Single-user data kept in the key-value store."""

    store: KeyValueStore
    fallback_api_key: str | None = None

    def get_profile(self) -> Profile:
        """Return the stored profile merged over the defaults."""
        stored = self.store.get(PROFILE_KEY, {})
        defaults = asdict(Profile())
        if isinstance(stored, dict):
            for row_key, field_name in _PROFILE_FIELDS.items():
                if row_key in stored:
                    defaults[field_name] = as_float(stored[row_key], defaults[field_name])
        return Profile(
            height=defaults["height"],
            age=int(defaults["age"]),
            body_weight=defaults["body_weight"],
            calorie_goal=int(defaults["calorie_goal"]),
        )

    def set_profile(self, profile: Profile) -> None:
        """Persist the profile."""
        values = asdict(profile)
        self.store.set(
            PROFILE_KEY,
            {row_key: values[name] for row_key, name in _PROFILE_FIELDS.items()},
        )

    def get_api_key(self) -> str | None:
        """Return the user's Gemini key, else the configured one."""
        stored = self.store.get(API_KEY_KEY, "")
        if isinstance(stored, str) and stored.strip():
            return stored.strip()
        return self.fallback_api_key or None

    def set_api_key(self, api_key: str) -> None:
        """Store the user's Gemini key."""
        if not api_key.strip():
            raise ValidationError("API key is required.")
        self.store.set(API_KEY_KEY, api_key.strip())

    def add_workout(  # noqa: PLR0913
        self,
        exercise: str,
        weight: float,
        sets: int,
        reps: int,
        on: str | None = None,
    ) -> WorkoutEntry:
        """Add a workout; history stays sorted by date."""
        if not exercise.strip():
            raise ValidationError("Exercise name is required.")
        entry = WorkoutEntry(
            id=generate_id(),
            date=on or today_str(),
            exercise=exercise.strip(),
            weight=weight,
            sets=sets,
            reps=reps,
        )
        rows = as_list(self.store.get(WORKOUTS_KEY, []))
        rows.append(asdict(entry))
        rows.sort(key=lambda row: str(row.get("date", "")))
        self.store.set(WORKOUTS_KEY, rows)
        return entry

    def list_workouts(self) -> list[WorkoutEntry]:
        """Return the workout history sorted by date."""
        return [
            WorkoutEntry(
                id=str(row.get("id", "")),
                date=str(row.get("date", "")),
                exercise=str(row.get("exercise", "")),
                weight=as_float(row.get("weight")),
                sets=as_int(row.get("sets")),
                reps=as_int(row.get("reps")),
            )
            for row in as_list(self.store.get(WORKOUTS_KEY, []))
        ]

    def delete_workout(self, workout_id: str) -> None:
        """Delete a workout by id."""
        rows = as_list(self.store.get(WORKOUTS_KEY, []))
        self.store.set(WORKOUTS_KEY, [row for row in rows if row.get("id") != workout_id])

    def used_exercises(self) -> list[str]:
        """Return the distinct exercise names in the history, sorted."""
        return sorted({workout.exercise for workout in self.list_workouts()})

    def personal_records(self) -> dict[str, PersonalRecord]:
        """Return the heaviest workout per exercise."""
        records: dict[str, PersonalRecord] = {}
        for workout in self.list_workouts():
            best = records.get(workout.exercise)
            if best is None or workout.weight > best.weight:
                records[workout.exercise] = PersonalRecord(
                    exercise=workout.exercise,
                    weight=workout.weight,
                    sets=workout.sets,
                    reps=workout.reps,
                    date=workout.date,
                )
        return records

    def export_data(self) -> dict[str, object]:
        """Return the one-way export document."""
        profile = self.get_profile()
        return {
            "workouts": as_list(self.store.get(WORKOUTS_KEY, [])),
            "meals": as_list(self.store.get("meals", [])),
            "profile": {
                row_key: getattr(profile, name)
                for row_key, name in _PROFILE_FIELDS.items()
            },
            "exportedAt": datetime.now(tz=UTC).isoformat(),
        }

    def clear_all(self) -> None:
        """Delete every stored key, including the food cache and API key."""
        for key in STORE_KEYS:
            self.store.delete(key)
