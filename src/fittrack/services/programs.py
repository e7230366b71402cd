"""Training programs and their workout logs."""

import logging
from dataclasses import dataclass

from fittrack.domain.training import ExerciseLogRecord, Program, ProgramExercise
from fittrack.errors import ValidationError
from fittrack.services.records import (
    as_float,
    as_int,
    as_list,
    generate_id,
    today_str,
)
from fittrack.services.store import KeyValueStore

PROGRAMS_KEY = "programs"
PROGRAM_LOGS_KEY = "programLogs"
LEGACY_PROGRAM_KEY = "program"

_logger = logging.getLogger(__name__)


@dataclass
class ProgramService:
    """Manages programs, their exercises and logged sessions."""

    store: KeyValueStore

    def list_programs(self) -> tuple[str, list[Program]]:
        """Return the current program id and all programs."""
        data = self._load()
        return str(data["currentId"]), [_program_from_row(row) for row in data["items"]]

    def current_program(self) -> Program:
        """Return the selected program, or the first one."""
        current_id, programs = self.list_programs()
        for program in programs:
            if program.id == current_id:
                return program
        return programs[0]

    def add_program(self, name: str | None = None) -> Program:
        """Create a program and select it."""
        data = self._load()
        program_id = generate_id()
        clean_name = (name or "").strip() or f"Program {len(data['items']) + 1}"
        data["items"].append({"id": program_id, "name": clean_name, "exercises": []})
        data["currentId"] = program_id
        self._save(data)
        return Program(id=program_id, name=clean_name)

    def delete_program(self, program_id: str) -> None:
        """Delete a program; the last remaining program cannot be deleted."""
        data = self._load()
        if len(data["items"]) <= 1:
            raise ValidationError("The last program cannot be deleted.")
        data["items"] = [row for row in data["items"] if row.get("id") != program_id]
        if data["currentId"] == program_id:
            data["currentId"] = data["items"][0].get("id")
        self._save(data)

    def switch_program(self, program_id: str) -> None:
        """Select a program if it exists."""
        data = self._load()
        if any(row.get("id") == program_id for row in data["items"]):
            data["currentId"] = program_id
            self._save(data)

    def add_exercise(
        self, exercise: str, target_sets: int = 3, target_reps: int = 10
    ) -> ProgramExercise:
        """Add an exercise to the current program."""
        clean_name = exercise.strip()
        if not clean_name:
            raise ValidationError("Exercise name is required.")
        planned = ProgramExercise(
            id=generate_id(),
            exercise=clean_name,
            target_sets=target_sets or 3,
            target_reps=target_reps or 10,
        )
        data = self._load()
        current = self._current_row(data)
        current["exercises"] = [
            *as_list(current.get("exercises")),
            {
                "id": planned.id,
                "exercise": planned.exercise,
                "targetSets": planned.target_sets,
                "targetReps": planned.target_reps,
            },
        ]
        self._save(data)
        return planned

    def delete_exercise(self, exercise_id: str) -> None:
        """Remove an exercise from the current program."""
        data = self._load()
        current = self._current_row(data)
        current["exercises"] = [
            row
            for row in as_list(current.get("exercises"))
            if row.get("id") != exercise_id
        ]
        self._save(data)

    def list_logs(self) -> list[ExerciseLogRecord]:
        """Return every logged program session."""
        return [
            _log_from_row(row)
            for row in as_list(self.store.get(PROGRAM_LOGS_KEY, []))
        ]

    def log_workout(  # noqa: PLR0913
        self,
        exercise: str,
        weight: float,
        sets: int = 3,
        reps: int = 10,
        rpe: float = 5,
        on: str | None = None,
    ) -> ExerciseLogRecord:
        """Record a session for a program exercise."""
        if not exercise.strip():
            raise ValidationError("Select an exercise.")
        if weight <= 0:
            raise ValidationError("Weight must be greater than zero.")
        record = ExerciseLogRecord(
            id=generate_id(),
            date=on or today_str(),
            exercise=exercise.strip(),
            weight=weight,
            sets=sets or 3,
            reps=reps or 10,
            rpe=rpe,
        )
        rows = as_list(self.store.get(PROGRAM_LOGS_KEY, []))
        rows.append(
            {
                "id": record.id,
                "date": record.date,
                "exercise": record.exercise,
                "weight": record.weight,
                "sets": record.sets,
                "reps": record.reps,
                "rpe": record.rpe,
            }
        )
        self.store.set(PROGRAM_LOGS_KEY, rows)
        return record

    def delete_log(self, log_id: str) -> None:
        """Delete a program log by id."""
        rows = as_list(self.store.get(PROGRAM_LOGS_KEY, []))
        self.store.set(
            PROGRAM_LOGS_KEY, [row for row in rows if row.get("id") != log_id]
        )

    def _load(self) -> dict[str, object]:
        data = self.store.get(PROGRAMS_KEY)
        if (
            isinstance(data, dict)
            and as_list(data.get("items"))
            and data.get("currentId") is not None
        ):
            return {"currentId": data["currentId"], "items": as_list(data["items"])}

        legacy = as_list(self.store.get(LEGACY_PROGRAM_KEY, []))
        default_id = generate_id()
        data = {
            "currentId": default_id,
            "items": [{"id": default_id, "name": "Program 1", "exercises": legacy}],
        }
        self._save(data)
        if legacy:
            _logger.info("Migrated legacy program with %s exercises", len(legacy))
            self.store.delete(LEGACY_PROGRAM_KEY)
        return data

    def _save(self, data: dict[str, object]) -> None:
        self.store.set(PROGRAMS_KEY, data)

    @staticmethod
    def _current_row(data: dict[str, object]) -> dict[str, object]:
        items = data["items"]
        for row in items:
            if row.get("id") == data["currentId"]:
                return row
        return items[0]


def _program_from_row(row: dict[str, object]) -> Program:
    return Program(
        id=str(row.get("id", "")),
        name=str(row.get("name", "")),
        exercises=[
            ProgramExercise(
                id=str(item.get("id", "")),
                exercise=str(item.get("exercise", "")),
                target_sets=as_int(item.get("targetSets"), 3),
                target_reps=as_int(item.get("targetReps"), 10),
            )
            for item in as_list(row.get("exercises"))
        ],
    )


def _log_from_row(row: dict[str, object]) -> ExerciseLogRecord:
    return ExerciseLogRecord(
        id=str(row.get("id", "")),
        date=str(row.get("date", "")),
        exercise=str(row.get("exercise", "")),
        weight=as_float(row.get("weight")),
        sets=as_int(row.get("sets"), 3),
        reps=as_int(row.get("reps"), 10),
        rpe=as_float(row.get("rpe"), 5),
    )
