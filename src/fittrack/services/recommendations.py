"""Progressive-overload recommendations from strength-training logs."""

import json
import logging
import re
from dataclasses import asdict, dataclass

from pydantic import ValidationError as PydanticValidationError

from fittrack.domain.training import (
    ExerciseLogRecord,
    ExerciseSummary,
    ProgramExercise,
    Recommendation,
    RecommendationAction,
    RecommendationReport,
    RecommendationSource,
)
from fittrack.errors import FitTrackError, ResponseFormatError
from fittrack.services.catalog import format_amount
from fittrack.services.extraction import collect_text, strip_code_fences
from fittrack.services.generation import GenerationService

WEIGHT_STEP_KG = 2.5
RECENT_LOG_LIMIT = 5
EASY_RPE_MAX = 4
MODERATE_RPE_MAX = 7
RPE_DESCRIPTION_GROUP_MAX = 6

EMPTY_PROGRAM_MESSAGE = "Programınıza hareket ekleyin ve antrenman kaydedin."
NOT_ENOUGH_LOGS_MESSAGE = "Antrenman kayıtlarınız henüz analiz için yeterli değil."

COACH_PROMPT = """Sen bir fitness koçusun. Aşağıdaki antrenman verilerini analiz et ve her hareket için sonraki antrenmanda ne yapılması gerektiğini öner.

Kurallar:
- RPE 1-4: kolay, ağırlık artırılabilir
- RPE 5-7: uygun zorluk, duruma göre küçük artış veya aynı kal
- RPE 8-10: çok zor, ağırlık azaltılmalı veya set/tekrar düşürülmeli
- Progressive overload prensibi uygula
- Ağırlık artışını 2.5kg adımlarla öner
- Türkçe cevap ver

Veriler:
{data}

JSON formatında cevap ver. Her hareket için:
{{"recommendations": [
  {{
    "exercise": "hareket adı",
    "action": "increase" | "maintain" | "decrease",
    "suggestedWeight": 0,
    "suggestedSets": 0,
    "suggestedReps": 0,
    "rationale": "kısa açıklama"
  }}
]}}
Sadece JSON döndür, başka bir şey yazma."""

RPE_MEANINGS: dict[str, str] = {
    "10": "Ne daha fazla ağırlık, ne daha fazla tekrar yapılmazdı, maksimum efor.",
    "9.5": "Belki 1 tekrar ya da biraz daha ağır yapılabilirdi.",
    "9": "1 tekrar daha yapılabilirdi.",
    "8.5": "Kesin 1, belki 2 tekrar yapılabilirdi.",
    "8": "2 tekrar daha yapılabilirdi.",
    "7.5": "Kesin 2, belki 3 tekrar yapılabilirdi.",
    "7": "3 tekrar daha yapılabilirdi.",
    "6.5": "4-5 tekrar daha yapılabilirdi.",
    "6": "4-5 tekrar daha yapılabilirdi.",
    "5.5": "4-5 tekrar daha yapılabilirdi.",
    "5": "4-5 tekrar daha yapılabilirdi.",
    "4.5": "Oldukça basit efor.",
    "4": "Oldukça basit efor.",
    "3.5": "Oldukça basit efor.",
    "3": "Oldukça basit efor.",
    "2.5": "Oldukça basit efor.",
    "2": "Oldukça basit efor.",
    "1.5": "Oldukça basit efor.",
    "1": "Oldukça basit efor.",
}

_OBJECT_SPAN = re.compile(r"\{[\s\S]*\}")
_ARRAY_SPAN = re.compile(r"\[[\s\S]*\]")

_logger = logging.getLogger(__name__)


def describe_rpe(value: float | str) -> str:
    """Return the Turkish description of an RPE value."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return "Zorluk seviyesi seçin."
    text = RPE_MEANINGS.get(format_amount(number))
    if text:
        return text
    if number <= EASY_RPE_MAX:
        return RPE_MEANINGS["4"]
    if number <= RPE_DESCRIPTION_GROUP_MAX:
        return RPE_MEANINGS["6"]
    return "Zorluk seviyesi seçin."


def summarize_exercises(
    program_exercises: list[ProgramExercise],
    logs: list[ExerciseLogRecord],
    limit: int = RECENT_LOG_LIMIT,
) -> list[ExerciseSummary]:
    """Group logs per program exercise, newest first, dropping unlogged ones."""
    summaries: list[ExerciseSummary] = []
    for planned in program_exercises:
        recent = sorted(
            (log for log in logs if log.exercise == planned.exercise),
            key=lambda log: log.date,
            reverse=True,
        )[:limit]
        if recent:
            summaries.append(
                ExerciseSummary(
                    exercise=planned.exercise,
                    target_sets=planned.target_sets,
                    target_reps=planned.target_reps,
                    recent_logs=recent,
                )
            )
    return summaries


def rule_based_recommendation(latest: ExerciseLogRecord) -> Recommendation:
    """Apply the RPE threshold table to the most recent log."""
    weight = latest.weight
    sets_reps = f"{latest.sets}×{latest.reps}"
    if latest.rpe <= EASY_RPE_MAX:
        action = RecommendationAction.INCREASE
        suggested = weight + WEIGHT_STEP_KG
        rationale = (
            f"Ağırlık artır: {format_amount(weight)}kg → "
            f"{format_amount(suggested)}kg, {sets_reps}"
        )
    elif latest.rpe <= MODERATE_RPE_MAX:
        action = RecommendationAction.MAINTAIN
        suggested = weight
        rationale = f"Aynı ağırlıkla devam: {format_amount(weight)}kg, {sets_reps}"
    else:
        action = RecommendationAction.DECREASE
        suggested = max(weight - WEIGHT_STEP_KG, 0)
        rationale = (
            f"Ağırlık düşür veya tekrar azalt: {format_amount(weight)}kg → "
            f"{format_amount(suggested)}kg"
        )
    return Recommendation(
        exercise=latest.exercise,
        action=action,
        suggested_weight=suggested,
        suggested_sets=latest.sets,
        suggested_reps=latest.reps,
        rationale=rationale,
    )


def parse_recommendations(
    text: str, exercises: set[str]
) -> list[Recommendation]:
    """Read recommendation objects from model text, dropping invalid ones."""
    items = _recommendation_items(strip_code_fences(text))
    if items is None:
        raise ResponseFormatError(
            f"Unreadable AI response: {text[:100]}", excerpt=text[:100]
        )
    recommendations: list[Recommendation] = []
    for item in items:
        try:
            recommendation = Recommendation.model_validate(item)
        except PydanticValidationError:
            _logger.debug("Dropping invalid recommendation: %s", item)
            continue
        if recommendation.exercise in exercises:
            recommendations.append(recommendation)
    return recommendations


@dataclass
class RecommendationEngine:
    """Suggests next-session loads, preferring the model and falling back to rules."""

    generation: GenerationService | None = None

    async def recommend(
        self,
        program_exercises: list[ProgramExercise],
        logs: list[ExerciseLogRecord],
    ) -> RecommendationReport:
        """Return recommendations for every logged exercise of the program."""
        if not program_exercises or not logs:
            return RecommendationReport(
                source=RecommendationSource.NONE,
                recommendations=[],
                message=EMPTY_PROGRAM_MESSAGE,
            )
        summaries = summarize_exercises(program_exercises, logs)
        if not summaries:
            return RecommendationReport(
                source=RecommendationSource.NONE,
                recommendations=[],
                message=NOT_ENOUGH_LOGS_MESSAGE,
            )

        if self.generation is not None:
            try:
                recommendations = await self._recommend_with_ai(
                    self.generation, summaries
                )
            except FitTrackError:
                _logger.warning("AI recommendations failed", exc_info=True)
            else:
                if recommendations:
                    return RecommendationReport(
                        source=RecommendationSource.AI,
                        recommendations=recommendations,
                    )
                _logger.warning("AI returned no usable recommendations")

        return RecommendationReport(
            source=RecommendationSource.RULES,
            recommendations=self.fallback(summaries),
        )

    @staticmethod
    def fallback(summaries: list[ExerciseSummary]) -> list[Recommendation]:
        """Rule-based recommendations from each exercise's latest log."""
        return [
            rule_based_recommendation(summary.recent_logs[0])
            for summary in summaries
            if summary.recent_logs
        ]

    @staticmethod
    async def _recommend_with_ai(
        generation: GenerationService, summaries: list[ExerciseSummary]
    ) -> list[Recommendation]:
        data = [
            {
                "exercise": summary.exercise,
                "targetSets": summary.target_sets,
                "targetReps": summary.target_reps,
                "recentLogs": [
                    {
                        key: value
                        for key, value in asdict(log).items()
                        if key in {"date", "weight", "sets", "reps", "rpe"}
                    }
                    for log in summary.recent_logs
                ],
            }
            for summary in summaries
        ]
        prompt = COACH_PROMPT.format(
            data=json.dumps(data, ensure_ascii=False, indent=2)
        )
        response = await generation.generate(
            [{"text": prompt}],
            {"temperature": 0.2, "responseMimeType": "application/json"},
        )
        text = collect_text(response)
        if not text:
            raise ResponseFormatError("AI did not answer.")
        return parse_recommendations(text, {summary.exercise for summary in summaries})


def _recommendation_items(text: str) -> list[object] | None:
    candidates = [text]
    for pattern in (_OBJECT_SPAN, _ARRAY_SPAN):
        match = pattern.search(text)
        if match:
            candidates.append(match.group(0))
    for candidate in candidates:
        try:
            parsed = json.loads(candidate)
        except ValueError:
            continue
        if isinstance(parsed, list):
            return parsed
        if isinstance(parsed, dict) and isinstance(
            parsed.get("recommendations"), list
        ):
            return parsed["recommendations"]
    return None
