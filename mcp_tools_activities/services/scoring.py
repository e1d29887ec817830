from __future__ import annotations

from types import MappingProxyType
from typing import Callable, List, Mapping, Tuple

from ..core.schemas import ACTIVITY_TYPES, ActivityResult, ActivityType, DailyWeather, RankOutcome


MIN_RANK = 1
MAX_RANK = 10
DEFAULT_RANK = 5

# (predicate, rank, reasoning builder); the first matching rule of a ladder wins.
Rule = Tuple[Callable[[DailyWeather], bool], int, Callable[[DailyWeather], str]]


def _temp(d: DailyWeather) -> str:
    return f"{d.avg_temp:.1f}°C"


def _rain(d: DailyWeather) -> str:
    return f"{d.precipitation:.1f}mm"


def _snow(d: DailyWeather) -> str:
    return f"{d.snowfall:.1f}cm"


def _always(d: DailyWeather) -> bool:
    return True


SKIING: Tuple[Rule, ...] = (
    (
        lambda d: d.avg_temp < 5 and d.snowfall > 0.1,
        9,
        lambda d: f"Excellent conditions: {_snow(d)} snowfall and cold temperatures ({_temp(d)})",
    ),
    (
        lambda d: d.avg_temp < 10 and d.snowfall > 0,
        7,
        lambda d: f"Good conditions: {_snow(d)} snowfall, temperature {_temp(d)}",
    ),
    (
        lambda d: d.avg_temp < 15 and d.precipitation == 0,
        5,
        lambda d: f"Moderate conditions: cold enough ({_temp(d)}) but no fresh snow",
    ),
    (
        _always,
        2,
        lambda d: (
            f"Poor conditions: too warm ({_temp(d)}) and rain expected ({_rain(d)})"
            if d.precipitation > 0
            else f"Poor conditions: too warm ({_temp(d)}) and no snow"
        ),
    ),
)

SURFING: Tuple[Rule, ...] = (
    (
        lambda d: 15 <= d.avg_temp <= 30 and d.precipitation < 5,
        8,
        lambda d: f"Great conditions: warm water ({_temp(d)}), minimal rain ({_rain(d)})",
    ),
    (
        lambda d: 10 <= d.avg_temp < 15 and d.precipitation < 3,
        6,
        lambda d: f"Moderate conditions: cooler water ({_temp(d)}) but surfable, {_rain(d)} rain",
    ),
    (
        lambda d: d.avg_temp > 30,
        4,
        lambda d: f"Hot conditions: very warm ({_temp(d)}), may affect performance",
    ),
    (
        _always,
        3,
        lambda d: f"Poor conditions: too cold ({_temp(d)}) or heavy rain ({_rain(d)})",
    ),
)

OUTDOOR_SIGHTSEEING: Tuple[Rule, ...] = (
    (
        lambda d: 15 <= d.avg_temp <= 25 and d.precipitation < 1,
        10,
        lambda d: f"Perfect weather: pleasant temperature ({_temp(d)}), clear skies, {_rain(d)} rain",
    ),
    (
        lambda d: 10 <= d.avg_temp < 30 and d.precipitation < 3,
        8,
        lambda d: f"Good conditions: comfortable temperature ({_temp(d)}), light precipitation ({_rain(d)})",
    ),
    (
        lambda d: 3 <= d.precipitation < 10,
        5,
        lambda d: f"Moderate conditions: some rain expected ({_rain(d)}), bring an umbrella",
    ),
    (
        lambda d: d.precipitation >= 10 or d.avg_temp < 5 or d.avg_temp > 35,
        3,
        lambda d: (
            f"Challenging conditions: heavy rain ({_rain(d)})"
            if d.precipitation >= 10
            else f"Challenging conditions: extreme temperature ({_temp(d)})"
        ),
    ),
    # Reached when precipitation < 3 and 5 <= avg < 10 or 30 <= avg <= 35.
    (
        _always,
        6,
        lambda d: f"Fair conditions: temperature {_temp(d)}, {_rain(d)} precipitation",
    ),
)

INDOOR_SIGHTSEEING: Tuple[Rule, ...] = (
    (
        lambda d: d.precipitation > 5 or d.avg_temp < 0 or d.avg_temp > 35,
        9,
        lambda d: (
            f"Excellent alternative: poor outdoor conditions ({_rain(d)} rain), perfect for indoor activities"
            if d.precipitation > 5
            else f"Excellent alternative: poor outdoor conditions (extreme temperature {_temp(d)}), "
            "perfect for indoor activities"
        ),
    ),
    (
        lambda d: d.precipitation > 2 or d.avg_temp < 5 or d.avg_temp > 30,
        7,
        lambda d: (
            f"Good option: rainy ({_rain(d)}), comfortable indoor alternative"
            if d.precipitation > 2
            else f"Good option: extreme temperatures ({_temp(d)}), comfortable indoor alternative"
        ),
    ),
    (
        lambda d: 15 <= d.avg_temp <= 25 and d.precipitation < 1,
        4,
        lambda d: f"Weather is great outside ({_temp(d)}, {_rain(d)} rain), but indoor options are always available",
    ),
    (
        _always,
        6,
        lambda d: f"Always available: reliable option at {_temp(d)} with {_rain(d)} precipitation",
    ),
)

LADDERS: Mapping[ActivityType, Tuple[Rule, ...]] = MappingProxyType({
    ActivityType.SKIING: SKIING,
    ActivityType.SURFING: SURFING,
    ActivityType.OUTDOOR_SIGHTSEEING: OUTDOOR_SIGHTSEEING,
    ActivityType.INDOOR_SIGHTSEEING: INDOOR_SIGHTSEEING,
})


def rank_activity(activity: ActivityType, day: DailyWeather) -> RankOutcome:
    """Rank one activity for one day.

    Walks the activity's ladder top to bottom and takes the first rule whose
    predicate holds. The rank is always clamped to [1, 10].
    """
    rank = DEFAULT_RANK
    reasoning = f"Average conditions: temperature {_temp(day)}, {_rain(day)} precipitation"

    for predicate, rule_rank, explain in LADDERS[ActivityType(activity)]:
        if predicate(day):
            rank = rule_rank
            reasoning = explain(day)
            break

    return RankOutcome(rank=max(MIN_RANK, min(MAX_RANK, rank)), reasoning=reasoning)


def rank_day(day: DailyWeather) -> List[ActivityResult]:
    """Rank all four activities for ``day``, in ``ACTIVITY_TYPES`` order."""
    results: List[ActivityResult] = []
    for activity in ACTIVITY_TYPES:
        outcome = rank_activity(activity, day)
        results.append(
            ActivityResult(
                date=day.date,
                activity=activity,
                rank=outcome.rank,
                reasoning=outcome.reasoning,
            )
        )
    return results
