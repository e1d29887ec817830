from __future__ import annotations

import logging
from typing import List, Optional

from ..core.errors import ActivityRankingError, UpstreamError
from ..core.schemas import ActivityResult
from .geocoding import resolve_city
from .scoring import rank_day
from .weather import fetch_forecast

logger = logging.getLogger(__name__)


def get_ranked_activities(city: str, timeout_s: Optional[float] = None) -> List[ActivityResult]:
    """Mini pipeline: resolve city + fetch forecast + rank every activity per day.

    Results are day-major, then in ``ACTIVITY_TYPES`` order (4 per day, so 28
    for a regular 7-day forecast).

    Raises:
        NotFoundError: the city could not be resolved (message contains "not found").
        UpstreamError: any other failure while resolving or fetching.
    """
    try:
        coords = resolve_city(city, timeout_s=timeout_s)
        forecast = fetch_forecast(coords, timeout_s=timeout_s)
    except ActivityRankingError:
        raise
    except Exception as exc:
        raise UpstreamError(str(exc)) from exc

    results: List[ActivityResult] = []
    for day in forecast.days:
        results.extend(rank_day(day))

    logger.debug("Ranked %d activities over %d days for %r", len(results), len(forecast.days), city)
    return results
