from __future__ import annotations

"""Weather service (Open-Meteo daily forecast).

Fetches a fixed 7-day daily forecast for a coordinate pair and normalizes the
index-aligned Open-Meteo arrays into ``DailyWeather`` records.

Normalization rules:
- a missing or null numeric value becomes 0 (so ranking never sees a hole;
  "no snow" and "snow not reported" are the same thing downstream)
- a day whose date cannot be parsed makes the whole payload malformed
- the number of days is whatever the provider returns; it is not enforced here

Open-Meteo infers the local timezone from the coordinates (``timezone=auto``),
so "today" is the provider's today for that location.
"""

import logging
from datetime import date
from typing import Any, Dict, List, Optional

import requests

from ..core.errors import UpstreamError
from ..core.schemas import Coordinates, DailyWeather, Forecast


FORECAST_BASE_URL = "https://api.open-meteo.com/v1/forecast"
FORECAST_DAYS = 7

# weathercode is requested for callers but not used by ranking.
DAILY_FIELDS = "temperature_2m_max,temperature_2m_min,precipitation_sum,snowfall_sum,weathercode"

logger = logging.getLogger(__name__)


def fetch_forecast(coords: Coordinates, timeout_s: Optional[float] = None) -> Forecast:
    """Return the daily forecast for ``coords``.

    Args:
        coords: Coordinates (latitude/longitude).
        timeout_s: Request timeout in seconds; None keeps the requests default.

    Raises:
        UpstreamError: network failure, non-2xx response or malformed payload.
    """
    params = {
        "latitude": coords.latitude,
        "longitude": coords.longitude,
        "daily": DAILY_FIELDS,
        "forecast_days": FORECAST_DAYS,
        "timezone": "auto",
    }

    logger.debug("Fetching forecast for %.4f,%.4f", coords.latitude, coords.longitude)
    try:
        r = requests.get(FORECAST_BASE_URL, params=params, timeout=timeout_s)
    except requests.RequestException as exc:
        raise UpstreamError(str(exc)) from exc

    if r.status_code >= 400:
        # Open-Meteo usually explains 400s in a "reason" field
        try:
            err = r.json()
            reason = err.get("reason") if isinstance(err, dict) else None
        except ValueError:
            reason = None
        extra = f" Reason: {reason}" if reason else ""
        raise UpstreamError(f"Open-Meteo request failed ({r.status_code}).{extra}")

    try:
        data = r.json()
        return _forecast_from_openmeteo(data, coords)
    except (ValueError, KeyError, TypeError) as exc:
        raise UpstreamError(str(exc)) from exc


def _forecast_from_openmeteo(data: Dict[str, Any], coords: Coordinates) -> Forecast:
    """Transform raw Open-Meteo payload into our domain model."""
    if not isinstance(data, dict):
        raise ValueError("Open-Meteo payload is not an object")
    daily = data.get("daily")
    if not isinstance(daily, dict):
        raise ValueError("Open-Meteo payload has no 'daily' block")
    times = daily.get("time")
    if not isinstance(times, list):
        raise ValueError("Open-Meteo payload has no 'daily.time' array")

    tmax = daily.get("temperature_2m_max")
    tmin = daily.get("temperature_2m_min")
    precip = daily.get("precipitation_sum")
    snow = daily.get("snowfall_sum")
    wcode = daily.get("weathercode")

    days: List[DailyWeather] = []
    for i, t in enumerate(times):
        days.append(
            DailyWeather(
                date=date.fromisoformat(t),
                temp_max=_value_at(tmax, i),
                temp_min=_value_at(tmin, i),
                precipitation=_value_at(precip, i),
                snowfall=_value_at(snow, i),
                weather_code=_safe_int(wcode, i),
            )
        )

    return Forecast(
        latitude=coords.latitude,
        longitude=coords.longitude,
        timezone=data.get("timezone"),
        days=days,
    )


def _value_at(arr: Optional[List[Any]], idx: int) -> float:
    """Numeric value at ``idx``; absent arrays, short arrays and nulls read as 0."""
    if not isinstance(arr, list) or idx >= len(arr):
        return 0.0
    v = arr[idx]
    return 0.0 if v is None else float(v)


def _safe_int(arr: Optional[List[Any]], idx: int) -> Optional[int]:
    try:
        v = arr[idx]
        return None if v is None else int(v)
    except (TypeError, ValueError, IndexError):
        return None
