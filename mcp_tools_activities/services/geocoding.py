from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from ..core.cities import KNOWN_CITIES, normalize_city
from ..core.errors import NotFoundError
from ..core.schemas import Coordinates


GEOCODING_BASE_URL = "https://geocoding-api.open-meteo.com/v1/search"
USER_AGENT = "activity-ranking-mcp/0.1 (local)"

logger = logging.getLogger(__name__)


def search_places(
    query: str,
    count: int,
    timeout_s: Optional[float] = None,
    user_agent: str = USER_AGENT,
) -> List[Dict[str, Any]]:
    """Token-free place search via the Open-Meteo geocoding API.

    Returns the raw ``results`` entries (possibly empty). The provider omits
    ``results`` entirely when nothing matches. Raises on network/HTTP/JSON
    errors; callers decide whether that is fatal.
    """
    params = {"name": query, "count": count}
    headers = {"User-Agent": user_agent}

    r = requests.get(GEOCODING_BASE_URL, params=params, headers=headers, timeout=timeout_s)
    r.raise_for_status()
    data = r.json()
    if not isinstance(data, dict):
        raise ValueError("Geocoding: unexpected payload")

    results = data.get("results") or []
    if not isinstance(results, list):
        raise ValueError("Geocoding: 'results' is not a list")
    return results


def resolve_city(city: str, timeout_s: Optional[float] = None) -> Coordinates:
    """Resolve a free-text city name to coordinates.

    The local table wins over the provider; the provider is queried with the
    caller's original spelling and asked for a single hit. Any provider
    failure is reported the same way as "no results".
    """
    key = normalize_city(city)
    known = KNOWN_CITIES.get(key)
    if known is not None:
        logger.debug("Resolved %r from local table", city)
        return known

    try:
        results = search_places(city, count=1, timeout_s=timeout_s)
        if results:
            first = results[0]
            return Coordinates(latitude=float(first["latitude"]), longitude=float(first["longitude"]))
    except (requests.RequestException, ValueError, KeyError, TypeError) as exc:
        logger.warning("Geocoding lookup for %r failed: %s", city, exc)
        raise NotFoundError(city) from exc

    raise NotFoundError(city)
