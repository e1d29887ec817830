from __future__ import annotations

import logging
from typing import List

import requests

from ..core.cities import known_city_names, normalize_city
from .geocoding import search_places


SUGGESTION_TIMEOUT_S = 2.0
EXTERNAL_SUGGESTION_COUNT = 5
MAX_SUGGESTIONS = 10

logger = logging.getLogger(__name__)


def get_suggestions(partial: str, timeout_s: float = SUGGESTION_TIMEOUT_S) -> List[str]:
    """Autocomplete city names for ``partial``.

    Local table matches (substring, case-insensitive) come first, then names
    from one geocoding lookup. The lookup is best-effort: on timeout, network
    or payload errors only the local matches are returned. Never raises.
    """
    if not partial or not partial.strip():
        return []

    needle = normalize_city(partial)
    local = [name for name in known_city_names() if needle in name.lower()]

    try:
        results = search_places(partial, count=EXTERNAL_SUGGESTION_COUNT, timeout_s=timeout_s)
        # entries without a usable name are skipped, not coerced
        external = [r["name"] for r in results if isinstance(r["name"], str) and r["name"]]
    except (requests.RequestException, ValueError, KeyError, TypeError) as exc:
        logger.warning("Suggestion lookup for %r failed, using local matches only: %s", partial, exc)
        return local[:MAX_SUGGESTIONS]

    # Deduplicate (exact string match, first occurrence wins)
    seen = set()
    merged: List[str] = []
    for name in local + external:
        if name in seen:
            continue
        seen.add(name)
        merged.append(name)

    return merged[:MAX_SUGGESTIONS]
