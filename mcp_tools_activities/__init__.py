"""mcp_tools_activities package

Purpose:
- Rank four activities (skiing, surfing, outdoor and indoor sightseeing) for
  each day of a 7-day Open-Meteo forecast, and autocomplete city names.
- Expose those services via an MCP server (official python-sdk / FastMCP), so an LLM can call tools.

Structure:
- core/: schemas, errors, local city table
- services/: geocoding/weather/scoring/suggestions + the ranking pipeline
- mcp/: FastMCP server + tool wiring
"""

from .core import (  # noqa: F401
    ACTIVITY_TYPES,
    ActivityRankingError,
    ActivityResult,
    ActivityType,
    Coordinates,
    DailyWeather,
    Forecast,
    NotFoundError,
    RankOutcome,
    UpstreamError,
)
from .services import get_ranked_activities, get_suggestions  # noqa: F401
