"""MCP server (official python-sdk) exposing mcp_tools_activities tools.

This uses FastMCP from the official MCP Python SDK:
- Tools are ordinary Python functions decorated with @mcp.tool().
- Schemas are derived automatically from type hints / Pydantic models.
- Transport (stdio or streamable HTTP) is picked on the command line.
"""

from __future__ import annotations

from datetime import date
from typing import List

import sys
import argparse
import logging

import uvicorn
from mcp.server.fastmcp import FastMCP

from ..core.errors import NotFoundError
from ..core.schemas import ACTIVITY_TYPES, ActivityResult, ActivityType, DailyWeather, RankOutcome
from ..services.ranking import get_ranked_activities
from ..services.scoring import rank_activity
from ..services.suggestions import get_suggestions


# ---------------------------------------------------------------------------
# MCP-Server & Tools
# ---------------------------------------------------------------------------

mcp = FastMCP(name="activity-ranking", stateless_http=False)

logger = logging.getLogger("activity-ranking-mcp")
logging.basicConfig(stream=sys.stderr, level=logging.INFO)


@mcp.tool()
def rank_activities(city: str) -> List[ActivityResult]:
    """Rank Skiing, Surfing, Outdoor and Indoor Sightseeing for each of the next 7 days in a city.

    Returns an empty list when the city cannot be found.
    """
    try:
        return get_ranked_activities(city)
    except NotFoundError as exc:
        logger.info("%s", exc)
        return []


@mcp.tool()
def suggest_cities(partial: str) -> List[str]:
    """Autocomplete city names (max. 10) for a partially typed name."""
    return get_suggestions(partial)


@mcp.tool()
def rank_day(
    activity: str,
    day: str,
    temp_max: float,
    temp_min: float,
    precipitation: float,
    snowfall: float = 0.0,
) -> RankOutcome:
    """Rank one activity for hypothetical daily weather (°C, mm, cm; day as YYYY-MM-DD)."""
    weather = DailyWeather(
        date=date.fromisoformat(day),
        temp_max=temp_max,
        temp_min=temp_min,
        precipitation=precipitation,
        snowfall=snowfall,
    )
    return rank_activity(ActivityType(activity), weather)


@mcp.tool()
def list_activities() -> List[str]:
    """The ranked activity types, in output order."""
    return [a.value for a in ACTIVITY_TYPES]


# ---------------------------------------------------------------------------
# ASGI-App for streamable HTTP & Uvicorn entry point
# ---------------------------------------------------------------------------

# the MCP endpoint is /mcp
starlette_app = mcp.streamable_http_app()


def main() -> None:
    """Start the activity-ranking MCP server (streamable HTTP via Uvicorn, or stdio)."""
    parser = argparse.ArgumentParser()
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8765)
    parser.add_argument("--transport", choices=["streamable-http", "stdio"], default="streamable-http")
    args = parser.parse_args()

    if args.transport == "stdio":
        logger.info("Starting activity-ranking MCP server (stdio) …")
        mcp.run()
        return

    logger.info(
        "Starting activity-ranking MCP server (streamable-http) on http://%s:%d/mcp …",
        args.host,
        args.port,
    )

    uvicorn.run(
        starlette_app,
        host=args.host,
        port=args.port,
        reload=False,
        loop="asyncio",
    )


if __name__ == "__main__":
    main()
