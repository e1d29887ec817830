from importlib.metadata import version

import pytest

from mcp_tools_activities.mcp import server

from .conftest import make_response


def test_rank_activities_tool_returns_results(fake_http):
    results = server.rank_activities("London")

    assert len(results) == 28


def test_rank_activities_tool_degrades_on_unknown_city(fake_http):
    fake_http.responses["geocoding"] = make_response({"results": []})

    assert server.rank_activities("Nowhereland12345") == []


def test_suggest_cities_tool(fake_http):
    assert server.suggest_cities("") == []
    assert "London" in server.suggest_cities("lon")


def test_rank_day_tool():
    outcome = server.rank_day("Skiing", "2026-01-15", temp_max=4.0, temp_min=0.0, precipitation=0.0, snowfall=1.0)

    assert outcome.rank == 9
    assert "1.0cm" in outcome.reasoning


def test_rank_day_tool_rejects_unknown_activity():
    with pytest.raises(ValueError):
        server.rank_day("Bungee", "2026-01-15", temp_max=20.0, temp_min=10.0, precipitation=0.0)


def test_list_activities_tool():
    assert server.list_activities() == ["Skiing", "Surfing", "Outdoor Sightseeing", "Indoor Sightseeing"]


def test_rank_day_tool_takes_day_keyword():
    outcome = server.rank_day(
        activity="Outdoor Sightseeing", day="2026-06-01", temp_max=25.0, temp_min=15.0, precipitation=0.0
    )

    assert outcome.rank == 10


def test_server_runs_on_fastmcp_1x():
    # FastMCP lives under mcp.server.fastmcp only in the 1.x line
    assert int(version("mcp").split(".")[0]) == 1
    assert server.mcp.name == "activity-ranking"
