"""Pytest configuration and fixtures."""

from datetime import date, timedelta
from typing import Any, Dict, Optional
from unittest.mock import MagicMock, patch

import pytest
import requests

from mcp_tools_activities.services.geocoding import GEOCODING_BASE_URL
from mcp_tools_activities.services.weather import FORECAST_BASE_URL


def make_response(payload: Any = None, status_code: int = 200, json_error: Optional[Exception] = None) -> MagicMock:
    """Mimic the bits of requests.Response the services touch."""
    r = MagicMock(spec=requests.Response)
    r.status_code = status_code
    if json_error is not None:
        r.json.side_effect = json_error
    else:
        r.json.return_value = payload
    if status_code >= 400:
        r.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Client Error")
    return r


@pytest.fixture
def forecast_payload() -> Dict[str, Any]:
    """Seven days of Open-Meteo daily data starting today.

    avg temps: 2, 20, 10, 36, 0 (nulls), 7, 15
    """
    start = date.today()
    return {
        "latitude": 51.5,
        "longitude": -0.12,
        "timezone": "Europe/London",
        "daily": {
            "time": [(start + timedelta(days=i)).isoformat() for i in range(7)],
            "temperature_2m_max": [4.0, 25.0, 12.0, 38.0, None, 10.0, 20.0],
            "temperature_2m_min": [0.0, 15.0, 8.0, 34.0, None, 4.0, 10.0],
            "precipitation_sum": [0.0, 0.0, 8.0, 0.0, None, 0.5, 12.0],
            "snowfall_sum": [1.0, 0.0, 0.0, 0.0, None, 0.0, 0.0],
            "weathercode": [71, 0, 61, 0, None, 2, 65],
        },
    }


@pytest.fixture
def fake_http(forecast_payload):
    """Patch requests.get and route by endpoint.

    Tests swap entries in ``fake_http.responses`` ("forecast" / "geocoding");
    an exception instance is raised instead of returned.
    """
    responses: Dict[str, Any] = {
        "forecast": make_response(forecast_payload),
        "geocoding": make_response({"results": [{"name": "Berlin", "latitude": 52.52, "longitude": 13.405}]}),
    }

    def _get(url, params=None, headers=None, timeout=None):
        if url == FORECAST_BASE_URL:
            resp = responses["forecast"]
        elif url == GEOCODING_BASE_URL:
            resp = responses["geocoding"]
        else:
            raise AssertionError(f"unexpected URL {url}")
        if isinstance(resp, Exception):
            raise resp
        return resp

    with patch("requests.get", side_effect=_get) as mock_get:
        mock_get.responses = responses
        yield mock_get


def calls_to(mock_get: MagicMock, url: str):
    return [c for c in mock_get.call_args_list if c.args and c.args[0] == url]
