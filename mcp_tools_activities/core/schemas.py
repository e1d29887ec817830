from __future__ import annotations

from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ActivityType(str, Enum):
    """The four activities ranked per day, in output order."""
    SKIING = "Skiing"
    SURFING = "Surfing"
    OUTDOOR_SIGHTSEEING = "Outdoor Sightseeing"
    INDOOR_SIGHTSEEING = "Indoor Sightseeing"


ACTIVITY_TYPES = tuple(ActivityType)


class Coordinates(BaseModel):
    """Geographic coordinates in WGS84."""
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float


class DailyWeather(BaseModel):
    """One day of the Open-Meteo daily forecast.

    Missing provider values are normalized to 0 before the model is built,
    so ranking never sees an absent number. ``temp_min <= temp_max`` is
    trusted from the provider.
    """
    date: date
    temp_max: float
    temp_min: float
    precipitation: float = Field(0.0, description="Daily precipitation sum in mm")
    snowfall: float = Field(0.0, description="Daily snowfall sum in cm")
    weather_code: Optional[int] = None

    @property
    def avg_temp(self) -> float:
        return (self.temp_max + self.temp_min) / 2


class Forecast(BaseModel):
    """Daily forecast for one location, in chronological order."""
    latitude: float
    longitude: float
    timezone: Optional[str] = None
    days: List[DailyWeather] = Field(default_factory=list)


class RankOutcome(BaseModel):
    """Rank + explanation for one activity on one day."""
    model_config = ConfigDict(frozen=True)

    rank: int = Field(..., ge=1, le=10)
    reasoning: str = Field(..., min_length=1)


class ActivityResult(BaseModel):
    """Ranked activity for one forecast day."""
    model_config = ConfigDict(frozen=True)

    date: date
    activity: ActivityType
    rank: int = Field(..., ge=1, le=10)
    reasoning: str = Field(..., min_length=1)
