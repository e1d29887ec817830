from .errors import ActivityRankingError, NotFoundError, UpstreamError  # noqa: F401
from .schemas import (  # noqa: F401
    ACTIVITY_TYPES,
    ActivityResult,
    ActivityType,
    Coordinates,
    DailyWeather,
    Forecast,
    RankOutcome,
)
