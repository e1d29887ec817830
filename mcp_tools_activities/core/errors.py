from __future__ import annotations


class ActivityRankingError(Exception):
    """Base class for errors surfaced by the ranking services."""


class NotFoundError(ActivityRankingError):
    """A city could not be resolved to coordinates."""

    def __init__(self, city: str) -> None:
        super().__init__(f'City "{city}" not found')
        self.city = city


class UpstreamError(ActivityRankingError):
    """The weather provider (or anything else upstream) failed."""

    PREFIX = "Failed to fetch weather data: "

    def __init__(self, reason: str) -> None:
        super().__init__(f"{self.PREFIX}{reason}")
        self.reason = reason
