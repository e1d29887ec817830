from .geocoding import resolve_city, search_places  # noqa: F401
from .ranking import get_ranked_activities  # noqa: F401
from .scoring import rank_activity, rank_day  # noqa: F401
from .suggestions import get_suggestions  # noqa: F401
from .weather import fetch_forecast  # noqa: F401
