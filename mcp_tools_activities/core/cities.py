from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping

from .schemas import Coordinates


# Common cities resolved without a network round-trip. Keys are lowercase.
KNOWN_CITIES: Mapping[str, Coordinates] = MappingProxyType({
    "london": Coordinates(latitude=51.5074, longitude=-0.1278),
    "paris": Coordinates(latitude=48.8566, longitude=2.3522),
    "new york": Coordinates(latitude=40.7128, longitude=-74.0060),
    "tokyo": Coordinates(latitude=35.6762, longitude=139.6503),
    "sydney": Coordinates(latitude=-33.8688, longitude=151.2093),
    "toronto": Coordinates(latitude=43.6532, longitude=-79.3832),
    "dubai": Coordinates(latitude=25.2048, longitude=55.2708),
    "mumbai": Coordinates(latitude=19.0760, longitude=72.8777),
})


def normalize_city(name: str) -> str:
    return (name or "").strip().lower()


def title_case(name: str) -> str:
    """Capitalize the first letter of each space-separated word ("new york" -> "New York")."""
    return " ".join(word[:1].upper() + word[1:] for word in name.split(" "))


def known_city_names() -> List[str]:
    """Display names of the local table, in table order."""
    return [title_case(key) for key in KNOWN_CITIES]
