"""Query handling for station, train and city autocomplete."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Optional

from . import config
from .data_loader import load_cities, load_stations, load_trains
from .fuzzy import FuzzyIndex, SearchKey
from .models import City, Station, Train
from .normalize import normalize

STATION_KEYS = [SearchKey("search_text", 1.0)]
TRAIN_KEYS = [
    SearchKey("number", 0.6),
    SearchKey("tokens", 0.3),
    SearchKey("name", 0.1),
]
CITY_KEYS = [SearchKey("search_text", 1.0)]

_TRAIN_NUMBER = re.compile(config.TRAIN_NUMBER_PATTERN)


class QueryError(ValueError):
    """The search query is missing or blank."""


def require_query(raw: Optional[str]) -> str:
    """Validate a raw ``q`` parameter and return it normalized.

    Raises:
        QueryError: if the query is missing or only whitespace
    """
    if raw is None or not raw.strip():
        raise QueryError("Query parameter 'q' is required")
    return normalize(raw)


class SearchCatalog:
    """Immutable station, train and city collections with their fuzzy indexes.

    Everything is built in the constructor; the search methods only read, so
    one catalog can be shared by any number of concurrent requests.
    """

    def __init__(
        self,
        stations: Iterable[Station] = (),
        trains: Iterable[Train] = (),
        cities: Iterable[City] = (),
    ):
        self.stations = tuple(stations)
        self.trains = tuple(trains)
        self.cities = tuple(cities)

        self.station_index = FuzzyIndex(self.stations, STATION_KEYS, config.STATION_THRESHOLD)
        self.train_index = FuzzyIndex(self.trains, TRAIN_KEYS, config.TRAIN_THRESHOLD)
        self.city_index = FuzzyIndex(self.cities, CITY_KEYS, config.CITY_THRESHOLD)

    @classmethod
    def from_files(
        cls,
        stations_path: Path = config.STATIONS_FILE,
        trains_path: Path = config.TRAINS_FILE,
        cities_path: Path = config.CITIES_FILE,
    ) -> SearchCatalog:
        """Load all three data files. Raises DataFormatError on a malformed file."""
        return cls(
            stations=load_stations(stations_path),
            trains=load_trains(trains_path),
            cities=load_cities(cities_path),
        )

    def counts(self) -> dict[str, int]:
        return {
            "stations": len(self.stations),
            "trains": len(self.trains),
            "cities": len(self.cities),
        }

    def search_stations(self, query: Optional[str], limit: int = config.RESULT_LIMIT) -> list[Station]:
        """Find stations by name, city, vowel-less abbreviation or code."""
        q = require_query(query)
        return [hit.item for hit in self.station_index.search(q, limit)]

    def search_trains(self, query: Optional[str], limit: int = config.RESULT_LIMIT) -> list[Train]:
        """Find trains by number or name.

        A query of 3-5 digits first looks for trains whose number contains
        it; those are returned in load order without fuzzy ranking. Only when
        none contain it does the query go to the fuzzy index.
        """
        q = require_query(query)

        if _TRAIN_NUMBER.fullmatch(q):
            exact = [train for train in self.trains if q in train.number]
            if exact:
                return exact[:limit]

        return [hit.item for hit in self.train_index.search(q, limit)]

    def search_cities(self, query: Optional[str], limit: int = config.RESULT_LIMIT) -> list[City]:
        """Find bus cities by name, state or vowel-less abbreviation."""
        q = require_query(query)
        return [hit.item for hit in self.city_index.search(q, limit)]
